"""
  Parser combinators for the asa reader

- Every parser is a plain callable: parser(text) -> (result, rest)
- A mismatch raises NoMatch and consumes nothing: the caller still holds the
  text it passed in, so alternation can simply try the next candidate.
- Any other exception is fatal and propagates through every combinator
  (e.g. AsaParseError for a number literal that does not fit).
"""

from __future__ import annotations

import re
from typing import Any, Callable


Parser = Callable[[str], tuple[Any, str]]


class NoMatch(Exception):
    """A production did not match. `rest` is the text at the point of failure."""

    def __init__(self, expected: str, rest: str):
        super().__init__(f"expected {expected}")
        self.expected = expected
        self.rest = rest


def tag(literal: str) -> Parser:
    """Match `literal` exactly."""
    def parse(text: str) -> tuple[str, str]:
        if text.startswith(literal):
            return literal, text[len(literal):]
        raise NoMatch(repr(literal), text)
    return parse


def regex(pattern: str, expected: str | None = None) -> Parser:
    """Match `pattern` anchored at the start of the text; yields the matched string."""
    compiled = re.compile(pattern)
    description = expected or pattern

    def parse(text: str) -> tuple[str, str]:
        m = compiled.match(text)
        if not m or not m.group(0):
            raise NoMatch(description, text)
        return m.group(0), text[m.end():]
    return parse


def alt(*parsers: Parser) -> Parser:
    """Try each parser in order and return the first success."""
    def parse(text: str) -> tuple[Any, str]:
        failure = None
        for parser in parsers:
            try:
                return parser(text)
            except NoMatch as ex:
                # keep the failure that got furthest, for error reporting
                if failure is None or len(ex.rest) < len(failure.rest):
                    failure = ex
        raise failure if failure is not None else NoMatch("alternative", text)
    return parse


def many0(parser: Parser) -> Parser:
    """Zero or more repetitions; stops at the first mismatch or at a match that consumes nothing."""
    def parse(text: str) -> tuple[list, str]:
        results = []
        while True:
            try:
                result, rest = parser(text)
            except NoMatch:
                return results, text
            if len(rest) == len(text):
                return results, text
            results.append(result)
            text = rest
    return parse


def many1(parser: Parser) -> Parser:
    """One or more repetitions."""
    repeat = many0(parser)

    def parse(text: str) -> tuple[list, str]:
        first, rest = parser(text)
        results, rest = repeat(rest)
        return [first, *results], rest
    return parse


def separated_list(separator: Parser, element: Parser) -> Parser:
    """Zero or more `element`s separated by `separator`; a dangling separator is left unconsumed."""
    def parse(text: str) -> tuple[list, str]:
        try:
            first, text = element(text)
        except NoMatch:
            return [], text
        results = [first]
        while True:
            try:
                _, after_sep = separator(text)
                item, after_item = element(after_sep)
            except NoMatch:
                return results, text
            results.append(item)
            text = after_item
    return parse


def preceded(first: Parser, second: Parser) -> Parser:
    """Run both, keep the second result."""
    def parse(text: str) -> tuple[Any, str]:
        _, rest = first(text)
        return second(rest)
    return parse


def terminated(first: Parser, second: Parser) -> Parser:
    """Run both, keep the first result."""
    def parse(text: str) -> tuple[Any, str]:
        result, rest = first(text)
        _, rest = second(rest)
        return result, rest
    return parse


def delimited(left: Parser, inner: Parser, right: Parser) -> Parser:
    """Run all three, keep the middle result."""
    return preceded(left, terminated(inner, right))


def opt(parser: Parser) -> Parser:
    """Optional parser: yields None (consuming nothing) on mismatch."""
    def parse(text: str) -> tuple[Any, str]:
        try:
            return parser(text)
        except NoMatch:
            return None, text
    return parse


def map_result(parser: Parser, fn: Callable[[Any], Any]) -> Parser:
    """Transform a successful parser's result."""
    def parse(text: str) -> tuple[Any, str]:
        result, rest = parser(text)
        return fn(result), rest
    return parse
