"""
  asa Reader: grammar productions

Each production is a function parser(text) -> (node, rest) built from
asa.reader.combinators. A production that does not match raises NoMatch and
the caller tries its next alternative; a malformed number literal raises
AsaParseError, which aborts the whole parse.

Grammar (see asa.types.node for the tree shapes):

    program      := (function_def | statement | expression)+
    function_def := "fn" ident "(" (expr ("," expr)*)? ")" "{" statement+ "}"
    statement    := (var_def | func_call ";"? | func_return | if_stmt)
    var_def      := "let" ident "=" expr ";"
    func_return  := "return" (func_call | expr | ident) ";"
    if_stmt      := "if" "(" conditional ")" "{" statement+ "}"
    conditional  := expr ("==" | "!=") expr
    expr         := boolean | math_expr | number | func_call | string | ident
    math_expr    := l1
    l1           := l2 (("+" | "-") l2)*
    l2           := l3 (("*" | "/") l3)*
    l3           := l4 ("^" l4)*
    l4           := func_call | number | ident | "(" l1 ")"

Whitespace is handled rule by rule, not by a tokenizer: expressions only skip
spaces, while tabs and newlines are skipped around blocks and between
statements.

Operator chains fold to the right: `10 - 3 - 2` reads as `10 - (3 - 2)`.
"""

from __future__ import annotations

from asa.errors import AsaParseError
from asa.reader.combinators import (
    NoMatch, alt, delimited, many0, many1, opt, regex, separated_list, tag, terminated,
)
from asa.types.node import (
    Bool, Conditional, Expression, FunctionArguments, FunctionCall, FunctionDefine,
    FunctionReturn, Identifier, IfStatement, MathExpression, Node, Number, Program,
    Statement, String, VariableDefine,
)
from asa.types.values import fits_i32


ws_inline = many0(tag(" "))
ws_block = many0(alt(tag(" "), tag("\t"), tag("\n")))

_alphanumeric = regex(r"[A-Za-z0-9]+", "alphanumeric")
_digits = regex(r"[0-9]+", "digits")

# `,` plus any spaces, so a literal after ", " is not read as an identifier
_argument_separator = terminated(tag(","), ws_inline)


# ----------------- Literals -----------------
def identifier(text: str) -> tuple[Identifier, str]:
    _, text = ws_inline(text)
    name, rest = _alphanumeric(text)
    return Identifier(name), rest


def number(text: str) -> tuple[Number, str]:
    digits, rest = _digits(text)
    significant = digits.lstrip("0")
    if len(significant) > 10 or not fits_i32(int(digits)):
        raise AsaParseError(f"number literal {digits} does not fit in a 32-bit integer", remaining=text)
    return Number(int(digits)), rest


def boolean(text: str) -> tuple[Bool, str]:
    word, rest = alt(tag("true"), tag("false"))(text)
    return Bool(word == "true"), rest


def string(text: str) -> tuple[String, str]:
    """Double-quoted text, no escapes. An unterminated string does not match."""
    if not text.startswith('"'):
        raise NoMatch("string", text)
    end = text.find('"', 1)
    if end == -1:
        raise NoMatch("closing '\"'", text)
    return String(text[1:end]), text[end + 1:]


# ----------------- Arithmetic -----------------
def _fold_right(head: Node, pairs: list[tuple[str, Node]]) -> Node:
    """head op1 x1 op2 x2 ... -> head op1 (x1 op2 (x2 ...))"""
    if not pairs:
        return head
    operands = [head] + [operand for _, operand in pairs]
    result = operands[-1]
    for index in range(len(pairs) - 1, -1, -1):
        result = MathExpression(pairs[index][0], (operands[index], result))
    return result


def _infix(operators: tuple[str, ...], operand):
    operator = alt(*(tag(op) for op in operators))

    def parse(text: str) -> tuple[tuple[str, Node], str]:
        _, text = ws_inline(text)
        op, text = operator(text)
        _, text = ws_inline(text)
        rhs, text = operand(text)
        return (op, rhs), text
    return parse


def _level(operators: tuple[str, ...], operand):
    trailing = many0(_infix(operators, operand))

    def parse(text: str) -> tuple[Node, str]:
        head, text = operand(text)
        pairs, text = trailing(text)
        return _fold_right(head, pairs), text
    return parse


def parenthetical_expression(text: str) -> tuple[Node, str]:
    return delimited(tag("("), l1, tag(")"))(text)


def l4(text: str) -> tuple[Node, str]:
    return alt(function_call, number, identifier, parenthetical_expression)(text)


l3 = _level(("^",), l4)
l2 = _level(("*", "/"), l3)
l1 = _level(("+", "-"), l2)


def math_expression(text: str) -> tuple[Node, str]:
    return l1(text)


# ----------------- Expressions -----------------
def function_call(text: str) -> tuple[FunctionCall, str]:
    name, text = _alphanumeric(text)
    _, text = tag("(")(text)
    arguments, text = separated_list(_argument_separator, expression)(text)
    _, text = tag(")")(text)
    return FunctionCall(name, (FunctionArguments(tuple(arguments)),)), text


def expression(text: str) -> tuple[Expression, str]:
    # most specific first: `true` would otherwise be read as an identifier
    node, rest = alt(boolean, math_expression, number, function_call, string, identifier)(text)
    return Expression((node,)), rest


def conditional(text: str) -> tuple[Conditional, str]:
    lhs, text = expression(text)
    _, text = ws_inline(text)
    op, text = alt(tag("=="), tag("!="))(text)
    _, text = ws_inline(text)
    rhs, text = expression(text)
    return Conditional(op, (lhs, rhs)), text


# ----------------- Statements -----------------
def if_statement(text: str) -> tuple[IfStatement, str]:
    _, text = tag("if")(text)
    _, text = ws_inline(text)
    condition, text = delimited(tag("("), conditional, tag(")"))(text)
    statements, text = _block(text)
    return IfStatement((condition, *statements)), text


def variable_define(text: str) -> tuple[VariableDefine, str]:
    _, text = tag("let ")(text)
    name, text = identifier(text)
    _, text = ws_inline(text)
    _, text = tag("=")(text)
    _, text = ws_inline(text)
    value, text = expression(text)
    _, text = tag(";")(text)
    return VariableDefine((name, value)), text


def function_return(text: str) -> tuple[FunctionReturn, str]:
    _, text = tag("return ")(text)
    value, text = alt(function_call, expression, identifier)(text)
    _, text = tag(";")(text)
    return FunctionReturn((value,)), text


_call_statement = terminated(function_call, opt(tag(";")))


def statement(text: str) -> tuple[Statement, str]:
    node, text = alt(variable_define, _call_statement, function_return, if_statement)(text)
    _, text = ws_block(text)
    return Statement((node,)), text


def _block(text: str) -> tuple[list[Statement], str]:
    """`{ statement+ }` with tabs and newlines allowed around the statements."""
    _, text = ws_block(text)
    _, text = tag("{")(text)
    _, text = ws_block(text)
    statements, text = many1(statement)(text)
    _, text = ws_block(text)
    _, text = tag("}")(text)
    return statements, text


def function_definition(text: str) -> tuple[FunctionDefine, str]:
    _, text = ws_block(text)
    _, text = tag("fn ")(text)
    _, text = ws_block(text)
    name, text = identifier(text)
    parameters, text = delimited(
        tag("("), separated_list(_argument_separator, expression), tag(")")
    )(text)
    statements, text = _block(text)
    _, text = ws_block(text)
    return FunctionDefine((name, FunctionArguments(tuple(parameters)), *statements)), text


def program(text: str) -> tuple[Program, str]:
    children, text = many1(alt(function_definition, statement, expression))(text)
    return Program(tuple(children)), text


# ----------------- Entry point -----------------
def _position(source: str, rest: str) -> tuple[int, int]:
    offset = len(source) - len(rest)
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def parse_program(source: str) -> Program:
    """Parse a whole source file into a Program.

    Raises AsaParseError if nothing parses, if a literal is malformed, or if any
    input other than surrounding whitespace is left over.
    """
    _, text = ws_block(source)
    if not text:
        raise AsaParseError("empty program", *_position(source, text))
    try:
        tree, rest = program(text)
    except NoMatch as ex:
        raise AsaParseError(f"invalid syntax, {ex}", *_position(source, ex.rest)) from None
    except AsaParseError as ex:
        if ex.line is None and ex.remaining is not None:
            raise AsaParseError(ex.message, *_position(source, ex.remaining)) from None
        raise

    _, rest = ws_block(rest)
    if rest:
        snippet = rest.split("\n", 1)[0][:20]
        raise AsaParseError(f"unexpected input {snippet!r}", *_position(source, rest))
    return tree
