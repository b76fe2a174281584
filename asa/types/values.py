"""Helpers for asa runtime values.

Numbers are int, Bools are bool and Strings are str. Because bool subclasses
int, every check here compares the exact type.
"""

from __future__ import annotations

from asa import Value

I32_MIN = -(2 ** 31)
I32_MAX = 2 ** 31 - 1


def is_number(value: Value) -> bool:
    return type(value) is int


def is_bool(value: Value) -> bool:
    return type(value) is bool


def is_string(value: Value) -> bool:
    return type(value) is str


def fits_i32(number: int) -> bool:
    return I32_MIN <= number <= I32_MAX


def values_equal(lhs: Value, rhs: Value) -> bool:
    """Equality without coercion: values of different variants are never equal."""
    return type(lhs) is type(rhs) and lhs == rhs


def type_name(value: Value) -> str:
    if is_bool(value):
        return "Bool"
    if is_number(value):
        return "Number"
    if is_string(value):
        return "String"
    return type(value).__name__


def render(value: Value) -> str:
    """Text written by print: strings verbatim, booleans as true/false, numbers in decimal."""
    if is_bool(value):
        return "true" if value else "false"
    return str(value)
