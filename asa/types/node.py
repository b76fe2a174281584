"""Abstract syntax tree for asa.

The parser builds these nodes once and the evaluator only reads them. Nodes are
frozen dataclasses holding their children as tuples, so a tree can be shared
between the function table, the entry slot and the caller without copying.

Branch nodes carry ``children`` (and operators/callees carry ``name``); the four
leaves carry a literal ``value``.
"""

from __future__ import annotations

from dataclasses import dataclass


class Node:
    """Marker base class for every AST variant."""

    __slots__ = ()


@dataclass(frozen=True)
class Program(Node):
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Statement(Node):
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class FunctionDefine(Node):
    """children[0] is the name, children[1] the FunctionArguments, the rest is the body."""
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class FunctionArguments(Node):
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class FunctionReturn(Node):
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class IfStatement(Node):
    """children[0] is the Conditional, the rest is the body."""
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Conditional(Node):
    name: str
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Expression(Node):
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class MathExpression(Node):
    name: str
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class FunctionCall(Node):
    name: str
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class VariableDefine(Node):
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Identifier(Node):
    value: str


@dataclass(frozen=True)
class Number(Node):
    value: int


@dataclass(frozen=True)
class Bool(Node):
    value: bool


@dataclass(frozen=True)
class String(Node):
    value: str
