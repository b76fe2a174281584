"""User-defined function representation for asa."""

from __future__ import annotations

from io import StringIO

from asa.errors import AsaMalformedNode
from asa.types.node import Expression, FunctionArguments, FunctionDefine, Identifier, Node


class Function:
    """A named function: ordered parameter names and ordered body statements."""

    __slots__ = ("name", "params", "body")

    def __init__(self, name: str, params: list[str], body: tuple[Node, ...]):
        self.name: str = name
        self.params: list[str] = params
        self.body: tuple[Node, ...] = body

    @classmethod
    def from_node(cls, node: FunctionDefine) -> Function:
        """Build a Function from a FunctionDefine node.

        Parameters arrive from the parser as Expression nodes; each one must wrap a
        bare Identifier. Anything else raises AsaMalformedNode.
        """
        if len(node.children) < 2:
            raise AsaMalformedNode("function definition requires a name and an argument list")
        name_node, args_node, *body = node.children
        if not isinstance(name_node, Identifier):
            raise AsaMalformedNode(f"function name must be an identifier, got {name_node}")
        if not isinstance(args_node, FunctionArguments):
            raise AsaMalformedNode(f"function {name_node.value} is missing its argument list")

        params = []
        for param in args_node.children:
            inner = param.children[0] if isinstance(param, Expression) and param.children else param
            if not isinstance(inner, Identifier):
                raise AsaMalformedNode(f"parameter of {name_node.value} must be an identifier, got {inner}")
            params.append(inner.value)
        return cls(name_node.value, params, tuple(body))

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("fn ")
            buffer.write(self.name)
            buffer.write("(")
            buffer.write(", ".join(self.params))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Function({self.name!r}, {self.params!r}, <{len(self.body)} statements>)"
