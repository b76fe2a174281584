from asa import EvaluatorFn, Value
from asa.errors import AsaMalformedNode
from asa.types.node import (
    Bool, Expression, FunctionCall, FunctionReturn, Identifier, IfStatement,
    MathExpression, Node, Number, Statement, String, VariableDefine,
)
from asa.types.runtime import Runtime

STATEMENT_KINDS = (VariableDefine, FunctionReturn, IfStatement, FunctionCall)
EXPRESSION_KINDS = (MathExpression, Number, FunctionCall, String, Bool, Identifier)


def _only_child(node: Node, kinds: tuple, label: str) -> Node:
    if len(node.children) != 1 or not isinstance(node.children[0], kinds):
        raise AsaMalformedNode(f"Unknown {label}")
    return node.children[0]


def statement_form(node: Statement, runtime: Runtime, evaluate_fn: EvaluatorFn) -> Value:
    return evaluate_fn(_only_child(node, STATEMENT_KINDS, "Statement"), runtime)


def expression_form(node: Expression, runtime: Runtime, evaluate_fn: EvaluatorFn) -> Value:
    return evaluate_fn(_only_child(node, EXPRESSION_KINDS, "Expression"), runtime)


def return_form(node: FunctionReturn, runtime: Runtime, evaluate_fn: EvaluatorFn) -> Value:
    # Stopping the enclosing sequence is handled by run_statements.
    if len(node.children) != 1:
        raise AsaMalformedNode("return requires exactly 1 value")
    return evaluate_fn(node.children[0], runtime)
