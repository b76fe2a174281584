from asa import EvaluatorFn, Value
from asa.errors import AsaConditionError, AsaEmptyIf, AsaMalformedNode
from asa.evaluation.apply import run_statements
from asa.types.node import IfStatement
from asa.types.runtime import Runtime
from asa.types.values import is_bool, type_name


def if_form(node: IfStatement, runtime: Runtime, evaluate_fn: EvaluatorFn) -> Value:
    """
    if (condition) { statements }
    There is no else branch: a false condition yields AsaEmptyIf, which the
    enclosing statement sequence discards if another statement follows. A body
    that ends in such a failure fails this if-statement in turn.
    """
    if not node.children:
        raise AsaMalformedNode("if requires a condition")

    cond = evaluate_fn(node.children[0], runtime)
    if not is_bool(cond):
        raise AsaConditionError(f"Condition did not return boolean, got {type_name(cond)}")

    if cond:
        return run_statements(node.children[1:], runtime, evaluate_fn, owner=node)
    raise AsaEmptyIf("Empty if statement", node=node)
