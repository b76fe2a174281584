from asa import EvaluatorFn, Value
from asa.errors import AsaMalformedNode
from asa.types.node import Conditional
from asa.types.runtime import Runtime
from asa.types.values import values_equal


def conditional_form(node: Conditional, runtime: Runtime, evaluate_fn: EvaluatorFn) -> Value:
    """lhs == rhs / lhs != rhs. Values of different types compare unequal."""
    if len(node.children) != 2:
        raise AsaMalformedNode(f"{node.name} requires exactly 2 operands")
    if node.name not in ("==", "!="):
        raise AsaMalformedNode(f"Undefined operator {node.name}")

    lhs = evaluate_fn(node.children[0], runtime)
    rhs = evaluate_fn(node.children[1], runtime)
    equal = values_equal(lhs, rhs)
    return equal if node.name == "==" else not equal
