from asa import EvaluatorFn, Value
from asa.types.node import Bool, Identifier, Number, String
from asa.types.runtime import Runtime


def identifier_form(node: Identifier, runtime: Runtime, evaluate_fn: EvaluatorFn) -> Value:
    return runtime.stack.lookup(node.value)


def literal_form(node: Number | Bool | String, runtime: Runtime, evaluate_fn: EvaluatorFn) -> Value:
    return node.value
