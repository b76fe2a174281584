from asa import EvaluatorFn, Value
from asa.builtin import BUILTINS
from asa.errors import AsaUndefinedFunction
from asa.evaluation.apply import apply_function
from asa.types.node import FunctionArguments, FunctionCall
from asa.types.runtime import Runtime


def call_arguments(node: FunctionCall) -> tuple:
    """Unwrap the optional FunctionArguments child into the argument expressions."""
    if node.children and isinstance(node.children[0], FunctionArguments):
        return node.children[0].children
    return node.children


def call_form(node: FunctionCall, runtime: Runtime, evaluate_fn: EvaluatorFn) -> Value:
    args = call_arguments(node)

    builtin = BUILTINS.get(node.name)
    if builtin is not None:
        return builtin(args, runtime, evaluate_fn)

    fn = runtime.lookup_function(node.name)
    if fn is None:
        raise AsaUndefinedFunction(f"Undefined function {node.name}")
    return apply_function(fn, args, runtime, evaluate_fn)
