from asa import EvaluatorFn, Value
from asa.errors import AsaMalformedNode
from asa.types.function import Function
from asa.types.node import FunctionDefine, Identifier, VariableDefine
from asa.types.runtime import Runtime


def function_define_form(node: FunctionDefine, runtime: Runtime, evaluate_fn: EvaluatorFn) -> Value:
    """
    fn name(params) { body }
    Registers the function, replacing any earlier definition with that name.
    """
    runtime.register(Function.from_node(node))
    return True


def variable_define_form(node: VariableDefine, runtime: Runtime, evaluate_fn: EvaluatorFn) -> Value:
    """
    let name = value;
    Binds in the current frame and evaluates to the bound value.
    """
    if len(node.children) != 2:
        raise AsaMalformedNode("let requires a name and a value")

    name, val_expr = node.children
    if not isinstance(name, Identifier):
        raise AsaMalformedNode(f"let target must be an identifier, got {name}")
    value = evaluate_fn(val_expr, runtime)
    runtime.stack.define(name.value, value)
    return value
