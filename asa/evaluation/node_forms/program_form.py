import logging

from asa import EvaluatorFn, Value
from asa.types.node import Expression, FunctionDefine, Program, Statement
from asa.types.runtime import Runtime

logger = logging.getLogger(__name__)


def program_form(node: Program, runtime: Runtime, evaluate_fn: EvaluatorFn) -> Value:
    """
    Registration pass over the top-level children.
    Function definitions are registered; the last bare statement or expression
    becomes the runtime's entry. Nothing is executed here.
    """
    for child in node.children:
        if isinstance(child, FunctionDefine):
            evaluate_fn(child, runtime)
        elif isinstance(child, (Statement, Expression)):
            runtime.set_entry(child)
        else:
            logger.debug("ignoring top-level %s", type(child).__name__)
    return True
