"""Application engine for asa.

This module centralizes the semantics of running code inside a frame:
- Statement sequences (function bodies, if-bodies, the entry construct) run in
  order and stop after the first statement that is a `return`.
- User function application: arity check, argument evaluation in the caller's
  frame, a fresh frame for the callee.

Keeping this logic in one place keeps the call form, the if form and the
program entry point consistent.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from asa import Value, EvaluatorFn
from asa.errors import AsaArityError, AsaEmptyIf
from asa.types.function import Function
from asa.types.node import FunctionReturn, IfStatement, Node, Statement
from asa.types.runtime import Runtime

logger = logging.getLogger(__name__)


def is_return(statement: Node) -> bool:
    return (
        isinstance(statement, Statement)
        and bool(statement.children)
        and isinstance(statement.children[0], FunctionReturn)
    )


def if_node(statement: Node) -> Optional[IfStatement]:
    """The IfStatement a statement wraps directly, if any."""
    if (
        isinstance(statement, Statement)
        and len(statement.children) == 1
        and isinstance(statement.children[0], IfStatement)
    ):
        return statement.children[0]
    return None


def run_statements(
    statements: Sequence[Node],
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
    owner: Optional[IfStatement] = None,
) -> Value:
    """Run `statements` in order and return the value of the last one executed.

    Execution stops after the first `return` statement. An if-statement of this
    sequence whose condition was false only counts as a failure when nothing
    runs after it. Any other AsaEmptyIf, e.g. one from inside a called
    function, propagates unchanged.

    `owner` is the if-statement whose body this is: a trailing failure is then
    reported as a failure of the owner.
    """
    result: Value | None = None
    empty_if: AsaEmptyIf | None = None
    for statement in statements:
        try:
            result = evaluate_fn(statement, runtime)
        except AsaEmptyIf as ex:
            if ex.node is None or ex.node is not if_node(statement):
                raise
            empty_if = ex
            continue
        empty_if = None
        if is_return(statement):
            break
    if empty_if is not None:
        if owner is not None:
            raise AsaEmptyIf(str(empty_if), node=owner) from None
        raise empty_if
    return result


def apply_function(
    fn: Function,
    arg_nodes: Sequence[Node],
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Call a user-defined function.

    Parameters:
    - fn: The function taken from the function table.
    - arg_nodes: The unevaluated call-site argument expressions.
    - runtime: The runtime whose call stack receives the callee's frame.
    - evaluate_fn: Evaluator used for arguments and body.

    Behavior:
    - A wrong number of arguments raises AsaArityError before anything is evaluated.
    - Arguments are evaluated left to right in the caller's frame, so nested
      calls complete before the callee's frame exists.
    - The callee sees only its own parameters; the frame is popped on every exit path.
    """
    if len(arg_nodes) != fn.arity:
        raise AsaArityError(f"{fn.name} expected {fn.arity} args, got {len(arg_nodes)}")

    bindings = {}
    for name, arg in zip(fn.params, arg_nodes):
        bindings[name] = evaluate_fn(arg, runtime)

    logger.debug("call %s%r", fn.name, tuple(bindings.values()))
    with runtime.stack.frame(bindings):
        return run_statements(fn.body, runtime, evaluate_fn)
