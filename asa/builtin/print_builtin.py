from __future__ import annotations

from typing import Sequence

from asa import EvaluatorFn, Value
from asa.errors import AsaArityError
from asa.types.node import Node
from asa.types.runtime import Runtime
from asa.types.values import render


def print_builtin(
    arg_nodes: Sequence[Node],
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    print(value)
    Writes the value on its own line and returns it unchanged, so
    `let y = print("hi");` binds y to "hi".
    """
    if len(arg_nodes) != 1:
        raise AsaArityError(f"print expected 1 arg, got {len(arg_nodes)}")
    value = evaluate_fn(arg_nodes[0], runtime)
    print(render(value))
    return value
