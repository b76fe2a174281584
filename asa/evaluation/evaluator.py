"""Core evaluator for the asa interpreter.

Walks the tree by plain recursion: each node kind is dispatched to its handler
in NODE_FORMS, and handlers call back into `evaluate` for their children. The
only mutable state is the Runtime passed down every call.
"""

from __future__ import annotations

import logging
from typing import Optional

from asa import Value
from asa.errors import AsaMalformedNode, AsaUndefinedFunction
from asa.evaluation.apply import apply_function, run_statements
from asa.evaluation.node_forms import NODE_FORMS
from asa.types.node import Node, Program
from asa.types.runtime import ENTRY_FUNCTION, Runtime

logger = logging.getLogger(__name__)


def evaluate(node: Node, runtime: Runtime) -> Value:
    """Evaluate one node against `runtime` and return its value."""
    form = NODE_FORMS.get(type(node))
    if form is None:
        raise AsaMalformedNode(f"Unhandled node {type(node).__name__}")
    return form(node, runtime, evaluate)


def run_entry(runtime: Runtime) -> Value:
    """Start execution once registration is complete.

    The entry construct, unless a later `main` definition replaced it, runs in
    a fresh frame.
    Otherwise the program must define a zero-argument `main` function.
    """
    if runtime.entry is not None:
        logger.debug("running top-level %s", type(runtime.entry).__name__)
        with runtime.stack.frame():
            return run_statements((runtime.entry,), runtime, evaluate)

    main = runtime.lookup_function(ENTRY_FUNCTION)
    if main is None:
        raise AsaUndefinedFunction(f"Undefined function {ENTRY_FUNCTION}")
    logger.debug("running %s", main)
    return apply_function(main, (), runtime, evaluate)


def execute(program: Program, runtime: Optional[Runtime] = None) -> Value:
    """Register `program` and run it. Returns the final value or raises an AsaEvaluationError."""
    if runtime is None:
        runtime = Runtime()
    evaluate(program, runtime)
    return run_entry(runtime)
