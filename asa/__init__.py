# Core type aliases for asa's data model.
# Runtime values are plain Python types: int (Number), bool (Bool) and str (String).
# bool is a subclass of int in Python, so value checks must compare exact types
# (see asa.types.values) rather than use isinstance.
#
# Naming guidance:
# - Value: use in evaluator/runtime code for evaluated results.
# - EvaluatorFn: the evaluate callable handed to node forms and builtins.

import logging
from typing import Any, Callable, Union

Value = Union[int, bool, str]

# Evaluator function type: evaluate(node, runtime) -> Value
EvaluatorFn = Callable[..., Any]

logging.getLogger(__name__).addHandler(logging.NullHandler())
