from __future__ import annotations

import logging
from typing import Optional

from asa.types.call_stack import CallStack
from asa.types.function import Function
from asa.types.node import Node

logger = logging.getLogger(__name__)

ENTRY_FUNCTION = "main"


class Runtime:
    """State owned by one evaluation run: function table, call stack and entry construct.

    The entry is the last bare top-level statement or expression of the program.
    It is kept apart from the function table and executed once registration is done.
    Entry and `main` share one slot in source order: registering `main` drops an
    earlier entry, and a later entry takes precedence over `main`.
    """

    __slots__ = ("functions", "stack", "entry")

    def __init__(self):
        self.functions: dict[str, Function] = {}
        self.stack: CallStack = CallStack()
        self.entry: Optional[Node] = None

    def register(self, function: Function) -> None:
        if function.name in self.functions:
            logger.debug("redefining function %s", function.name)
        else:
            logger.debug("registering %s", function)
        self.functions[function.name] = function
        if function.name == ENTRY_FUNCTION and self.entry is not None:
            logger.debug("%s replaces top-level %s", function, type(self.entry).__name__)
            self.entry = None

    def lookup_function(self, name: str) -> Optional[Function]:
        return self.functions.get(name)

    def set_entry(self, node: Node) -> None:
        if self.entry is not None:
            logger.debug("replacing entry %s", type(self.entry).__name__)
        self.entry = node
