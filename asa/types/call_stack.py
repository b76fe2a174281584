"""Scope frames for asa.

Each active function call owns exactly one frame. Lookups and definitions only
ever address the topmost frame: a callee cannot see its caller's bindings and
there is no enclosing-scope chain.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from asa import Value
from asa.errors import AsaMalformedNode, AsaUnboundVariable

logger = logging.getLogger(__name__)


class CallStack:
    """Ordered stack of name -> Value frames."""

    __slots__ = ("frames",)

    def __init__(self):
        self.frames: list[dict[str, Value]] = []

    @property
    def depth(self) -> int:
        return len(self.frames)

    def push(self, frame: Optional[dict[str, Value]] = None) -> None:
        self.frames.append({} if frame is None else dict(frame))
        logger.debug("push frame (depth %d)", len(self.frames))

    def pop(self) -> dict[str, Value]:
        frame = self.frames.pop()
        logger.debug("pop frame (depth %d)", len(self.frames))
        return frame

    @contextmanager
    def frame(self, bindings: Optional[dict[str, Value]] = None) -> Iterator[dict[str, Value]]:
        """Push a frame for the duration of the block; it is popped even if evaluation fails."""
        self.push(bindings)
        try:
            yield self.frames[-1]
        finally:
            self.pop()

    def define(self, name: str, value: Value) -> None:
        """Bind `name` in the topmost frame, replacing any earlier binding there.

        Raises AsaMalformedNode if no frame is active: every binding belongs to
        a function call or to the entry frame.
        """
        if not self.frames:
            raise AsaMalformedNode(f"Cannot define {name} outside of a frame")
        self.frames[-1][name] = value

    def lookup(self, name: str) -> Value:
        """Look up `name` in the topmost frame only.

        Raises AsaUnboundVariable if it is not bound there.
        """
        if self.frames and name in self.frames[-1]:
            return self.frames[-1][name]
        raise AsaUnboundVariable(f"Undefined variable {name}")

    def __repr__(self) -> str:
        return f"CallStack({self.frames!r})"
