"""Exceptions raised by DebugTreeLib.

Structural misuse of a tree (double release, out-of-order release,
rendering with open branches) is never an error. Only writing a rendered
tree to a sink can fail.
"""

from typing import Any


class DebugTreeError(Exception):
    """Base class for DebugTreeLib errors."""
    pass


class TreeIoError(DebugTreeError):
    """Raised when a rendered tree cannot be written to its sink.

    The underlying OSError is chained as ``__cause__``.
    """

    def __init__(self, sink: Any, message: str):
        self.sink = sink
        super().__init__(f"Failed to write tree to {sink!r}: {message}")
