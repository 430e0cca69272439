"""Scope-exit flushing for DebugTreeLib.

A DeferredAction renders a tree and prints or writes it when the ``with``
block it guards exits, including when that block raises. Unless ``peek``
is set the tree is cleared afterwards, so the next scope starts fresh.

Example:
    >>> with defer_write("trace.txt"):
    ...     with add_branch("run"):
    ...         risky_operation()   # trace.txt is written even if this raises
"""

from typing import TYPE_CHECKING, Any, Optional

from ._common.logging import get_logger
from .errors import TreeIoError

if TYPE_CHECKING:
    from .core.builder import TreeBuilder

logger = get_logger(__name__)


class _PrintAction:
    """Marker for printing to stdout instead of writing to a sink."""

    def __repr__(self) -> str:
        return "PRINT"


class DeferredAction:
    """Guard that flushes a tree exactly once when its scope exits.

    Attributes:
        tree: Builder to flush
        action: DeferredAction.PRINT, or a write sink (path or stream)
        peek: If True, keep the tree contents after firing
        error: The exception of a failed flush, if any
    """

    PRINT = _PrintAction()

    def __init__(self, tree: 'TreeBuilder', action: Any = PRINT, peek: bool = False):
        self.tree = tree
        self.action = action
        self.peek = peek
        self.error: Optional[Exception] = None
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def fire(self) -> None:
        """Render, print or write, then clear unless peeking.

        Firing a second time does nothing. The render, the output and the
        clear run under the tree lock as one step. A failed write does not
        stop the clear; the error is logged, stored on ``self.error`` and
        raised.

        Raises:
            TreeIoError: If writing to the sink failed
        """
        if self._fired:
            return
        self._fired = True

        try:
            self.tree.flush_to(self.action, peek=self.peek)
        except TreeIoError as e:
            self.error = e
            logger.error("Deferred write of tree %r failed", self.tree.name, exc_info=True)
            raise

    def __enter__(self) -> 'DeferredAction':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.fire()
            return False

        # Never replace the exception already propagating
        try:
            self.fire()
        except TreeIoError:
            pass
        except Exception as e:
            self.error = e
            logger.error("Deferred flush of tree %r failed during unwind",
                         self.tree.name, exc_info=True)
        return False

    def __repr__(self) -> str:
        state = "fired" if self._fired else "pending"
        return f"DeferredAction(action={self.action!r}, peek={self.peek}, {state})"


def _resolve(tree: Optional['TreeBuilder']) -> 'TreeBuilder':
    if tree is not None:
        return tree
    from .registry import default_tree
    return default_tree()


def defer_print(tree: Optional['TreeBuilder'] = None, peek: bool = False) -> DeferredAction:
    """Print the tree (default tree if None) when the scope exits, then clear it."""
    return DeferredAction(_resolve(tree), DeferredAction.PRINT, peek=peek)


def defer_peek_print(tree: Optional['TreeBuilder'] = None) -> DeferredAction:
    """Print the tree when the scope exits, keeping its contents."""
    return defer_print(tree, peek=True)


def defer_write(sink: Any, tree: Optional['TreeBuilder'] = None, peek: bool = False) -> DeferredAction:
    """Write the tree to sink when the scope exits, then clear it.

    Args:
        sink: File path (overwritten) or writable stream
        tree: Builder to flush (default tree if None)
        peek: Keep the tree contents after writing

    Returns:
        Guard to use in a ``with`` statement
    """
    return DeferredAction(_resolve(tree), sink, peek=peek)


def defer_peek_write(sink: Any, tree: Optional['TreeBuilder'] = None) -> DeferredAction:
    """Write the tree to sink when the scope exits, keeping its contents."""
    return defer_write(sink, tree, peek=True)
