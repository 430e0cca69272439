"""Incremental tree builder for DebugTreeLib.

The TreeBuilder owns a root Node and a stack of open branches. Leaves are
appended under the top of the stack; branches are appended and pushed.
Each branch returns a BranchHandle whose release pops the stack back to
where it was before that branch was opened.

Example:
    >>> tree = TreeBuilder()
    >>> with tree.add_branch("1 Branch"):
    ...     tree.add_leaf("1.1 Child")
    >>> tree.add_leaf("2 Sibling")
    >>> print(tree.render())
    1 Branch
    └╼ 1.1 Child
    2 Sibling
"""

import os
import sys
import threading
from contextlib import nullcontext
from typing import List, Optional, TextIO, TypeVar, Union

from .._common.logging import get_logger
from ..config import DEFAULT_CONFIG, RenderConfig, SymbolSet
from ..deferred import DeferredAction
from ..errors import TreeIoError
from .node import Node
from .renderer import render

logger = get_logger(__name__)

T = TypeVar("T")

Sink = Union[str, "os.PathLike[str]", TextIO]


class BranchHandle:
    """Scoped token for an open branch.

    Releasing the handle truncates the builder's open-branch stack to the
    depth it had before the branch was opened. Popping is depth based, so
    releasing an outer handle also closes any inner branch still open.

    Use it as a context manager to release on block exit::

        with tree.add_branch("parse"):
            tree.add_leaf("token")
    """

    def __init__(self, builder: 'TreeBuilder', depth: int, generation: int,
                 released: bool = False):
        self._builder = builder
        self._depth = depth
        self._generation = generation
        self._released = released

    @property
    def builder(self) -> 'TreeBuilder':
        return self._builder

    @property
    def depth(self) -> int:
        """Stack depth right after this branch was pushed."""
        return self._depth

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Close the branch. Releasing twice is a no-op."""
        self._builder.release(self)

    def __enter__(self) -> 'BranchHandle':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.release()
        return False

    def __repr__(self) -> str:
        state = "released" if self._released else "open"
        return f"BranchHandle(depth={self._depth}, {state})"


class TreeBuilder:
    """Builds a text tree one leaf or branch at a time.

    Private builders (the per-thread default tree) take no lock. Shared
    builders, handed out by the registry for named trees, serialize every
    mutating or rendering call on a reentrant lock.
    """

    def __init__(self,
                 config: Optional[RenderConfig] = None,
                 name: Optional[str] = None,
                 shared: bool = False):
        """Initialize an empty tree.

        Args:
            config: Base render configuration (defaults to DEFAULT_CONFIG)
            name: Registry name, if this is a named tree
            shared: Guard operations with a lock for cross-thread use
        """
        self.name = name
        self._config = config if config is not None else DEFAULT_CONFIG
        self._config_override: Optional[RenderConfig] = None
        self._lock = threading.RLock() if shared else nullcontext()
        self._shared = shared
        self._enabled = True
        self._generation = 0
        self._root = Node()
        self._open_stack: List[Node] = [self._root]
        # enter() calls not yet backed by nodes
        self._pending_dives = 0

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def add_leaf(self, text: str) -> None:
        """Append a leaf under the current insertion point.

        Args:
            text: Label; newlines split it into several display lines
        """
        with self._lock:
            if not self._enabled:
                return
            self._dive()
            self._open_stack[-1].append(Node.from_text(text))

    def add_branch(self, text: str) -> BranchHandle:
        """Append a branch and make it the insertion point.

        Args:
            text: Label; newlines split it into several display lines

        Returns:
            Handle that closes the branch when released
        """
        with self._lock:
            if not self._enabled:
                return self._inert_handle()
            self._dive()
            node = self._open_stack[-1].append(Node.from_text(text))
            self._open_stack.append(node)
            return BranchHandle(self, len(self._open_stack), self._generation)

    def add_leaf_value(self, value: T, fmt: str = "{}") -> T:
        """Add ``fmt.format(value)`` as a leaf and return value unchanged.

        Example:
            >>> total = tree.add_leaf_value(compute(), "total={}")
        """
        self.add_leaf(fmt.format(value))
        return value

    def enter(self) -> None:
        """Descend into the most recently added node.

        The next leaf becomes a child of the node added before this call.
        Nothing is created until a leaf or branch is actually added, so an
        enter() undone by exit() leaves no trace. If the insertion point has
        no children when that happens, an unlabeled node is created to
        descend into.
        """
        with self._lock:
            if not self._enabled:
                return
            self._pending_dives += 1

    def enter_scoped(self) -> BranchHandle:
        """Like enter(), returning a handle that steps back out on release."""
        with self._lock:
            if not self._enabled:
                return self._inert_handle()
            self._pending_dives += 1
            return BranchHandle(self, self._logical_depth(), self._generation)

    def exit(self) -> bool:
        """Step up to the parent of the insertion point.

        Returns:
            False if already at the top level
        """
        with self._lock:
            if not self._enabled:
                return False
            if self._pending_dives:
                self._pending_dives -= 1
                return True
            if len(self._open_stack) <= 1:
                return False
            self._open_stack.pop()
            return True

    def release(self, handle: BranchHandle) -> None:
        """Close the branch a handle was created for.

        Truncates the open-branch stack to the handle's depth minus one.
        Already-released handles, handles from another builder and handles
        made stale by clear() are ignored.
        """
        with self._lock:
            if handle.released or handle.builder is not self:
                return
            handle._released = True
            if handle.generation != self._generation:
                logger.debug("Ignoring stale branch handle for tree %r", self.name)
                return
            excess = self._logical_depth() - max(handle.depth - 1, 1)
            if excess <= 0:
                return
            # Pending dives sit above every materialized level
            dropped = min(self._pending_dives, excess)
            self._pending_dives -= dropped
            excess -= dropped
            if excess:
                del self._open_stack[-excess:]

    def depth(self) -> int:
        """Number of branches currently open, including pending enter() calls."""
        with self._lock:
            return self._logical_depth() - 1

    def count(self) -> int:
        """Number of nodes in the tree."""
        with self._lock:
            return self._root.count()

    @property
    def root(self) -> Node:
        return self._root

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Render the tree without modifying it."""
        with self._lock:
            return render(self._root, self.active_config)

    def peek_string(self) -> str:
        """Alias of render()."""
        return self.render()

    def flush_string(self) -> str:
        """Render the tree, then clear it."""
        with self._lock:
            text = self.render()
            self.clear()
            return text

    def peek_print(self, file: Optional[TextIO] = None) -> None:
        """Print the rendered tree (stdout by default). Empty trees print nothing."""
        text = self.render()
        if text:
            print(text, file=file)

    def flush_print(self, file: Optional[TextIO] = None) -> None:
        """Print the rendered tree, then clear it."""
        text = self.flush_string()
        if text:
            print(text, file=file)

    def write(self, sink: Sink) -> None:
        """Render the tree and write it to a file path or stream.

        Paths are overwritten, never appended to. Streams are flushed.

        Args:
            sink: File path or object with a write() method

        Raises:
            TreeIoError: If the sink fails; the underlying error is chained
        """
        self._emit(sink, self.render())

    def flush_to(self, sink: Union[Sink, object], peek: bool = False) -> None:
        """Render, emit and clear as one step under the tree lock.

        No other thread can add to a shared tree between the render and
        the clear, so nothing recorded is dropped unseen.

        Args:
            sink: DeferredAction.PRINT for stdout, else a path or stream
            peek: Keep the tree contents after emitting

        Raises:
            TreeIoError: If the sink fails; the tree is still cleared
        """
        with self._lock:
            try:
                text = self.render()
                if sink is DeferredAction.PRINT:
                    if text:
                        self._emit(sys.stdout, text + "\n")
                else:
                    self._emit(sink, text)
            finally:
                if not peek:
                    self.clear()

    def clear(self) -> None:
        """Reset to an empty tree. Outstanding handles become stale."""
        with self._lock:
            self._root = Node()
            self._open_stack = [self._root]
            self._pending_dives = 0
            self._generation += 1
            logger.debug("Cleared tree %r", self.name)

    def defer_print(self, peek: bool = False) -> DeferredAction:
        """Print (and clear unless peek) when the returned guard's scope exits."""
        return DeferredAction(self, DeferredAction.PRINT, peek=peek)

    def defer_write(self, sink: Sink, peek: bool = False) -> DeferredAction:
        """Write to sink (and clear unless peek) when the guard's scope exits."""
        return DeferredAction(self, sink, peek=peek)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def config_override(self) -> Optional[RenderConfig]:
        return self._config_override

    @property
    def active_config(self) -> RenderConfig:
        """The override when set, otherwise the base config."""
        return self._config_override or self._config

    def set_config(self, config: RenderConfig) -> None:
        """Replace the base render configuration for future renders."""
        with self._lock:
            self._config = config

    def set_config_override(self, config: Optional[RenderConfig]) -> None:
        """Set (or with None, remove) a config that takes precedence."""
        with self._lock:
            self._config_override = config

    def set_indentation(self, indent_width: int) -> None:
        """Change the indent width of the base config."""
        with self._lock:
            self._config = self._config.with_indent(indent_width)

    def set_symbols(self, symbols: SymbolSet) -> None:
        """Change the glyphs of the base config."""
        with self._lock:
            self._config = self._config.with_symbols(symbols)

    def set_enabled(self, enabled: bool) -> None:
        """Turn recording on or off. Disabled builders ignore additions."""
        with self._lock:
            self._enabled = bool(enabled)

    def is_enabled(self) -> bool:
        return self._enabled

    @property
    def shared(self) -> bool:
        return self._shared

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _logical_depth(self) -> int:
        return len(self._open_stack) + self._pending_dives

    def _dive(self) -> None:
        """Back pending enter() calls with nodes before an insertion.

        The first dive descends into the most recent child of the insertion
        point; each further dive opens a new unlabeled node below it.
        """
        for i in range(self._pending_dives):
            current = self._open_stack[-1]
            target = current.last_child() if i == 0 else None
            if target is None:
                target = current.append(Node())
            self._open_stack.append(target)
        self._pending_dives = 0

    def _emit(self, sink: Sink, text: str) -> None:
        try:
            if isinstance(sink, (str, os.PathLike)):
                with open(sink, "w", encoding="utf-8") as handle:
                    handle.write(text)
            else:
                sink.write(text)
                if hasattr(sink, "flush"):
                    sink.flush()
        # Closed streams raise ValueError, unencodable text UnicodeEncodeError
        except (OSError, ValueError) as e:
            raise TreeIoError(sink, str(e)) from e

    def _inert_handle(self) -> BranchHandle:
        return BranchHandle(self, len(self._open_stack), self._generation, released=True)

    def __repr__(self) -> str:
        label = f"name={self.name!r}, " if self.name is not None else ""
        return f"TreeBuilder({label}depth={self.depth()}, nodes={self.count()})"

    def __str__(self) -> str:
        return self.render()

