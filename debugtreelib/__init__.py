"""DebugTreeLib - Incremental Debug Trees.

DebugTreeLib records a tree of text from arbitrary, often recursive, call
sites and renders it with box-drawing characters. Branches are opened with
a context manager and closed automatically when the block exits, so the
tree mirrors the shape of the code that produced it.

Choose your entry point:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Default (per-thread) tree:
    from debugtreelib import add_branch, add_leaf, default_tree

Shared named tree:
    from debugtreelib import tree
    tree("parser").add_leaf("token")

Flush when a scope exits:
    from debugtreelib import defer_print, defer_write
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import DEFAULT_CONFIG, RenderConfig, SymbolSet, SymbolStyle
from .errors import DebugTreeError, TreeIoError
from .core import BranchHandle, Node, TreeBuilder, render, render_lines
from .deferred import (
    DeferredAction,
    defer_peek_print,
    defer_peek_write,
    defer_print,
    defer_write,
)
from .registry import TreeRegistry, default_tree, get_registry, tree
from .api import (
    add_branch,
    add_branch_to,
    add_leaf,
    add_leaf_to,
    add_leaf_value,
)

__all__ = [
    "__version__",
    # Configuration
    "DEFAULT_CONFIG",
    "RenderConfig",
    "SymbolSet",
    "SymbolStyle",
    # Errors
    "DebugTreeError",
    "TreeIoError",
    # Core
    "BranchHandle",
    "Node",
    "TreeBuilder",
    "render",
    "render_lines",
    # Scope-exit flushing
    "DeferredAction",
    "defer_print",
    "defer_peek_print",
    "defer_write",
    "defer_peek_write",
    # Registry
    "TreeRegistry",
    "default_tree",
    "get_registry",
    "tree",
    # Convenience functions
    "add_branch",
    "add_branch_to",
    "add_leaf",
    "add_leaf_to",
    "add_leaf_value",
]
