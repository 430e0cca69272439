"""High-level API for DebugTreeLib.

Simple functions that record into the calling thread's default tree, or
into an explicit builder with the ``*_to`` variants. Text is formatted
with ``str.format`` only when extra arguments are passed, so labels with
literal braces are safe.

Example:
    >>> def factors(x):
    ...     with add_branch("{}", x):
    ...         for i in range(1, x):
    ...             if x % i == 0:
    ...                 factors(i)
    >>> factors(6)
    >>> print(default_tree().flush_string())
    6
    ├╼ 1
    ├╼ 2
    │ └╼ 1
    └╼ 3
      └╼ 1
"""

from typing import Any, Optional, TypeVar

from .core.builder import BranchHandle, TreeBuilder
from .registry import default_tree

T = TypeVar("T")


def _format(text: Any, args: tuple, kwargs: dict) -> str:
    """Apply str.format only when arguments were given."""
    if args or kwargs:
        return str(text).format(*args, **kwargs)
    return str(text)


def add_leaf_to(tree: TreeBuilder, text: Any, *args, **kwargs) -> None:
    """Add a leaf to tree.

    Args:
        tree: Builder to record into
        text: Label, or format string when args/kwargs are given
        *args: Positional format arguments
        **kwargs: Keyword format arguments
    """
    tree.add_leaf(_format(text, args, kwargs))


def add_branch_to(tree: TreeBuilder, text: Optional[Any] = None, *args, **kwargs) -> BranchHandle:
    """Open a branch in tree.

    Args:
        tree: Builder to record into
        text: Label or format string; None descends into the last node
            added instead of creating a labeled branch
        *args: Positional format arguments
        **kwargs: Keyword format arguments

    Returns:
        Handle to use in a ``with`` statement or release explicitly
    """
    if text is None:
        return tree.enter_scoped()
    return tree.add_branch(_format(text, args, kwargs))


def add_leaf(text: Any, *args, **kwargs) -> None:
    """Add a leaf to the default tree."""
    add_leaf_to(default_tree(), text, *args, **kwargs)


def add_branch(text: Optional[Any] = None, *args, **kwargs) -> BranchHandle:
    """Open a branch in the default tree. See add_branch_to()."""
    return add_branch_to(default_tree(), text, *args, **kwargs)


def add_leaf_value(value: T, tree: Optional[TreeBuilder] = None, fmt: str = "{}") -> T:
    """Record value as a leaf and hand it back.

    Useful inline: ``total = add_leaf_value(a + b, fmt="total={}")``.
    """
    target = tree if tree is not None else default_tree()
    return target.add_leaf_value(value, fmt)
