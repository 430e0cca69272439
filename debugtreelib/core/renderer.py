"""Box-drawing renderer for DebugTreeLib.

Renders a Node subtree into lines like::

    10
    ├╼ 10.1
    ├╼ 10.2
    │ ├╼ 10.1.1
    │ └╼ 10.1.2
    │    Next line
    └╼ 10.3

Children of the root are drawn flush left without a connector; every deeper
node gets a connector and its descendants are shifted one column unit.
Rendering is pure: the same tree and config always give the same text.
"""

from typing import List

from ..config import RenderConfig
from .node import Node


def connector(config: RenderConfig, is_last: bool) -> str:
    """Build the glyph run drawn before a node's text.

    Args:
        config: Render configuration
        is_last: Whether the node is the last among its siblings

    Returns:
        e.g. "├╼" at indent 2, "└──╼" at indent 4
    """
    symbols = config.symbols
    corner = symbols.branch_last if is_last else symbols.branch_mid
    fill = symbols.horizontal * max(config.indent_width - 2, 0)
    return corner + fill + symbols.leaf_prefix


def column_unit(config: RenderConfig, continues: bool) -> str:
    """Build the prefix segment contributed by one ancestor level.

    Args:
        config: Render configuration
        continues: Whether the ancestor has siblings still to be drawn

    Returns:
        Vertical line (or blank) padded to indent_width; empty at indent 0
    """
    if config.indent_width == 0:
        return ""
    mark = config.symbols.vertical_continuation if continues else " "
    return mark + " " * (config.indent_width - 1)


def render_lines(node: Node,
                 config: RenderConfig,
                 prefix: str = "",
                 is_last: bool = True,
                 is_root: bool = True) -> List[str]:
    """Render a subtree as a list of lines.

    Args:
        node: Subtree to render
        config: Glyphs and indentation to use
        prefix: Ancestor columns already drawn to the left of this node
        is_last: Whether node is the last among its siblings
        is_root: True for the tree root, which is never drawn itself

    Returns:
        Display lines, top to bottom
    """
    if is_root:
        lines: List[str] = []
        for child in node.children:
            lines.extend(_render_top_level(child, config))
        return lines

    head = prefix + connector(config, is_last)
    lines = _label_lines(node, config, prefix, head, is_last)

    child_prefix = prefix + column_unit(config, not is_last)
    last_index = len(node.children) - 1
    for index, child in enumerate(node.children):
        lines.extend(render_lines(child, config, child_prefix,
                                  is_last=index == last_index, is_root=False))
    return lines


def render(node: Node, config: RenderConfig) -> str:
    """Render a whole tree to a string.

    Args:
        node: Root of the tree; only its descendants are drawn
        config: Glyphs and indentation to use

    Returns:
        Lines joined with newlines; "" for an empty tree
    """
    return "\n".join(render_lines(node, config))


def _render_top_level(node: Node, config: RenderConfig) -> List[str]:
    """Render a child of the root: text flush left, children indented."""
    lines = list(node.content) if node.content else [""]
    last_index = len(node.children) - 1
    for index, child in enumerate(node.children):
        lines.extend(render_lines(child, config, "",
                                  is_last=index == last_index, is_root=False))
    return lines


def _label_lines(node: Node,
                 config: RenderConfig,
                 prefix: str,
                 head: str,
                 is_last: bool) -> List[str]:
    """Render a node's own label with its connector.

    Continuation lines of a multi-line label start at the same column as
    the first line's text.
    """
    if not node.content:
        return [head]

    first, *rest = node.content
    lines = [f"{head} {first}"]
    if rest:
        mark = " " if is_last else config.symbols.vertical_continuation
        width = len(head) - len(prefix) + 1
        pad = prefix + mark.ljust(width)
        lines.extend(pad + line for line in rest)
    return lines
