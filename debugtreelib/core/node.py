"""Node storage for DebugTreeLib.

A Node is a plain data container: its display lines and its children.
Whether a node is a leaf or a branch is decided by its children alone.
"""

from dataclasses import dataclass, field
from typing import List, Optional


def split_lines(text: Optional[str]) -> List[str]:
    """Split a label into display lines.

    Args:
        text: Label text, possibly multi-line. None means no label.

    Returns:
        One entry per line of text (empty list for None)
    """
    if text is None:
        return []
    return str(text).split("\n")


@dataclass
class Node:
    """A single tree node.

    Attributes:
        content: Display lines for this node's own label
        children: Child nodes in insertion (and rendering) order
    """
    content: List[str] = field(default_factory=list)
    children: List['Node'] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: Optional[str]) -> 'Node':
        """Create a childless node from label text."""
        return cls(content=split_lines(text))

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.children

    def append(self, child: 'Node') -> 'Node':
        """Append a child and return it."""
        self.children.append(child)
        return child

    def last_child(self) -> Optional['Node']:
        """Return the most recently added child, if any."""
        return self.children[-1] if self.children else None

    def count(self) -> int:
        """Count the nodes in this subtree, excluding this node."""
        return sum(1 + child.count() for child in self.children)

    @property
    def text(self) -> str:
        """The label joined back into a single string."""
        return "\n".join(self.content)

    def __repr__(self) -> str:
        return f"Node(text={self.text!r}, children={len(self.children)})"
