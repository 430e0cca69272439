"""Rendering configuration for DebugTreeLib.

This module defines how a tree is drawn: which glyphs mark siblings,
leaves and ancestor columns, and how wide each indentation level is.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List


class SymbolStyle(Enum):
    """Named glyph presets.

    Presets are only convenience values; the renderer treats every
    SymbolSet the same way.
    """
    SQUARE = "square"      # ├╼ / └╼
    ROUNDED = "rounded"    # ├╼ / ╰╼
    CUSTOM = "custom"      # Caller-supplied glyphs


@dataclass(frozen=True)
class SymbolSet:
    """Glyphs used to draw a tree.

    Attributes:
        branch_mid: Connector for a node that has more siblings after it
        branch_last: Connector for the last node among its siblings
        leaf_prefix: Marker placed right before the node text
        vertical_continuation: Column line drawn under a node that continues
        horizontal: Fill between connector and marker when indent_width > 2
    """
    branch_mid: str = "├"
    branch_last: str = "└"
    leaf_prefix: str = "╼"
    vertical_continuation: str = "│"
    horizontal: str = "─"

    @classmethod
    def square(cls) -> 'SymbolSet':
        """Square box-drawing glyphs (the default)."""
        return cls()

    @classmethod
    def rounded(cls) -> 'SymbolSet':
        """Box-drawing glyphs with a rounded corner for the last sibling."""
        return cls(branch_last="╰")

    @classmethod
    def ascii(cls) -> 'SymbolSet':
        """Plain ASCII glyphs for terminals without box-drawing support."""
        return cls(
            branch_mid="|",
            branch_last="`",
            leaf_prefix=">",
            vertical_continuation="|",
            horizontal="-",
        )


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for rendering a tree to text.

    RenderConfig is an immutable value; use ``with_indent`` or
    ``with_symbols`` to derive a modified copy.

    Example:
        >>> config = RenderConfig.rounded().with_indent(4)
        >>> tree.set_config(config)
    """
    indent_width: int = 2
    symbols: SymbolSet = field(default_factory=SymbolSet)

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise ValueError(f"Invalid render configuration: {'; '.join(errors)}")

    @classmethod
    def square(cls, indent_width: int = 2) -> 'RenderConfig':
        """Create config with square box-drawing glyphs.

        Args:
            indent_width: Columns per indentation level

        Returns:
            RenderConfig using SymbolSet.square()
        """
        return cls(indent_width=indent_width, symbols=SymbolSet.square())

    @classmethod
    def rounded(cls, indent_width: int = 2) -> 'RenderConfig':
        """Create config with rounded box-drawing glyphs.

        Args:
            indent_width: Columns per indentation level

        Returns:
            RenderConfig using SymbolSet.rounded()
        """
        return cls(indent_width=indent_width, symbols=SymbolSet.rounded())

    @classmethod
    def from_style(cls, style: SymbolStyle, indent_width: int = 2) -> 'RenderConfig':
        """Create config from a named preset.

        Args:
            style: SQUARE or ROUNDED
            indent_width: Columns per indentation level

        Returns:
            RenderConfig for the preset

        Raises:
            ValueError: For SymbolStyle.CUSTOM, which has no preset glyphs
        """
        if style == SymbolStyle.SQUARE:
            return cls.square(indent_width)
        if style == SymbolStyle.ROUNDED:
            return cls.rounded(indent_width)
        raise ValueError("SymbolStyle.CUSTOM requires an explicit SymbolSet")

    def with_indent(self, indent_width: int) -> 'RenderConfig':
        """Return a copy with a different indent width."""
        return replace(self, indent_width=indent_width)

    def with_symbols(self, symbols: SymbolSet) -> 'RenderConfig':
        """Return a copy with a different glyph set."""
        return replace(self, symbols=symbols)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.indent_width, int) or isinstance(self.indent_width, bool):
            errors.append("indent_width must be an integer")
        elif self.indent_width < 0:
            errors.append("indent_width cannot be negative")

        if not isinstance(self.symbols, SymbolSet):
            errors.append("symbols must be a SymbolSet")

        return errors


# Seed configuration for new builders
DEFAULT_CONFIG = RenderConfig()
