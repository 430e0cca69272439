"""Core components of DebugTreeLib: nodes, rendering and the builder."""

from .node import Node, split_lines
from .renderer import render, render_lines
from .builder import BranchHandle, TreeBuilder

__all__ = [
    'Node',
    'split_lines',
    'render',
    'render_lines',
    'BranchHandle',
    'TreeBuilder',
]
