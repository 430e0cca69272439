"""Named and per-thread trees for DebugTreeLib.

Named trees are process-wide: every call to ``tree("parser")`` from any
thread returns the same locked TreeBuilder, created on first use and kept
for the life of the process. The default tree is private to the calling
thread and never locked.
"""

import threading
from typing import Dict, List, Optional

from ._common.logging import get_logger
from .config import RenderConfig
from .core.builder import TreeBuilder

logger = get_logger(__name__)


class TreeRegistry:
    """Store of shared named trees plus one default tree per thread.

    Creation of named trees is guarded by a lock, so concurrent first
    access to a name creates exactly one builder.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize an empty registry.

        Args:
            config: Base config for trees created by this registry
        """
        self._config = config
        self._named: Dict[str, TreeBuilder] = {}
        self._lock = threading.Lock()
        self._local = threading.local()

    def tree(self, name: str) -> TreeBuilder:
        """Get the shared tree for name, creating it on first use.

        Args:
            name: Opaque, case-sensitive key

        Returns:
            The same thread-safe TreeBuilder on every call for this name
        """
        builder = self._named.get(name)
        if builder is not None:
            return builder

        with self._lock:
            builder = self._named.get(name)
            if builder is None:
                builder = TreeBuilder(config=self._config, name=name, shared=True)
                self._named[name] = builder
                logger.debug("Created named tree %r", name)
            return builder

    def default_tree(self) -> TreeBuilder:
        """Get the calling thread's private tree, creating it on first use."""
        builder = getattr(self._local, "builder", None)
        if builder is None:
            builder = TreeBuilder(config=self._config)
            self._local.builder = builder
        return builder

    def names(self) -> List[str]:
        """Names of all named trees created so far."""
        with self._lock:
            return list(self._named)

    def __contains__(self, name: str) -> bool:
        return name in self._named

    def reset(self) -> None:
        """Forget every named tree and this thread's default tree.

        Intended for test isolation; builders already handed out keep
        working but are no longer reachable through the registry.
        """
        with self._lock:
            self._named.clear()
        self._local.__dict__.pop("builder", None)


# Process-wide registry used by the module-level functions
_registry = TreeRegistry()


def get_registry() -> TreeRegistry:
    """Return the process-wide registry."""
    return _registry


def tree(name: str) -> TreeBuilder:
    """Get the process-wide shared tree called name."""
    return _registry.tree(name)


def default_tree() -> TreeBuilder:
    """Get the calling thread's default tree."""
    return _registry.default_tree()
