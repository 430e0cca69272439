"""Logging helpers for DebugTreeLib.

The library never configures handlers itself; applications opt in through
the standard logging configuration.
"""

import logging

PACKAGE_LOGGER = "debugtreelib"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the package hierarchy.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger that propagates to the ``debugtreelib`` logger
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
