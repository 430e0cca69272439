#!/usr/bin/env python3
"""
Basic tracing example showing how DebugTreeLib mirrors call structure.

This example demonstrates:
- Recursive branches on the default tree
- A named tree shared by worker threads
- Flushing a tree to a file when a scope exits, even on error
"""

import sys
import threading
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from debugtreelib import (
    RenderConfig,
    add_branch,
    add_leaf,
    defer_print,
    defer_write,
    tree,
)


def factors(x):
    """Record the divisor tree of x."""
    with add_branch("{}", x):
        for i in range(1, x):
            if x % i == 0:
                factors(i)


def worker(index):
    """Record a few steps into the shared 'workers' tree."""
    shared = tree("workers")
    for step in range(3):
        shared.add_leaf(f"worker {index}: step {step}")


def main():
    """Run the three demonstrations."""
    print("Recursive factors of 12:")
    print("-" * 50)
    with defer_print():
        factors(12)

    print(f"\nShared tree from 3 threads:")
    print("-" * 50)
    shared = tree("workers")
    shared.set_config(RenderConfig.rounded())
    with shared.add_branch("workers"):
        threads = [threading.Thread(target=worker, args=(i,)) for i in range(3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
    shared.flush_print()

    output = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("trace.txt")
    print(f"\nWriting a failing run to {output}:")
    print("-" * 50)
    try:
        with defer_write(output):
            with add_branch("load config"):
                add_leaf("reading defaults")
                raise RuntimeError("config file missing")
    except RuntimeError as e:
        print(f"Caught: {e}")
    print(output.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
