"""
Timing helpers.
"""

import time
from contextlib import contextmanager
from typing import Dict, Iterator


@contextmanager
def timer() -> Iterator[Dict[str, float]]:
    """
    Measure the wall time of a block in milliseconds.

    The elapsed time is stored under "ms" when the block exits,
    so read it after the with statement.

    Example:
        >>> with timer() as t:
        ...     invert(surface)
        >>> elapsed = t["ms"]
    """
    result = {"ms": 0.0}
    start = time.perf_counter()
    try:
        yield result
    finally:
        result["ms"] = (time.perf_counter() - start) * 1000.0
