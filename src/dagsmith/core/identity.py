"""Graph identity allocation.

An IdentitySource hands out GraphIds. Graphs built from the same source
always get distinct ids, which is what lets cross-graph operations be
detected. Whoever constructs graphs owns the source: one per process, per
test, or per scheduler instance.
"""

from __future__ import annotations

import itertools
import threading

from dagsmith.core.types import GraphId


class IdentitySource:
    """Monotonically increasing, thread-safe GraphId counter.

    Example:
        >>> source = IdentitySource()
        >>> source.next_id()
        0
        >>> source.next_id()
        1
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> GraphId:
        """Allocate the next GraphId."""
        with self._lock:
            return next(self._counter)


_default_source = IdentitySource()


def default_identity_source() -> IdentitySource:
    """Return the process-wide source used when a Graph gets none."""
    return _default_source
