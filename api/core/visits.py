"""
Diagnostic request counter for the health endpoint.

Not used by any data-access path.
"""

from __future__ import annotations

import threading


class VisitCounter:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0

    def increment(self) -> int:
        with self._lock:
            self._count += 1
            return self._count

    @property
    def count(self) -> int:
        with self._lock:
            return self._count


visit_counter = VisitCounter()
