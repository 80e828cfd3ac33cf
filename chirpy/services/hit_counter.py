"""
Chirpy Backend — Fileserver Hit Counter
========================================

What:  Process-wide count of requests served under /app/.
Who:   Incremented by FileserverHitsMiddleware, read by GET /admin/metrics,
       zeroed by POST /admin/reset.
How:   An int guarded by a threading.Lock. Every operation takes the lock,
       so concurrent increments are never lost, whether they come from the
       event loop or from threadpool workers running sync endpoints.

Lifetime is the process: the value is not persisted and restarts at 0.
One HitCounter is created per application instance (create_app) and stored
on app.state; handlers receive it through the get_hit_counter dependency.
"""

import threading


class HitCounter:
    """Thread-safe monotonically increasing counter with explicit reset."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def snapshot(self) -> int:
        """Current value, read under the lock."""
        with self._lock:
            return self._value

    def reset(self) -> int:
        """Set the counter to zero and return the value it had."""
        with self._lock:
            previous = self._value
            self._value = 0
            return previous

    def __repr__(self) -> str:
        return f"<HitCounter(value={self.snapshot()})>"
