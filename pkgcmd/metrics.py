"""Injectable metrics sinks for detection observability.

Detection reports through the :class:`MetricsSink` protocol so callers can
plug in their own telemetry. :class:`AtomicCounters` is the default sink and
keeps five process-local counters that are safe to update and read from
several threads.

Example
-------
>>> counters = AtomicCounters()
>>> counters.increment(Counter.DETECT_CALLS)
>>> counters.snapshot().detect_calls
1
"""

from __future__ import annotations

import dataclasses as dc
import enum
import threading
import typing as typ


class Counter(enum.StrEnum):
    """Names of the detection counters."""

    DETECT_CALLS = "detect_calls"
    DETECT_ERRORS = "detect_errors"
    MANAGER_CREATIONS = "manager_creations"
    OS_RELEASE_READS = "os_release_reads"
    BINARY_FALLBACKS = "binary_fallbacks"


@typ.runtime_checkable
class MetricsSink(typ.Protocol):
    """Anything able to record a counter increment."""

    def increment(self, counter: Counter) -> None:
        """Record a single increment of ``counter``."""
        ...


@dc.dataclass(frozen=True, slots=True)
class MetricsSnapshot:
    """Point-in-time copy of the detection counters."""

    detect_calls: int = 0
    detect_errors: int = 0
    manager_creations: int = 0
    os_release_reads: int = 0
    binary_fallbacks: int = 0


class AtomicCounters:
    """Thread-safe counter sink with snapshot and reset support."""

    __slots__ = ("_lock", "_values")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: dict[Counter, int] = dict.fromkeys(Counter, 0)

    def increment(self, counter: Counter) -> None:
        """Add one to ``counter``."""
        key = Counter(counter)
        with self._lock:
            self._values[key] += 1

    def get(self, counter: Counter) -> int:
        """Return the current value of ``counter``."""
        key = Counter(counter)
        with self._lock:
            return self._values[key]

    def snapshot(self) -> MetricsSnapshot:
        """Return a consistent copy of every counter."""
        with self._lock:
            values = {counter.value: count for counter, count in self._values.items()}
        return MetricsSnapshot(**values)

    def reset(self) -> None:
        """Set every counter back to zero."""
        with self._lock:
            for counter in self._values:
                self._values[counter] = 0


class NullMetrics:
    """Sink that discards every increment."""

    __slots__ = ()

    def increment(self, counter: Counter) -> None:
        """Ignore ``counter``."""


__all__ = ["AtomicCounters", "Counter", "MetricsSink", "MetricsSnapshot", "NullMetrics"]
