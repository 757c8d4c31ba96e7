# src/meal_kit/observability/base.py

from collections import defaultdict
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for loader and catalog metrics.

    Label values are plain strings (record kind, catalog component).
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


def _label_key(labels: dict[str, str] | None) -> tuple[tuple[str, str], ...]:
    return tuple(sorted((labels or {}).items()))


class InMemoryMetricsHook:
    """Keeps every observation in memory.

    Handy for tests and for one-off diagnostics of a catalog load.
    """

    def __init__(self) -> None:
        self.latencies: dict[str, list[float]] = defaultdict(list)
        self.counters: dict[tuple[str, tuple[tuple[str, str], ...]], int] = (
            defaultdict(int)
        )
        self.gauges: dict[tuple[str, tuple[tuple[str, str], ...]], float] = {}

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies[name].append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters[(name, _label_key(labels))] += value

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges[(name, _label_key(labels))] = value

    def count(self, name: str, labels: dict[str, str] | None = None) -> int:
        return self.counters.get((name, _label_key(labels)), 0)

    def gauge(self, name: str, labels: dict[str, str] | None = None) -> float | None:
        return self.gauges.get((name, _label_key(labels)))
