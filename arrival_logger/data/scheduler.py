"""Sequential scheduler that triggers batch invocations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import logging
import math
import threading
import time
from typing import Callable, Iterator, Protocol

from arrival_logger.data.models import BatchResult

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 600.0


class ScheduleStrategy(Protocol):
    def ticks(self, stop_event: threading.Event) -> Iterator[None]: ...


@dataclass(frozen=True)
class RunOnce:
    """Fire a single tick immediately."""

    def ticks(self, stop_event: threading.Event) -> Iterator[None]:
        if not stop_event.is_set():
            yield None


@dataclass(frozen=True)
class RunOnInterval:
    """Fire immediately, then at a fixed rate until stopped.

    Ticks missed while a batch was still running are dropped.
    """

    interval_seconds: float = DEFAULT_INTERVAL_SECONDS

    def __post_init__(self) -> None:
        interval = self.interval_seconds
        valid = not isinstance(interval, bool) and isinstance(interval, (int, float))
        if not valid or not math.isfinite(interval) or interval <= 0:
            raise ValueError(f"interval_seconds must be a number greater than 0, got {interval!r}")

    def ticks(self, stop_event: threading.Event) -> Iterator[None]:
        next_tick = time.monotonic()
        while True:
            remaining = next_tick - time.monotonic()
            if remaining > 0 and stop_event.wait(timeout=remaining):
                return
            if stop_event.is_set():
                return
            yield None
            next_tick += self.interval_seconds
            now = time.monotonic()
            while next_tick <= now:
                next_tick += self.interval_seconds


class BatchScheduler:
    """Runs a batch job on each tick of a schedule strategy, one at a time."""

    def __init__(
        self,
        job: Callable[[datetime], BatchResult],
        strategy: ScheduleStrategy,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._job = job
        self._strategy = strategy
        self._clock = clock
        self._stop_event = threading.Event()
        self._runs = 0

    @property
    def runs(self) -> int:
        """Number of job invocations so far."""
        return self._runs

    def stop(self) -> None:
        """Signal the loop to stop at its next wait."""
        self._stop_event.set()

    def run(self) -> int:
        """Run until the strategy is exhausted or :meth:`stop` is called."""
        for _ in self._strategy.ticks(self._stop_event):
            self._run_tick()
        return self._runs

    def _run_tick(self) -> None:
        timestamp = self._clock()
        self._runs += 1
        try:
            result = self._job(timestamp)
        except Exception:
            logger.exception("Batch failed at %s", timestamp)
            return
        if not result.ok:
            logger.warning("Batch at %s finished with error: %s", timestamp, result.error)


__all__ = ["BatchScheduler", "RunOnInterval", "RunOnce", "ScheduleStrategy"]
