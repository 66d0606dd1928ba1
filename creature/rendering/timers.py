"""Frame timing helpers for solver and render instrumentation."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator


@dataclass
class _PhaseStats:
    total_ms: float = 0.0
    count: int = 0

    @property
    def average_ms(self) -> float:
        return self.total_ms / max(1, self.count)


class FrameTimers:
    """Accumulates per-phase durations and logs their averages every few seconds."""

    def __init__(self, logger=None, *, log_interval: float = 5.0) -> None:
        self._stats: Dict[str, _PhaseStats] = {}
        self._frames = 0
        self._last_log = time.perf_counter()
        self._log_interval = log_interval
        self._logger = logger

    @contextmanager
    def time(self, name: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            stats = self._stats.setdefault(name, _PhaseStats())
            stats.total_ms += (time.perf_counter() - start) * 1000.0
            stats.count += 1

    def end_frame(self) -> None:
        self._frames += 1

    def average_ms(self, name: str) -> float:
        stats = self._stats.get(name)
        return stats.average_ms if stats else 0.0

    def summary(self, elapsed: float) -> str:
        parts = [f"{name}: {stats.average_ms:.2f} ms" for name, stats in self._stats.items() if stats.count]
        fps = self._frames / elapsed if elapsed > 0 else 0.0
        parts.append(f"{fps:.1f} fps")
        return "; ".join(parts)

    def maybe_log(self) -> None:
        if self._logger is None:
            return
        now = time.perf_counter()
        elapsed = now - self._last_log
        if elapsed < self._log_interval:
            return
        if self._frames:
            self._logger.info("Perf timers | %s", self.summary(elapsed))
        self.reset()

    def reset(self) -> None:
        self._stats.clear()
        self._frames = 0
        self._last_log = time.perf_counter()
