"""Wall-clock timing of selection runs."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from host_selector.utils.logging import get_logger

log = get_logger(__name__, component="profiling")


@dataclass
class Timing:
    started: float
    elapsed_ms: Optional[float] = None


@contextmanager
def track_time(name: str, *, budget_seconds: Optional[float] = None) -> Iterator[Timing]:
    """Time the enclosed block and log it; WARNING once ``budget_seconds`` is reached.

    ``elapsed_ms`` on the yielded ``Timing`` is filled in when the block exits.
    """

    timing = Timing(started=time.perf_counter())
    try:
        yield timing
    finally:
        timing.elapsed_ms = (time.perf_counter() - timing.started) * 1000.0
        extra = {"segment": name, "duration_ms": round(timing.elapsed_ms, 3)}
        if budget_seconds is not None and timing.elapsed_ms >= budget_seconds * 1000.0:
            log.warning("segment ran past its worst-case bound", extra={**extra, "budget_ms": budget_seconds * 1000.0})
        else:
            log.info("segment timing", extra=extra)
