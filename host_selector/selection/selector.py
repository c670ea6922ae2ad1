"""Concurrent probing and ranking of candidate hosts.

A ``HostSelector`` owns a fixed-size thread pool. Each run fans out one
probing task per candidate, waits for every task to finish, then ranks the
candidates by mean latency. The pool lives until ``release()``; use the
selector as a context manager to guarantee that.
"""

from __future__ import annotations

import threading
from concurrent.futures import ALL_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Iterable, List, Optional, Sequence

from host_selector.exceptions import SelectionError, SelectorClosedError
from host_selector.interfaces.prober import Prober
from host_selector.models.candidate import Candidate, ProbeReport
from host_selector.probing.measure import measure_candidate
from host_selector.probing.tcp import TcpConnectProber
from host_selector.schema.selector_config import SelectorConfig
from host_selector.selection.ranking import has_measurement, rank_reports
from host_selector.utils.logging import get_logger
from host_selector.utils.profiling import track_time
from host_selector.utils.resources import estimate_worst_case_seconds

log = get_logger(__name__, component="selector")

POOL_THREAD_PREFIX = "host-selector-pool"


def _unique(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Drop repeated candidate objects, keeping first-seen order."""

    return list({id(candidate): candidate for candidate in candidates}.values())


def _default_prober(config: SelectorConfig) -> Prober:
    return TcpConnectProber(
        port=config.probe_port,
        timeout_ms=config.timeout_ms,
        refused_is_reachable=config.refused_is_reachable,
    )


class HostSelector:
    """Pick the lowest-latency candidate from a batch."""

    def __init__(self, config: Optional[SelectorConfig] = None, *, prober: Optional[Prober] = None) -> None:
        self.config = config or SelectorConfig()
        self.prober = prober or _default_prober(self.config)
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.pool_size,
            thread_name_prefix=POOL_THREAD_PREFIX,
        )
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "HostSelector":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def _dispatch(self, candidates: Sequence[Candidate]) -> List[Future]:
        with self._lock:
            if self._closed:
                raise SelectorClosedError("selector has been released")
            for candidate in candidates:
                candidate.reset_latency()
            return [
                self._executor.submit(measure_candidate, candidate, self.prober, self.config.attempts)
                for candidate in candidates
            ]

    def rank(self, candidates: Iterable[Candidate]) -> List[ProbeReport]:
        """Probe every candidate and return their reports, best first.

        Blocks until all probing tasks are done. A candidate object listed more
        than once is probed once, at its first position. Probe failures never raise;
        failures of the pool itself surface as ``SelectionError``.
        """

        if self._closed:
            raise SelectorClosedError("selector has been released")
        candidates = _unique(candidates)
        if not candidates:
            return []

        budget = estimate_worst_case_seconds(
            len(candidates), self.config.pool_size, self.config.attempts, self.config.timeout_ms
        )
        with track_time("rank", budget_seconds=budget):
            try:
                futures = self._dispatch(candidates)
                wait(futures, return_when=ALL_COMPLETED)
                reports = [future.result() for future in futures]
            except SelectionError:
                raise
            except Exception as exc:
                raise SelectionError(f"probing batch failed: {exc}") from exc

        ranked = rank_reports(reports)
        for report in ranked:
            log.debug(
                "ranked candidate",
                extra={
                    "label": report.candidate.label,
                    "target": report.candidate.target,
                    "latency_ms": report.latency,
                    "reason": f"{report.failures}/{report.attempts} attempts failed",
                },
            )
        return ranked

    def select_best(self, candidates: Iterable[Candidate]) -> Optional[Candidate]:
        """Return the lowest-latency candidate, or ``None``.

        ``None`` covers an empty batch, a batch where no candidate answered a
        single attempt, and a failure of the worker pool.
        """

        candidates = list(candidates)
        try:
            ranked = self.rank(candidates)
        except SelectorClosedError:
            raise
        except SelectionError:
            log.exception("selection aborted", extra={"candidates": len(candidates)})
            return None

        if not ranked or not has_measurement(ranked[0].candidate):
            log.info("no suitable host", extra={"candidates": len(ranked)})
            return None

        best = ranked[0].candidate
        log.info(
            "best host selected",
            extra={"label": best.label, "target": best.target, "latency_ms": best.latency, "candidates": len(ranked)},
        )
        return best

    def release(self) -> None:
        """Shut the pool down, waiting for in-flight tasks."""

        with self._lock:
            if self._closed:
                log.debug("release called on a released selector")
                return
            self._closed = True
        self._executor.shutdown(wait=True)


def select_best(
    candidates: Iterable[Candidate],
    config: Optional[SelectorConfig] = None,
    *,
    prober: Optional[Prober] = None,
) -> Optional[Candidate]:
    """One-shot selection with a selector scoped to this call."""

    with HostSelector(config, prober=prober) as selector:
        return selector.select_best(candidates)


__all__ = ["HostSelector", "POOL_THREAD_PREFIX", "select_best"]
