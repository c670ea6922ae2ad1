"""Repeated probing of a single candidate."""

from __future__ import annotations

from host_selector.interfaces.prober import Prober
from host_selector.models.candidate import (
    Candidate,
    ProbeFailure,
    ProbeOutcome,
    ProbeReport,
    mean_latency,
)
from host_selector.schema.selector_config import DEFAULT_ATTEMPTS
from host_selector.utils.logging import get_logger

log = get_logger(__name__, component="probe")


def _attempt(prober: Prober, candidate: Candidate) -> ProbeOutcome:
    try:
        return prober.probe_once(candidate.target)
    except Exception as exc:
        log.warning(
            "probe raised; counting attempt as failed",
            extra={"label": candidate.label, "target": candidate.target, "reason": "error"},
            exc_info=True,
        )
        return ProbeFailure("error", f"{type(exc).__name__}: {exc}")


def measure_candidate(candidate: Candidate, prober: Prober, attempts: int = DEFAULT_ATTEMPTS) -> ProbeReport:
    """Probe ``candidate`` ``attempts`` times in sequence and record the mean.

    Failed attempts enter the mean as the sentinel latency, so a candidate that
    fails now and then ranks behind one that always answers.
    """

    outcomes: list[ProbeOutcome] = []
    for _ in range(attempts):
        outcome = _attempt(prober, candidate)
        log.debug(
            "probe attempt",
            extra={
                "label": candidate.label,
                "target": candidate.target,
                "latency_ms": outcome.latency_ms if outcome.ok else None,
                "reason": None if outcome.ok else outcome.reason,
            },
        )
        outcomes.append(outcome)

    report = ProbeReport(candidate=candidate, outcomes=tuple(outcomes), latency=mean_latency(tuple(outcomes)))
    candidate.record_latency(report.latency)
    return report
