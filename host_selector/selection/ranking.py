"""Total ordering of candidates by measured latency."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List

from host_selector.models.candidate import SENTINEL_LATENCY_MS, Candidate, ProbeReport


def effective_latency(candidate: Candidate) -> float:
    """Latency used for ranking; unmeasured candidates sort with the failures."""

    if candidate.latency is None:
        return SENTINEL_LATENCY_MS
    return candidate.latency


def compare_candidates(a: Candidate, b: Candidate) -> int:
    left, right = effective_latency(a), effective_latency(b)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def rank_candidates(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Sort by latency ascending; equal latencies keep their input order."""

    return sorted(candidates, key=cmp_to_key(compare_candidates))


def rank_reports(reports: Iterable[ProbeReport]) -> List[ProbeReport]:
    return sorted(reports, key=cmp_to_key(lambda a, b: compare_candidates(a.candidate, b.candidate)))


def has_measurement(candidate: Candidate) -> bool:
    """True when at least one attempt succeeded, i.e. the mean is below the sentinel."""

    return effective_latency(candidate) < SENTINEL_LATENCY_MS


__all__ = ["compare_candidates", "effective_latency", "has_measurement", "rank_candidates", "rank_reports"]
