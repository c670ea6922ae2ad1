"""Candidate endpoints and per-attempt probe outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

import numpy as np

from host_selector.exceptions import CandidateStateError

# Largest latency the ranking distinguishes; stands in for a failed attempt.
SENTINEL_LATENCY_MS = float(2**31 - 1)

FailureReason = str  # "resolution" | "timeout" | "unreachable" | "error"


@dataclass(eq=False, slots=True)
class Candidate:
    """One probe-able endpoint.

    ``label`` is carried through untouched for reporting; ``target`` is the
    hostname or address literal that gets probed. ``latency`` is filled in by
    the selector, once per run.
    """

    label: str
    target: str
    latency: Optional[float] = None

    def record_latency(self, value: float) -> None:
        if self.latency is not None:
            raise CandidateStateError(f"latency already recorded for {self.label!r}")
        self.latency = float(value)

    def reset_latency(self) -> None:
        self.latency = None


@dataclass(frozen=True, slots=True)
class ProbeSuccess:
    duration_ms: float

    @property
    def ok(self) -> bool:
        return True

    @property
    def latency_ms(self) -> float:
        return self.duration_ms


@dataclass(frozen=True, slots=True)
class ProbeFailure:
    reason: FailureReason
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def latency_ms(self) -> float:
        return SENTINEL_LATENCY_MS


ProbeOutcome = Union[ProbeSuccess, ProbeFailure]


def mean_latency(outcomes: Tuple[ProbeOutcome, ...]) -> float:
    """Arithmetic mean of attempt latencies, failures counted as the sentinel."""

    if not outcomes:
        return SENTINEL_LATENCY_MS
    return float(np.mean([outcome.latency_ms for outcome in outcomes]))


@dataclass(frozen=True, slots=True)
class ProbeReport:
    """Everything one probing task learned about its candidate."""

    candidate: Candidate
    outcomes: Tuple[ProbeOutcome, ...]
    latency: float

    @property
    def attempts(self) -> int:
        return len(self.outcomes)

    @property
    def successes(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failures(self) -> int:
        return self.attempts - self.successes

    @property
    def reachable(self) -> bool:
        return self.successes > 0

    @property
    def best_ms(self) -> Optional[float]:
        durations = [o.duration_ms for o in self.outcomes if isinstance(o, ProbeSuccess)]
        return min(durations) if durations else None

    @property
    def jitter_ms(self) -> Optional[float]:
        durations = [o.duration_ms for o in self.outcomes if isinstance(o, ProbeSuccess)]
        if not durations:
            return None
        return float(np.std(durations))

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.candidate.label,
            "target": self.candidate.target,
            "latency_ms": self.latency if self.reachable else None,
            "best_ms": self.best_ms,
            "jitter_ms": self.jitter_ms,
            "attempts": self.attempts,
            "failures": self.failures,
            "failure_reasons": [o.reason for o in self.outcomes if isinstance(o, ProbeFailure)],
        }
