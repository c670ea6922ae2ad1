"""Worst-case duration estimates for a probing batch."""

from __future__ import annotations

import math

from host_selector.exceptions import ConfigValidationError


def estimate_worst_case_seconds(candidate_count: int, pool_size: int, attempts: int, timeout_ms: float) -> float:
    """Upper bound on one selection run when every attempt times out.

    Tasks run in waves of ``pool_size``; each task makes ``attempts`` sequential
    attempts of at most ``timeout_ms`` each.
    """

    if candidate_count < 0:
        raise ConfigValidationError("candidate_count must be >= 0")
    if pool_size <= 0 or attempts <= 0 or timeout_ms <= 0:
        raise ConfigValidationError("pool_size, attempts and timeout_ms must be > 0")
    waves = math.ceil(candidate_count / pool_size)
    return waves * attempts * timeout_ms / 1000.0
