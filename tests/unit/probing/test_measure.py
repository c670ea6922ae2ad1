from __future__ import annotations

import pytest

from host_selector.interfaces.prober import Prober
from host_selector.models.candidate import SENTINEL_LATENCY_MS, Candidate
from host_selector.probing.measure import measure_candidate


class ExplodingProber(Prober):
    def probe_once(self, target):
        raise RuntimeError("boom")


def test_measure_records_mean(scripted_prober):
    prober = scripted_prober({"a.example": [20, 40, 60]})
    candidate = Candidate("https://a.example", "a.example")

    report = measure_candidate(candidate, prober, attempts=3)

    assert candidate.latency == 40.0
    assert report.latency == 40.0
    assert report.candidate is candidate
    assert prober.calls == ["a.example"] * 3


def test_measure_all_failed_is_sentinel(scripted_prober):
    prober = scripted_prober({"down.example": ["timeout"]})
    candidate = Candidate("https://down.example", "down.example")

    report = measure_candidate(candidate, prober, attempts=3)

    assert candidate.latency == SENTINEL_LATENCY_MS
    assert report.failures == 3


def test_measure_partial_failure_ranks_behind_consistent(scripted_prober):
    prober = scripted_prober({"flaky.example": [5, "timeout", 5], "steady.example": [50]})
    flaky = Candidate("flaky", "flaky.example")
    steady = Candidate("steady", "steady.example")

    measure_candidate(flaky, prober)
    measure_candidate(steady, prober)

    assert steady.latency < flaky.latency < SENTINEL_LATENCY_MS


def test_measure_absorbs_prober_exceptions(caplog):
    candidate = Candidate("https://a.example", "a.example")

    with caplog.at_level("WARNING"):
        report = measure_candidate(candidate, ExplodingProber(), attempts=2)

    assert candidate.latency == SENTINEL_LATENCY_MS
    assert [o.reason for o in report.outcomes] == ["error", "error"]
    assert any("probe raised" in r.message for r in caplog.records)


@pytest.mark.parametrize("attempts", [1, 5])
def test_measure_respects_attempt_count(scripted_prober, attempts):
    prober = scripted_prober({"a.example": [10]})
    report = measure_candidate(Candidate("a", "a.example"), prober, attempts=attempts)
    assert report.attempts == attempts
