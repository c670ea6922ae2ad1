import pytest

from host_selector.exceptions import CandidateStateError
from host_selector.models.candidate import (
    SENTINEL_LATENCY_MS,
    Candidate,
    ProbeFailure,
    ProbeReport,
    ProbeSuccess,
    mean_latency,
)


def test_latency_recorded_once_per_run():
    candidate = Candidate("https://a.example", "a.example")
    assert candidate.latency is None

    candidate.record_latency(12)
    assert candidate.latency == 12.0

    with pytest.raises(CandidateStateError):
        candidate.record_latency(5)

    candidate.reset_latency()
    candidate.record_latency(5)
    assert candidate.latency == 5.0


def test_candidates_compare_by_identity():
    a = Candidate("https://a.example", "a.example")
    b = Candidate("https://a.example", "a.example")
    assert a != b
    assert a == a


def test_mean_latency_exact_average():
    outcomes = (ProbeSuccess(20.0), ProbeSuccess(40.0), ProbeSuccess(60.0))
    assert mean_latency(outcomes) == 40.0


def test_mean_latency_no_truncation():
    outcomes = (ProbeSuccess(10.0), ProbeSuccess(11.0))
    assert mean_latency(outcomes) == pytest.approx(10.5)


def test_failures_count_as_sentinel():
    all_failed = (ProbeFailure("timeout"),) * 3
    assert mean_latency(all_failed) == SENTINEL_LATENCY_MS

    partial = (ProbeSuccess(10.0), ProbeFailure("timeout"), ProbeSuccess(10.0))
    value = mean_latency(partial)
    assert 10.0 < value < SENTINEL_LATENCY_MS


def test_report_diagnostics():
    candidate = Candidate("https://a.example", "a.example")
    outcomes = (ProbeSuccess(10.0), ProbeFailure("timeout"), ProbeSuccess(30.0))
    report = ProbeReport(candidate=candidate, outcomes=outcomes, latency=mean_latency(outcomes))

    assert report.attempts == 3
    assert report.successes == 2
    assert report.failures == 1
    assert report.reachable
    assert report.best_ms == 10.0
    assert report.jitter_ms == pytest.approx(10.0)

    payload = report.to_dict()
    assert payload["label"] == "https://a.example"
    assert payload["failure_reasons"] == ["timeout"]


def test_unreachable_report_hides_sentinel():
    candidate = Candidate("https://down.example", "down.example")
    outcomes = (ProbeFailure("resolution"),) * 2
    report = ProbeReport(candidate=candidate, outcomes=outcomes, latency=mean_latency(outcomes))

    assert not report.reachable
    assert report.best_ms is None
    assert report.jitter_ms is None
    assert report.to_dict()["latency_ms"] is None
