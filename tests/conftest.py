from __future__ import annotations

from typing import Dict, List, Sequence, Union

import pytest

from host_selector.interfaces.prober import Prober
from host_selector.models.candidate import ProbeFailure, ProbeOutcome, ProbeSuccess

Script = Sequence[Union[float, str]]


class ScriptedProber(Prober):
    """Replays per-target attempt results: numbers are durations, strings failure reasons."""

    def __init__(self, scripts: Dict[str, Script]) -> None:
        self._scripts = {target: list(script) for target, script in scripts.items()}
        self._cursor = {target: 0 for target in scripts}
        self.calls: List[str] = []

    def probe_once(self, target: str) -> ProbeOutcome:
        self.calls.append(target)
        script = self._scripts.get(target)
        if not script:
            return ProbeFailure("resolution", f"unknown target {target}")
        idx = self._cursor[target]
        self._cursor[target] = idx + 1
        step = script[idx % len(script)]
        if isinstance(step, str):
            return ProbeFailure(step)
        return ProbeSuccess(float(step))


@pytest.fixture
def scripted_prober():
    return ScriptedProber
