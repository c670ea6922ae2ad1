"""
Host selector

Concurrently probes candidate endpoints and picks the one with the lowest
mean round-trip latency.
"""

from host_selector.models.candidate import SENTINEL_LATENCY_MS, Candidate, ProbeFailure, ProbeReport, ProbeSuccess
from host_selector.schema.selector_config import SelectorConfig
from host_selector.selection.selector import HostSelector, select_best

__version__ = "0.1.0"

__all__ = [
    "Candidate",
    "HostSelector",
    "ProbeFailure",
    "ProbeReport",
    "ProbeSuccess",
    "SENTINEL_LATENCY_MS",
    "SelectorConfig",
    "select_best",
]
