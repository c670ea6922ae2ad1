"""Prober interface for single reachability attempts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from host_selector.models.candidate import ProbeOutcome


class Prober(ABC):
    """Base prober measuring one attempt against one target.

    Implementations report network failures as ``ProbeFailure`` values rather
    than raising, and must be safe to call from several worker threads at once.
    """

    @abstractmethod
    def probe_once(self, target: str) -> ProbeOutcome:
        """Run exactly one attempt against ``target`` and return its outcome."""
