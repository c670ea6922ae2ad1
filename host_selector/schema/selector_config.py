"""Selector configuration schema and validation."""

from __future__ import annotations

from dataclasses import dataclass, fields

from host_selector.exceptions import ConfigValidationError

DEFAULT_POOL_SIZE = 4
DEFAULT_ATTEMPTS = 3
DEFAULT_TIMEOUT_MS = 500
DEFAULT_PROBE_PORT = 80


@dataclass(slots=True)
class SelectorConfig:
    """Knobs for one HostSelector.

    Attributes:
        pool_size: Worker threads probing candidates in parallel.
        attempts: Sequential probe attempts per candidate.
        timeout_ms: Upper bound for a single attempt.
        probe_port: TCP port used for reachability probes.
        refused_is_reachable: Count a refused connection as a reachable host.
    """

    pool_size: int = DEFAULT_POOL_SIZE
    attempts: int = DEFAULT_ATTEMPTS
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    probe_port: int = DEFAULT_PROBE_PORT
    refused_is_reachable: bool = True

    def __post_init__(self) -> None:
        if self.pool_size <= 0:
            raise ConfigValidationError("pool_size must be > 0")
        if self.attempts <= 0:
            raise ConfigValidationError("attempts must be > 0")
        if self.timeout_ms <= 0:
            raise ConfigValidationError("timeout_ms must be > 0")
        if not 1 <= self.probe_port <= 65535:
            raise ConfigValidationError("probe_port must be between 1 and 65535")

    @classmethod
    def from_dict(cls, data: dict) -> "SelectorConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(f"unknown selector options: {sorted(unknown)}")
        return cls(**{k: v for k, v in data.items() if v is not None})

    def to_dict(self) -> dict:
        return {
            "pool_size": self.pool_size,
            "attempts": self.attempts,
            "timeout_ms": self.timeout_ms,
            "probe_port": self.probe_port,
            "refused_is_reachable": self.refused_is_reachable,
        }
