"""CLI validation helpers."""

from __future__ import annotations

from host_selector.exceptions import ConfigValidationError


def require_positive(name: str, value: int | float | None) -> None:
    if value is not None and value <= 0:
        raise ConfigValidationError(f"{name} must be > 0")


def validate_selection_inputs(
    *,
    pool_size: int | None = None,
    attempts: int | None = None,
    timeout_ms: int | None = None,
    port: int | None = None,
) -> None:
    require_positive("pool_size", pool_size)
    require_positive("attempts", attempts)
    require_positive("timeout_ms", timeout_ms)
    if port is not None and not 1 <= port <= 65535:
        raise ConfigValidationError("port must be between 1 and 65535")
