"""Layered configuration loading: defaults < file < environment < CLI."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from host_selector.exceptions import ConfigValidationError
from host_selector.utils.logging import get_logger

log = get_logger(__name__, component="config")

ENV_PREFIX = "HOST_SELECTOR_"

Caster = Callable[[Any], Any]


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _load_yaml(path: Path) -> dict:
    content = yaml.safe_load(path.read_text()) or {}
    if not isinstance(content, dict):
        raise ConfigValidationError(f"Config file must hold a mapping: {path}")
    return content


def _load_file(path: Path) -> dict:
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            content = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigValidationError(f"Invalid JSON in {path}: {exc}") from exc
        if not isinstance(content, dict):
            raise ConfigValidationError(f"Config file must hold a mapping: {path}")
        return content
    if suffix in {".yml", ".yaml"}:
        try:
            return _load_yaml(path)
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"Invalid YAML in {path}: {exc}") from exc
    raise ConfigValidationError("Config file must be JSON or YAML")


def _env_values(env_prefix: str, keys: list[str], environ: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for key in keys:
        raw = environ.get(f"{env_prefix}{key.upper()}")
        if raw is not None and raw != "":
            values[key] = raw
    return values


def load_config_with_precedence(
    *,
    config_path: Path | None,
    env_prefix: str = ENV_PREFIX,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Mapping[str, Caster] | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Merge configuration layers; later layers win, ``None`` never overrides."""

    casters = casters or {}
    environ = os.environ if environ is None else environ
    merged: dict[str, Any] = dict(defaults)
    sources: dict[str, str] = {key: "default" for key in merged}

    if config_path is not None:
        for key, value in _load_file(Path(config_path)).items():
            if key not in defaults:
                raise ConfigValidationError(f"Unknown config key '{key}' in {config_path}")
            merged[key] = value
            sources[key] = "file"

    for key, value in _env_values(env_prefix, list(defaults), environ).items():
        merged[key] = value
        sources[key] = "env"

    for key, value in cli_values.items():
        if value is not None:
            merged[key] = value
            sources[key] = "cli"

    for key, caster in casters.items():
        value = merged.get(key)
        if value is None:
            continue
        try:
            merged[key] = caster(value)
        except (TypeError, ValueError) as exc:
            raise ConfigValidationError(f"Invalid value for {key} ({sources.get(key)}): {value!r}") from exc

    log.debug("Configuration resolved", extra={"sources": sources})
    return merged


__all__ = ["ENV_PREFIX", "load_config_with_precedence"]
