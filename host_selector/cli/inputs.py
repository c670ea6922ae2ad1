"""Shared input handling for selection commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

from host_selector.cli.validation import validate_selection_inputs
from host_selector.config.loader import _parse_bool, load_config_with_precedence
from host_selector.data.catalog import DEFAULT_URLS, candidates_from_urls, load_url_list
from host_selector.models.candidate import Candidate
from host_selector.schema.selector_config import SelectorConfig
from host_selector.selection.selector import HostSelector
from host_selector.utils.logging import get_logger

log = get_logger(__name__, component="cli")

DEFAULTS: dict[str, Any] = SelectorConfig().to_dict()

CASTERS = {
    "pool_size": int,
    "attempts": int,
    "timeout_ms": int,
    "probe_port": int,
    "refused_is_reachable": _parse_bool,
}


def resolve_config(
    *,
    config: Optional[Path],
    pool_size: Optional[int],
    attempts: Optional[int],
    timeout_ms: Optional[int],
    port: Optional[int],
) -> SelectorConfig:
    validate_selection_inputs(pool_size=pool_size, attempts=attempts, timeout_ms=timeout_ms, port=port)
    cfg = load_config_with_precedence(
        config_path=config,
        cli_values={
            "pool_size": pool_size,
            "attempts": attempts,
            "timeout_ms": timeout_ms,
            "probe_port": port,
        },
        defaults=DEFAULTS,
        casters=CASTERS,
    )
    return SelectorConfig.from_dict(cfg)


def resolve_candidates(urls: Optional[List[str]], url_file: Optional[Path]) -> List[Candidate]:
    raw: List[str] = list(urls or [])
    if url_file is not None:
        raw.extend(load_url_list(url_file))
    if not raw:
        log.info("no urls supplied; using built-in list", extra={"candidates": len(DEFAULT_URLS)})
        raw = list(DEFAULT_URLS)
    return candidates_from_urls(raw)


def build_selector(config: SelectorConfig) -> HostSelector:
    return HostSelector(config)
