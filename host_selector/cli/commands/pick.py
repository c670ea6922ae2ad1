"""Pick CLI command wiring."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from host_selector.cli import inputs
from host_selector.utils.logging import get_logger

log = get_logger(__name__, component="cli_pick")

NOT_FOUND_MESSAGE = "No suitable host found"


def pick(
    urls: Optional[List[str]] = typer.Argument(None, help="Candidate URLs; defaults to the built-in list"),
    url_file: Optional[Path] = typer.Option(None, "--file", help="File of URLs (text, JSON or YAML list)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON selector config"),
    pool_size: Optional[int] = typer.Option(None, help="Worker threads probing in parallel"),
    attempts: Optional[int] = typer.Option(None, help="Probe attempts per candidate"),
    timeout_ms: Optional[int] = typer.Option(None, help="Timeout per attempt in milliseconds"),
    port: Optional[int] = typer.Option(None, help="TCP port to probe"),
    as_json: bool = typer.Option(False, "--json", help="Emit the result as JSON"),
) -> None:
    """Print the URL of the lowest-latency host."""

    selector_config = inputs.resolve_config(
        config=config, pool_size=pool_size, attempts=attempts, timeout_ms=timeout_ms, port=port
    )
    candidates = inputs.resolve_candidates(urls, url_file)

    with inputs.build_selector(selector_config) as selector:
        best = selector.select_best(candidates)

    if best is None:
        if as_json:
            typer.echo(json.dumps({"best": None}))
        else:
            typer.echo(NOT_FOUND_MESSAGE)
        raise typer.Exit(code=2)

    if as_json:
        typer.echo(json.dumps({"best": {"label": best.label, "target": best.target, "latency_ms": best.latency}}))
    else:
        typer.echo(best.label)
    log.info("pick command completed", extra={"label": best.label})
