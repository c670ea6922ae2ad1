"""Rank CLI command wiring."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from host_selector.cli import inputs
from host_selector.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli_rank")


def _fmt_ms(value: float | None) -> str:
    return "-" if value is None else f"{value:.1f}"


def rank(
    urls: Optional[List[str]] = typer.Argument(None, help="Candidate URLs; defaults to the built-in list"),
    url_file: Optional[Path] = typer.Option(None, "--file", help="File of URLs (text, JSON or YAML list)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON selector config"),
    pool_size: Optional[int] = typer.Option(None, help="Worker threads probing in parallel"),
    attempts: Optional[int] = typer.Option(None, help="Probe attempts per candidate"),
    timeout_ms: Optional[int] = typer.Option(None, help="Timeout per attempt in milliseconds"),
    port: Optional[int] = typer.Option(None, help="TCP port to probe"),
    as_json: bool = typer.Option(False, "--json", help="Emit the ranking as JSON"),
) -> None:
    """Probe every host and show them ordered by mean latency."""

    selector_config = inputs.resolve_config(
        config=config, pool_size=pool_size, attempts=attempts, timeout_ms=timeout_ms, port=port
    )
    candidates = inputs.resolve_candidates(urls, url_file)

    with inputs.build_selector(selector_config) as selector:
        reports = selector.rank(candidates)

    if as_json:
        typer.echo(json.dumps({"ranking": [r.to_dict() for r in reports]}, indent=2))
        return

    table = Table(title=f"Host ranking ({selector_config.attempts} attempts, port {selector_config.probe_port})")
    table.add_column("#", justify="right")
    table.add_column("Label")
    table.add_column("Target")
    table.add_column("Mean ms", justify="right")
    table.add_column("Best ms", justify="right")
    table.add_column("Failed", justify="right")
    for idx, report in enumerate(reports, start=1):
        table.add_row(
            str(idx),
            report.candidate.label,
            report.candidate.target,
            _fmt_ms(report.latency) if report.reachable else "unreachable",
            _fmt_ms(report.best_ms),
            f"{report.failures}/{report.attempts}",
        )
    console.print(table)
    log.info("rank command completed", extra={"candidates": len(reports)})
