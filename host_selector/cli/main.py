"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from host_selector.cli.commands.pick import pick
from host_selector.cli.commands.rank import rank
from host_selector.exceptions import ConfigError, SelectionError
from host_selector.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Pick the lowest-latency host from a list of URLs")


app.command()(pick)
app.command()(rank)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except ConfigError as exc:
        log.error(str(exc))
        raise typer.Exit(code=1)
    except SelectionError as exc:
        log.error(f"Selection failed: {exc}")
        raise typer.Exit(code=3)
    except KeyboardInterrupt:
        log.info("Interrupted; waiting for in-flight probes to finish")
        raise typer.Exit(code=130)
    except Exception:
        log.exception("Unhandled exception")
        raise typer.Exit(code=255)


def run() -> None:
    """Console-script entry point; turns the mapped exit code into the process status."""

    try:
        main()
    except typer.Exit as exc:
        sys.exit(exc.exit_code)


if __name__ == "__main__":
    run()
