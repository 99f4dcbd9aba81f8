"""CLI entry point for summarizing NDJSON logs by type."""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .config import load_settings
from .errors import ConfigError, LogStatsError
from .observability import configure_logging
from .pipeline import process_file
from .report import render_report, write_snapshot

app = typer.Typer(help="Count records and bytes per `type` in an NDJSON log.")
console = Console()


@app.command()
def run(
    input_file: Path = typer.Argument(
        None,
        help="Log file to analyze (defaults to input_file from the settings file)",
    ),
    config: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML settings file (default: $LOGSTATS_CONFIG or config.yaml)",
    ),
    log_level: str = typer.Option(None, "--log-level", help="Override the configured log level"),
    json_output: Path = typer.Option(None, "--json-output", help="Also write per-type stats as JSON"),
) -> None:
    """Stream the log once and print per-type counts and sizes."""
    load_dotenv()
    try:
        settings = load_settings(config, log_level=log_level)
    except ConfigError as exc:
        console.log(f"[red]Error loading config[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    configure_logging(settings.logging_level)

    path = input_file or Path(settings.input_file)
    try:
        state = process_file(path)
        summary = render_report(state, console=console)
        if json_output is not None:
            write_snapshot(state, json_output, summary)
    except LogStatsError as exc:
        console.log(f"[red]Run failed[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    if json_output is not None:
        console.log(f"[green]Stats saved[/] {json_output}")


if __name__ == "__main__":
    app()
