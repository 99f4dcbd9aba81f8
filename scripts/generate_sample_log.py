"""CLI for writing synthetic NDJSON logs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import typer
from rich.console import Console

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from logstats.sample import DEFAULT_TYPES, generate_sample_log  # noqa: E402

app = typer.Typer(help="Generate NDJSON logs for logstats benchmarks.")
console = Console()


@app.command()
def run(
    output: Path = typer.Argument(Path("small.log"), dir_okay=False, help="Where to write the log."),
    lines: int = typer.Option(1000, "--lines", "-n", help="Number of lines to write."),
    types: List[str] = typer.Option(list(DEFAULT_TYPES), "--type", "-t", help="Type names to draw from."),
    invalid_ratio: float = typer.Option(0.05, "--invalid-ratio", help="Share of malformed lines."),
    seed: int = typer.Option(0, "--seed", help="Random seed for reproducibility."),
) -> None:
    expected = generate_sample_log(output, lines=lines, types=types, invalid_ratio=invalid_ratio, seed=seed)
    console.log(f"[green]Sample log ready[/] {output} types={len(expected)} records={sum(expected.values())}")


if __name__ == "__main__":
    app()
