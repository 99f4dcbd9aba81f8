"""End-of-run summary and per-type table."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .aggregate import AggregateState
from .errors import ReportError

MEGABYTE = 1_048_576
MIN_ELAPSED_S = 1e-9

logger = logging.getLogger(__name__)


class RunSummary(BaseModel):
    elapsed_s: float
    file_size_mb: float
    throughput_mb_s: Optional[float]
    lines_processed: int
    unique_types: int

    def log_line(self) -> str:
        throughput = "n/a" if self.throughput_mb_s is None else f"{self.throughput_mb_s:.2f}"
        return (
            f"[time={self.elapsed_s:.3f}s][file_size={self.file_size_mb:.2f}MB]"
            f"[throughput={throughput}MB/s][lines={self.lines_processed}]"
            f"[unique_types={self.unique_types}]"
        )


def summarize(state: AggregateState, now: float | None = None) -> RunSummary:
    """Compute elapsed time and throughput for ``state``.

    Throughput is ``None`` when the elapsed time is too small to divide by,
    which happens on empty or tiny inputs.
    """
    elapsed = (time.perf_counter() if now is None else now) - state.start_time
    file_size_mb = state.total_input_bytes / MEGABYTE
    throughput = file_size_mb / elapsed if elapsed > MIN_ELAPSED_S else None
    return RunSummary(
        elapsed_s=max(elapsed, 0.0),
        file_size_mb=file_size_mb,
        throughput_mb_s=throughput,
        lines_processed=state.lines_processed,
        unique_types=state.unique_types,
    )


def build_table(state: AggregateState) -> Table:
    table = Table()
    for title in ("Type", "Count", "Size Bytes"):
        table.add_column(title, header_style="bold", justify="right")
    # Rows follow the mapping's own order; no sorting is applied.
    for name, stats in state.categories.items():
        table.add_row(Text(name), str(stats.count), str(stats.bytes))
    return table


def render_report(
    state: AggregateState,
    console: Console | None = None,
    now: float | None = None,
) -> RunSummary:
    summary = summarize(state, now=now)
    logger.info(summary.log_line())
    console = console or Console()
    try:
        console.print(build_table(state))
    except (OSError, ValueError) as exc:
        raise ReportError(f"Failed to print stats table: {exc}") from exc
    return summary


def write_snapshot(state: AggregateState, path: Path, summary: RunSummary | None = None) -> None:
    payload = state.snapshot()
    if summary is not None:
        payload["summary"] = summary.model_dump()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fout:
            json.dump(payload, fout, indent=2)
    except OSError as exc:
        raise ReportError(f"Failed to write stats JSON {path}: {exc}") from exc
