"""Streaming read -> extract -> aggregate loop."""

from __future__ import annotations

import logging
import os
from collections import Counter
from pathlib import Path
from typing import BinaryIO

from .aggregate import AggregateState
from .errors import InputFileError
from .ingest import LineSource, Outcome, extract_record

logger = logging.getLogger(__name__)


def aggregate_stream(stream: BinaryIO, state: AggregateState) -> AggregateState:
    """Consume ``stream`` line by line, folding each record into ``state``."""
    skipped: Counter = Counter()
    for num_bytes, line in LineSource(stream):
        extraction = extract_record(line, num_bytes)
        if extraction.category is None:
            skipped[extraction.outcome] += 1
            continue
        state.record(extraction.category, extraction.size)
    if skipped:
        logger.debug(
            "Skipped %d invalid lines and %d lines without a type",
            skipped[Outcome.INVALID],
            skipped[Outcome.MISSING_TYPE],
        )
    return state


def process_file(path: str | Path) -> AggregateState:
    path = Path(path)
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise InputFileError(f"Failed to open file {path}: {exc}") from exc
    with handle:
        state = AggregateState(total_input_bytes=os.fstat(handle.fileno()).st_size)
        logger.debug("Processing %s (%d bytes)", path, state.total_input_bytes)
        return aggregate_stream(handle, state)
