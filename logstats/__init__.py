"""Per-type statistics for newline-delimited JSON logs."""

from .aggregate import AggregateState, CategoryStats  # noqa: F401
from .pipeline import process_file  # noqa: F401
