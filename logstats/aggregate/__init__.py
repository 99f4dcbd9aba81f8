"""Running per-type counters."""

from .stats import AggregateState, CategoryStats  # noqa: F401
