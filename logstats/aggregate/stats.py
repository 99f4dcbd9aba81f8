"""Per-category counters accumulated over one pass of the input."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class CategoryStats:
    count: int = 1
    bytes: int = 0


@dataclass
class AggregateState:
    """Running totals for a single input file.

    ``total_input_bytes`` is fixed when the state is created; only
    :meth:`record` mutates ``categories``.
    """

    total_input_bytes: int = 0
    start_time: float = field(default_factory=time.perf_counter)
    categories: Dict[str, CategoryStats] = field(default_factory=dict)

    def record(self, category: str, size: int) -> None:
        stats = self.categories.get(category)
        if stats is not None:
            stats.count += 1
            stats.bytes += size
            return
        # First sighting: the key is an immutable str decoded from the line,
        # so it stays valid after the read buffer is reused.
        self.categories[category] = CategoryStats(count=1, bytes=size)

    @property
    def lines_processed(self) -> int:
        return sum(stats.count for stats in self.categories.values())

    @property
    def unique_types(self) -> int:
        return len(self.categories)

    @property
    def counted_bytes(self) -> int:
        return sum(stats.bytes for stats in self.categories.values())

    def snapshot(self) -> Dict[str, Any]:
        return {
            "total_input_bytes": self.total_input_bytes,
            "lines_processed": self.lines_processed,
            "unique_types": self.unique_types,
            "categories": {
                name: {"count": stats.count, "bytes": stats.bytes}
                for name, stats in self.categories.items()
            },
        }
