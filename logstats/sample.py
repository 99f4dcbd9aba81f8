"""Synthetic NDJSON logs for benchmarking and manual runs."""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Dict, Sequence

DEFAULT_TYPES = ("PushEvent", "PullRequestEvent", "IssuesEvent", "WatchEvent", "ForkEvent")
_MALFORMED = ("not json", '{"type": 7}', '{"kind": "orphan"}', "[]", '{"type": "trunc')


def generate_sample_log(
    path: Path,
    *,
    lines: int = 1000,
    types: Sequence[str] = DEFAULT_TYPES,
    invalid_ratio: float = 0.05,
    seed: int = 0,
) -> Dict[str, int]:
    """Write ``lines`` records to ``path`` and return the expected per-type counts."""
    if not types:
        raise ValueError("at least one type name is required")
    if not 0.0 <= invalid_ratio <= 1.0:
        raise ValueError("invalid_ratio must be between 0 and 1")
    rng = random.Random(seed)
    expected: Dict[str, int] = {}
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fout:
        for idx in range(lines):
            if rng.random() < invalid_ratio:
                fout.write(rng.choice(_MALFORMED) + "\n")
                continue
            object_type = rng.choice(types)
            record = {
                "id": idx,
                "type": object_type,
                "payload": {"size": rng.randint(0, 512), "tags": ["x"] * rng.randint(0, 4)},
            }
            fout.write(json.dumps(record) + "\n")
            expected[object_type] = expected.get(object_type, 0) + 1
    return expected
