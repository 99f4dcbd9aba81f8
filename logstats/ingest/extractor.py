"""Pull the ``type`` discriminator out of one NDJSON line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError


class LogLine(BaseModel):
    # Every other key of the record is irrelevant and never validated.
    model_config = ConfigDict(extra="ignore")

    object_type: StrictStr = Field(alias="type")


class Outcome(str, Enum):
    RECORD = "record"
    INVALID = "invalid"
    MISSING_TYPE = "missing_type"


@dataclass(frozen=True)
class Extraction:
    outcome: Outcome
    category: Optional[str] = None
    size: int = 0


_INVALID = Extraction(Outcome.INVALID)
_MISSING_TYPE = Extraction(Outcome.MISSING_TYPE)


def extract_record(line: Union[bytes, bytearray, str], size: Optional[int] = None) -> Extraction:
    """Parse ``line`` and return its category, or a skip outcome.

    ``size`` is the byte length of the line as read from the input and
    defaults to ``len(line)``. Lines that are not JSON objects, and objects
    without a string ``type``, never raise.
    """
    try:
        parsed = LogLine.model_validate_json(line)
    except ValidationError as exc:
        if any(error["loc"] for error in exc.errors()):
            return _MISSING_TYPE
        return _INVALID
    return Extraction(
        Outcome.RECORD,
        category=parsed.object_type,
        size=len(line) if size is None else size,
    )
