"""Fatal error kinds raised by a logstats run."""

from __future__ import annotations


class LogStatsError(Exception):
    """Base class for failures that abort the run."""


class ConfigError(LogStatsError):
    """Settings file present but unreadable or invalid."""


class InputFileError(LogStatsError):
    """Input path missing or not openable."""


class ReadError(LogStatsError):
    """Transport failure while reading a line."""


class ReportError(LogStatsError):
    """Summary table or stats JSON could not be written."""
