"""Process-wide logging setup."""

from .logs import configure_logging  # noqa: F401
