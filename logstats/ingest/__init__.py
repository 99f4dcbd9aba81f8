"""Line reading and record extraction."""

from .extractor import Extraction, Outcome, extract_record  # noqa: F401
from .reader import LineSource  # noqa: F401
