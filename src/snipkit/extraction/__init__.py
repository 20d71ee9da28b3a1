"""Line-range and anchor extraction from text."""

from .anchors import END_MARKER, START_MARKER, ScanState, extract_anchored, list_anchors
from .ranges import extract_range
from .selectors import SelectorError, apply_selector, parse_selector

__all__ = [
    "END_MARKER",
    "START_MARKER",
    "ScanState",
    "SelectorError",
    "apply_selector",
    "extract_anchored",
    "extract_range",
    "list_anchors",
    "parse_selector",
]
