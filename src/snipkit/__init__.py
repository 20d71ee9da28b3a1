"""Pull line ranges and anchored regions out of multi-line text."""

from .core import LineRange
from .extraction import apply_selector, extract_anchored, extract_range, list_anchors

__all__ = ["LineRange", "apply_selector", "extract_anchored", "extract_range", "list_anchors"]
