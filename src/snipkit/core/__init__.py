"""Core value types and line helpers."""

from .line_range import Bound, BoundKind, LineRange
from .lines import join_lines, saturating_sub, split_lines

__all__ = ["Bound", "BoundKind", "LineRange", "join_lines", "saturating_sub", "split_lines"]
