"""Extract a contiguous range of lines by index."""

from itertools import islice

from snipkit.core import BoundKind, LineRange, join_lines, saturating_sub, split_lines


def extract_range(text: str, line_range: LineRange | slice) -> str:
    """Take a range of lines from text.

    Out-of-bounds ends are clamped to the available lines and inverted
    ranges give an empty string; no range is ever rejected.

    Args:
        text: The full text
        line_range: Zero-based range of lines to keep, or a plain slice

    Returns:
        The selected lines joined with newlines
    """
    if isinstance(line_range, slice):
        line_range = LineRange.from_slice(line_range)

    start = line_range.resolve_start()
    remaining = islice(split_lines(text), start, None)

    end = line_range.end
    if end.kind is BoundKind.EXCLUDED:
        kept = islice(remaining, saturating_sub(end.index, start))
    elif end.kind is BoundKind.INCLUDED:
        kept = islice(remaining, saturating_sub(end.index + 1, start))
    else:
        kept = remaining

    return join_lines(kept)
