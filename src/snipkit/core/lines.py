"""Splitting and joining text on single newlines."""


def split_lines(text: str) -> list[str]:
    """Split text into lines on '\\n' only.

    Trailing content after the last newline is a line of its own, so
    the empty string yields a single empty line.
    """
    return text.split('\n')


def join_lines(lines) -> str:
    """Join lines with '\\n', without a trailing newline."""
    return '\n'.join(lines)


def saturating_sub(a: int, b: int) -> int:
    """Subtract b from a, clamping at zero."""
    return max(a - b, 0)
