"""Parse compact snippet selectors such as "2:5", "3" or "setup"."""

import re

from snipkit.core import LineRange
from .anchors import extract_anchored
from .ranges import extract_range

RANGE_PATTERN = re.compile(r'^(?P<start>\d*):(?P<end>\d*)$')
ANCHOR_NAME_PATTERN = re.compile(r'^[\w_-]+$')


class SelectorError(ValueError):
    """Raised when a selector string cannot be parsed."""


def parse_selector(selector: str) -> LineRange | str:
    """Turn a selector string into a line range or an anchor name.

    Forms:
    - "" or ":" -> every line
    - "N" -> line N only
    - "A:B", "A:", ":B" -> lines A up to but not including B
    - anything else made of word characters and hyphens -> anchor name

    Raises:
        SelectorError: If the selector matches none of the forms above
    """
    selector = selector.strip()
    if not selector:
        return LineRange.full()

    if selector.isdecimal():
        line = int(selector)
        return LineRange.between_inclusive(line, line)

    match = RANGE_PATTERN.match(selector)
    if match:
        start = int(match.group("start")) if match.group("start") else None
        end = int(match.group("end")) if match.group("end") else None
        return LineRange.from_slice(slice(start, end))

    if ANCHOR_NAME_PATTERN.match(selector):
        return selector

    raise SelectorError(f"Invalid selector: {selector!r}")


def apply_selector(text: str, selector: str) -> str:
    """Extract the part of text addressed by selector."""
    target = parse_selector(selector)
    if isinstance(target, LineRange):
        return extract_range(text, target)
    return extract_anchored(text, target)
