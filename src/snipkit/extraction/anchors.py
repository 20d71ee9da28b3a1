"""Extract named regions delimited by ANCHOR / ANCHOR_END marker comments."""

import re
from enum import Enum

from snipkit.core import join_lines, split_lines

START_MARKER = re.compile(r'ANCHOR:\s*(?P<anchor_name>[\w_-]+)')
END_MARKER = re.compile(r'ANCHOR_END:\s*(?P<anchor_name>[\w_-]+)')


class ScanState(Enum):
    SEARCHING = "searching"
    CAPTURING = "capturing"


def extract_anchored(text: str, anchor: str) -> str:
    """Take the lines between `ANCHOR: name` and `ANCHOR_END: name`.

    Marker lines are never part of the result. While capturing, marker
    lines for other anchors are dropped too, without ending the capture.
    A missing end marker captures to the end of the text; an anchor that
    never starts gives an empty string.

    Args:
        text: The full text
        anchor: Anchor name to look for

    Returns:
        The retained lines joined with newlines
    """
    retained: list[str] = []
    state = ScanState.SEARCHING

    for line in split_lines(text):
        if state is ScanState.SEARCHING:
            match = START_MARKER.search(line)
            if match and match.group("anchor_name") == anchor:
                state = ScanState.CAPTURING
            continue

        end = END_MARKER.search(line)
        if end is not None:
            if end.group("anchor_name") == anchor:
                break
        elif not START_MARKER.search(line):
            retained.append(line)

    return join_lines(retained)


def list_anchors(text: str) -> list[str]:
    """Return the names of all start markers in text, in first-seen order."""
    names: list[str] = []
    for line in split_lines(text):
        match = START_MARKER.search(line)
        if match and match.group("anchor_name") not in names:
            names.append(match.group("anchor_name"))
    return names
