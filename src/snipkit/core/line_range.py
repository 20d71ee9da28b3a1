"""Line range value type with inclusive, exclusive and unbounded ends."""

from dataclasses import dataclass, field
from enum import Enum


class BoundKind(Enum):
    UNBOUNDED = "unbounded"
    INCLUDED = "included"
    EXCLUDED = "excluded"


@dataclass(frozen=True)
class Bound:
    """One end of a line range."""
    kind: BoundKind
    index: int | None = None

    def __post_init__(self):
        if self.kind is BoundKind.UNBOUNDED:
            if self.index is not None:
                raise ValueError("Unbounded bound takes no index")
        elif self.index is None or self.index < 0:
            raise ValueError(f"{self.kind.value} bound needs a non-negative index, got {self.index!r}")

    @classmethod
    def unbounded(cls) -> "Bound":
        return cls(BoundKind.UNBOUNDED)

    @classmethod
    def included(cls, index: int) -> "Bound":
        return cls(BoundKind.INCLUDED, index)

    @classmethod
    def excluded(cls, index: int) -> "Bound":
        return cls(BoundKind.EXCLUDED, index)


@dataclass(frozen=True)
class LineRange:
    """Zero-based range of line indices.

    The start is normally unbounded or included; the end is unbounded,
    included or excluded. An excluded start skips its own index.
    """
    start: Bound = field(default_factory=Bound.unbounded)
    end: Bound = field(default_factory=Bound.unbounded)

    @classmethod
    def full(cls) -> "LineRange":
        """Every line (`..`)."""
        return cls()

    @classmethod
    def from_(cls, start: int) -> "LineRange":
        """Lines from start to the end of the text (`start..`)."""
        return cls(Bound.included(start), Bound.unbounded())

    @classmethod
    def to(cls, end: int) -> "LineRange":
        """Lines before end (`..end`)."""
        return cls(Bound.unbounded(), Bound.excluded(end))

    @classmethod
    def to_inclusive(cls, end: int) -> "LineRange":
        """Lines up to and including end (`..=end`)."""
        return cls(Bound.unbounded(), Bound.included(end))

    @classmethod
    def between(cls, start: int, end: int) -> "LineRange":
        """Lines from start up to but not including end (`start..end`)."""
        return cls(Bound.included(start), Bound.excluded(end))

    @classmethod
    def between_inclusive(cls, start: int, end: int) -> "LineRange":
        """Lines from start through end (`start..=end`)."""
        return cls(Bound.included(start), Bound.included(end))

    @classmethod
    def from_slice(cls, s: slice) -> "LineRange":
        """Convert a Python slice such as `slice(1, 3)`.

        Raises:
            ValueError: If the slice has a step other than 1 or a negative index
        """
        if s.step not in (None, 1):
            raise ValueError(f"Line ranges do not support a step: {s.step!r}")
        start = Bound.unbounded() if s.start is None else Bound.included(s.start)
        end = Bound.unbounded() if s.stop is None else Bound.excluded(s.stop)
        return cls(start, end)

    def resolve_start(self) -> int:
        """Index of the first line to keep."""
        if self.start.kind is BoundKind.INCLUDED:
            return self.start.index
        if self.start.kind is BoundKind.EXCLUDED:
            return self.start.index + 1
        return 0

    def __str__(self) -> str:
        start = "" if self.start.kind is BoundKind.UNBOUNDED else str(self.resolve_start())
        if self.end.kind is BoundKind.UNBOUNDED:
            return f"{start}.."
        if self.end.kind is BoundKind.INCLUDED:
            return f"{start}..={self.end.index}"
        return f"{start}..{self.end.index}"
