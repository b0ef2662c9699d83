"""Structured helpers for representing line spans and fold ranges."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator


class FoldingRangeKind(str, Enum):
    """Category attached to a fold range so hosts can style or batch-fold it."""

    COMMENT = "comment"
    IMPORTS = "imports"
    REGION = "region"

    @classmethod
    def from_value(cls, value: Any) -> "FoldingRangeKind":
        """Coerce ``value`` (enum member, value or member name) into a kind."""

        if isinstance(value, FoldingRangeKind):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise ValueError(f"Unknown folding range kind: {value!r}")


def _coerce_line(value: Any, owner: str, label: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{owner} {label} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{owner} {label} must be an integer") from exc


@dataclass(slots=True, frozen=True)
class LineRange(Sequence[int]):
    """Line-based span using inclusive bounds."""

    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        start = max(0, _coerce_line(self.start_line, "LineRange", "start_line"))
        end = max(0, _coerce_line(self.end_line, "LineRange", "end_line"))
        if end < start:
            start, end = end, start
        object.__setattr__(self, "start_line", start)
        object.__setattr__(self, "end_line", end)

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int | slice) -> int | tuple[int, ...]:
        if isinstance(index, slice):
            return self.to_tuple()[index]
        if index == 0:
            return self.start_line
        if index == 1:
            return self.end_line
        raise IndexError("LineRange index out of range")

    def __iter__(self) -> Iterator[int]:
        yield self.start_line
        yield self.end_line

    @property
    def line_count(self) -> int:
        """Return the number of lines covered by the span (inclusive)."""

        return (self.end_line - self.start_line) + 1

    def contains(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line

    def to_tuple(self) -> tuple[int, int]:
        """Return the span as a ``(start_line, end_line)`` tuple."""

        return (self.start_line, self.end_line)

    def to_dict(self) -> dict[str, int]:
        return {"start_line": self.start_line, "end_line": self.end_line}

    def clamp(self, *, lower: int = 0, upper: int | None = None) -> "LineRange":
        """Clamp the span to ``[lower, upper]`` bounds when provided."""

        start = max(lower, self.start_line)
        end = max(lower, self.end_line)
        if upper is not None:
            start = min(start, upper)
            end = min(end, upper)
        return LineRange(start, end)


@dataclass(slots=True, frozen=True)
class FoldRange(Sequence[int]):
    """Collapsible span of lines reported to a folding host.

    Unlike :class:`LineRange`, inverted or negative bounds are rejected rather
    than normalized: a malformed fold range always points at a classifier bug.
    """

    start_line: int
    end_line: int
    kind: FoldingRangeKind = FoldingRangeKind.REGION

    def __post_init__(self) -> None:
        start = _coerce_line(self.start_line, "FoldRange", "start_line")
        end = _coerce_line(self.end_line, "FoldRange", "end_line")
        if start < 0:
            raise ValueError("FoldRange start_line must be non-negative")
        if end < start:
            raise ValueError(f"FoldRange end_line {end} precedes start_line {start}")
        object.__setattr__(self, "start_line", start)
        object.__setattr__(self, "end_line", end)
        object.__setattr__(self, "kind", FoldingRangeKind.from_value(self.kind))

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int | slice) -> int | tuple[int, ...]:
        if isinstance(index, slice):
            return self.to_tuple()[index]
        if index == 0:
            return self.start_line
        if index == 1:
            return self.end_line
        raise IndexError("FoldRange index out of range")

    def __iter__(self) -> Iterator[int]:
        yield self.start_line
        yield self.end_line

    @property
    def line_count(self) -> int:
        return (self.end_line - self.start_line) + 1

    @property
    def span(self) -> LineRange:
        """Return the covered lines without the kind tag."""

        return LineRange(self.start_line, self.end_line)

    def to_tuple(self) -> tuple[int, int]:
        return (self.start_line, self.end_line)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly payload."""

        return {
            "start_line": self.start_line,
            "end_line": self.end_line,
            "kind": self.kind.value,
        }

    @classmethod
    def from_value(cls, value: Any) -> "FoldRange":
        """Coerce ``value`` into a :class:`FoldRange`.

        Accepts another fold range, a mapping with ``start_line``/``end_line``
        (and optional ``kind``), a ``(start, end[, kind])`` sequence, or any
        object exposing those attributes.
        """

        if isinstance(value, FoldRange):
            return value
        if value is None:
            raise ValueError("FoldRange value is required")
        if isinstance(value, Mapping):
            start = value.get("start_line")
            end = value.get("end_line")
            if start is None or end is None:
                raise ValueError("FoldRange mappings require start_line and end_line")
            return cls(start, end, value.get("kind", FoldingRangeKind.REGION))
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            seq = list(value)
            if len(seq) == 2:
                return cls(seq[0], seq[1])
            if len(seq) == 3:
                return cls(seq[0], seq[1], seq[2])
            raise ValueError("FoldRange sequences must have two or three entries")
        start = getattr(value, "start_line", None)
        end = getattr(value, "end_line", None)
        if start is not None and end is not None:
            return cls(start, end, getattr(value, "kind", FoldingRangeKind.REGION))
        raise TypeError("Unsupported FoldRange input")


__all__ = ["FoldingRangeKind", "FoldRange", "LineRange"]
