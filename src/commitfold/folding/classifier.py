"""Single-pass fold range classifier for commit-message style documents.

A document is read top to bottom once. Lines starting with ``#`` form comment
blocks, blank lines close paragraphs, and markdown headers (``#+`` followed by
whitespace) start new sections. Every range spans at least two lines and the
output is ordered by the line at which each range closed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Sequence

from ..core.ranges import FoldingRangeKind, FoldRange
from ..editor.document_model import LineSource

LOGGER = logging.getLogger(__name__)

_HEADER_PATTERN = re.compile(r"^#+\s+")


def is_comment_line(text: str) -> bool:
    """Return ``True`` when ``text`` starts a comment (bare ``#`` prefix)."""

    return text.startswith("#")


def is_header_line(text: str) -> bool:
    """Return ``True`` when ``text`` is a markdown header such as ``## Notes``."""

    return _HEADER_PATTERN.match(text) is not None


def is_blank_line(text: str) -> bool:
    return not text.strip()


@dataclass(slots=True)
class _ClassificationState:
    section_start: int = 0
    in_comment_block: bool = False
    comment_block_start: int = -1


class RegionClassifier:
    """Compute :class:`FoldRange` values for an ordered sequence of lines.

    The classifier keeps no state between calls, so a single instance may be
    shared across documents and threads.
    """

    def classify(self, lines: Sequence[str], line_count: int | None = None) -> list[FoldRange]:
        """Return the fold ranges for ``lines``.

        ``line_count`` must equal ``len(lines)`` when given; it exists so hosts
        that already know their line count can pass it through.
        """

        total = len(lines) if line_count is None else line_count
        ranges: list[FoldRange] = []
        state = _ClassificationState()

        for index in range(total):
            text = lines[index]

            if is_comment_line(text):
                if not state.in_comment_block:
                    state.in_comment_block = True
                    state.comment_block_start = index
                continue

            if state.in_comment_block:
                if index > state.comment_block_start + 1:
                    _emit(ranges, state.comment_block_start, index - 1, FoldingRangeKind.COMMENT)
                state.in_comment_block = False

            # Header closure has no minimum-span gate, unlike the blank-line rule.
            if is_header_line(text):
                if index > state.section_start:
                    _emit(ranges, state.section_start, index - 1, FoldingRangeKind.REGION)
                state.section_start = index
                continue

            if is_blank_line(text):
                if index > state.section_start + 1:
                    _emit(ranges, state.section_start, index - 1, FoldingRangeKind.REGION)
                state.section_start = index + 1

        # Only one trailing range is flushed; a pending section is dropped when
        # the document ends inside a comment block.
        if state.in_comment_block and state.comment_block_start < total - 1:
            _emit(ranges, state.comment_block_start, total - 1, FoldingRangeKind.COMMENT)
        elif state.section_start < total - 1:
            _emit(ranges, state.section_start, total - 1, FoldingRangeKind.REGION)

        LOGGER.debug("Computed %d folding ranges for %d lines", len(ranges), total)
        return ranges

    def classify_document(self, document: LineSource) -> list[FoldRange]:
        """Read every line of ``document`` and classify it."""

        total = document.line_count
        lines = [document.line_at(index).text for index in range(total)]
        return self.classify(lines, total)


def _emit(ranges: list[FoldRange], start: int, end: int, kind: FoldingRangeKind) -> None:
    if end > start:
        ranges.append(FoldRange(start, end, kind))


def compute_folding_ranges(lines: Sequence[str]) -> list[FoldRange]:
    """Classify ``lines`` with a fresh :class:`RegionClassifier`."""

    return RegionClassifier().classify(lines, len(lines))


__all__ = [
    "RegionClassifier",
    "compute_folding_ranges",
    "is_blank_line",
    "is_comment_line",
    "is_header_line",
]
