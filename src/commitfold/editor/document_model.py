"""Line-addressable document state consumed by folding providers."""

from __future__ import annotations

import hashlib
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional, Protocol, runtime_checkable

from ..core.ranges import LineRange

GIT_COMMIT_LANGUAGE = "git-commit"


def _utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""

    return datetime.now(timezone.utc)


def _hash_text(text: str) -> str:
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


def _split_lines(text: str) -> tuple[str, ...]:
    # Editors always expose at least one line and keep the empty line that
    # follows a trailing newline.
    return tuple(text.replace("\r\n", "\n").replace("\r", "\n").split("\n"))


@dataclass(slots=True, frozen=True)
class TextLine:
    """A single line of a document and its 0-based position."""

    line_number: int
    text: str

    @property
    def is_empty_or_whitespace(self) -> bool:
        return not self.text.strip()


@runtime_checkable
class LineSource(Protocol):
    """Random-access line view a folding provider reads from."""

    @property
    def language_id(self) -> str:
        ...

    @property
    def line_count(self) -> int:
        ...

    def line_at(self, index: int) -> TextLine:
        ...


@dataclass(slots=True)
class LineDocument:
    """In-memory document split into lines, tagged with a language id."""

    lines: tuple[str, ...] = ()
    language_id: str = GIT_COMMIT_LANGUAGE
    path: Optional[Path] = None
    document_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    version_id: int = 1
    content_hash: str = field(default_factory=str)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        self.lines = tuple(self.lines)
        if not self.content_hash:
            self.content_hash = _hash_text(self.text)

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        language_id: str = GIT_COMMIT_LANGUAGE,
        path: Path | None = None,
    ) -> "LineDocument":
        return cls(lines=_split_lines(text or ""), language_id=language_id, path=path)

    @classmethod
    def from_path(cls, path: Path | str, *, language_id: str = GIT_COMMIT_LANGUAGE) -> "LineDocument":
        """Load ``path`` as UTF-8 text."""

        resolved = Path(path)
        return cls.from_text(resolved.read_text(encoding="utf-8"), language_id=language_id, path=resolved)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def line_at(self, index: int) -> TextLine:
        """Return the line at ``index``; raises :class:`IndexError` when out of range."""

        if index < 0 or index >= len(self.lines):
            raise IndexError(f"Line {index} is outside document of {len(self.lines)} lines")
        return TextLine(line_number=index, text=self.lines[index])

    def iter_lines(self) -> Iterator[TextLine]:
        for number, text in enumerate(self.lines):
            yield TextLine(line_number=number, text=text)

    def text_in(self, span: LineRange) -> str:
        """Return the joined text of the lines covered by ``span``."""

        if not self.lines:
            return ""
        clamped = span.clamp(upper=len(self.lines) - 1)
        return "\n".join(self.lines[clamped.start_line : clamped.end_line + 1])

    def update_text(self, new_text: str) -> None:
        """Replace the document content and bump the version."""

        self.lines = _split_lines(new_text or "")
        self.updated_at = _utcnow()
        self.version_id += 1
        self.content_hash = _hash_text(self.text)

    def version_signature(self) -> str:
        return f"{self.document_id}:{self.version_id}:{self.content_hash}"


__all__ = ["GIT_COMMIT_LANGUAGE", "LineDocument", "LineSource", "TextLine"]
