"""Folding provider that applies the region classifier to git commit messages."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from ..core.ranges import FoldRange
from ..editor.document_model import GIT_COMMIT_LANGUAGE, LineSource
from ..services.settings import FoldingSettings
from .classifier import RegionClassifier

LOGGER = logging.getLogger(__name__)


class CancellationToken(Protocol):
    """Host-supplied flag signalling that a folding request is stale."""

    @property
    def is_cancellation_requested(self) -> bool:
        ...


@runtime_checkable
class FoldingRangeProvider(Protocol):
    """Anything able to produce fold ranges for a line document."""

    def provide_folding_ranges(
        self,
        document: LineSource,
        context: Any | None = None,
        token: CancellationToken | None = None,
    ) -> list[FoldRange]:
        ...


class CommitMessageFoldingProvider:
    """Provide folding ranges for git commit messages.

    Paragraphs separated by blank lines, header-delimited sections and runs of
    ``#`` comment lines become foldable. Documents tagged with another language
    yield no ranges.
    """

    def __init__(
        self,
        *,
        language_id: str = GIT_COMMIT_LANGUAGE,
        enabled: bool = True,
        classifier: RegionClassifier | None = None,
    ) -> None:
        self._language_id = language_id
        self._enabled = enabled
        self._classifier = classifier or RegionClassifier()

    @classmethod
    def from_settings(cls, settings: FoldingSettings) -> "CommitMessageFoldingProvider":
        return cls(language_id=settings.language_id, enabled=settings.enabled)

    @property
    def language_id(self) -> str:
        return self._language_id

    @property
    def enabled(self) -> bool:
        return self._enabled

    def provide_folding_ranges(
        self,
        document: LineSource,
        context: Any | None = None,
        token: CancellationToken | None = None,
    ) -> list[FoldRange]:
        del context
        if not self._enabled:
            return []
        if document.language_id != self._language_id:
            LOGGER.debug(
                "Skipping folding for language %s (provider handles %s)",
                document.language_id,
                self._language_id,
            )
            return []
        if token is not None and token.is_cancellation_requested:
            return []
        return self._classifier.classify_document(document)


__all__ = ["CancellationToken", "CommitMessageFoldingProvider", "FoldingRangeProvider"]
