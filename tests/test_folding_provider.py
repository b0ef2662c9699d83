"""Tests for the commit message folding provider and its registry."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from commitfold.core.ranges import FoldingRangeKind, FoldRange
from commitfold.editor.document_model import LineDocument
from commitfold.folding.provider import CommitMessageFoldingProvider
from commitfold.folding.registry import (
    DocumentSelector,
    FoldingProviderRegistry,
    ProviderRegistration,
    register_commit_message_folding,
)
from commitfold.services.settings import FoldingSettings

MESSAGE = "Subject\n\nbody line one\nbody line two\n\n# comment one\n# comment two"
EXPECTED = [
    FoldRange(2, 3, FoldingRangeKind.REGION),
    FoldRange(5, 6, FoldingRangeKind.COMMENT),
]


@dataclass
class _Token:
    is_cancellation_requested: bool = False


class _StaticProvider:
    def __init__(self, ranges: list[FoldRange]) -> None:
        self.ranges = ranges
        self.calls = 0

    def provide_folding_ranges(self, document, context=None, token=None):  # noqa: ANN001
        self.calls += 1
        return list(self.ranges)


def test_provider_folds_git_commit_documents() -> None:
    provider = CommitMessageFoldingProvider()

    assert provider.provide_folding_ranges(LineDocument.from_text(MESSAGE)) == EXPECTED


def test_provider_ignores_other_languages() -> None:
    provider = CommitMessageFoldingProvider()
    document = LineDocument.from_text(MESSAGE, language_id="markdown")

    assert provider.provide_folding_ranges(document) == []


def test_provider_honours_disabled_setting() -> None:
    provider = CommitMessageFoldingProvider.from_settings(FoldingSettings(enabled=False))

    assert provider.enabled is False
    assert provider.provide_folding_ranges(LineDocument.from_text(MESSAGE)) == []


def test_provider_uses_configured_language() -> None:
    provider = CommitMessageFoldingProvider.from_settings(FoldingSettings(language_id="hg-commit"))
    document = LineDocument.from_text(MESSAGE, language_id="hg-commit")

    assert provider.language_id == "hg-commit"
    assert provider.provide_folding_ranges(document) == EXPECTED


def test_provider_returns_nothing_when_cancelled_up_front() -> None:
    provider = CommitMessageFoldingProvider()
    document = LineDocument.from_text(MESSAGE)

    assert provider.provide_folding_ranges(document, None, _Token(True)) == []
    assert provider.provide_folding_ranges(document, {"ignored": True}, _Token(False)) == EXPECTED


def test_registry_routes_by_language_in_registration_order() -> None:
    registry = FoldingProviderRegistry()
    first = _StaticProvider([FoldRange(0, 1)])
    second = _StaticProvider([FoldRange(3, 4, FoldingRangeKind.COMMENT)])
    other = _StaticProvider([FoldRange(7, 9)])
    registry.register("git-commit", first)
    registry.register(DocumentSelector("git-commit"), second)
    registry.register("markdown", other)

    ranges = registry.provide_folding_ranges(LineDocument.from_text(MESSAGE))

    assert ranges == [FoldRange(0, 1), FoldRange(3, 4, FoldingRangeKind.COMMENT)]
    assert other.calls == 0
    assert len(registry) == 3


def test_registration_dispose_is_idempotent() -> None:
    registry = FoldingProviderRegistry()
    registration = registry.register("git-commit", _StaticProvider([]))

    registration.dispose()
    registration.dispose()

    assert registration.disposed
    assert len(registry) == 0
    assert registry.providers_for(LineDocument.from_text(MESSAGE)) == []


def test_registry_rejects_non_providers() -> None:
    with pytest.raises(TypeError):
        FoldingProviderRegistry().register("git-commit", object())  # type: ignore[arg-type]


def test_register_commit_message_folding_tracks_subscription() -> None:
    registry = FoldingProviderRegistry()
    subscriptions: list[ProviderRegistration] = []

    registration = register_commit_message_folding(registry, subscriptions)

    assert subscriptions == [registration]
    assert registration.selector == DocumentSelector("git-commit")
    assert isinstance(registration.provider, CommitMessageFoldingProvider)
    assert registry.provide_folding_ranges(LineDocument.from_text(MESSAGE)) == EXPECTED

    for subscription in subscriptions:
        subscription.dispose()
    assert registry.provide_folding_ranges(LineDocument.from_text(MESSAGE)) == []


def test_register_commit_message_folding_uses_settings_language() -> None:
    registry = FoldingProviderRegistry()

    register_commit_message_folding(registry, settings=FoldingSettings(language_id="jj-describe"))

    assert registry.provide_folding_ranges(LineDocument.from_text(MESSAGE)) == []
    jj_document = LineDocument.from_text(MESSAGE, language_id="jj-describe")
    assert registry.provide_folding_ranges(jj_document) == EXPECTED


def test_provider_folds_shared_commit_fixture(commit_document: LineDocument) -> None:
    ranges = CommitMessageFoldingProvider().provide_folding_ranges(commit_document)

    assert ranges == EXPECTED
