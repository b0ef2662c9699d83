"""Registry routing documents to the folding providers registered for them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, MutableSequence

from ..core.ranges import FoldRange
from ..editor.document_model import LineSource
from ..services.settings import FoldingSettings
from .provider import CancellationToken, CommitMessageFoldingProvider, FoldingRangeProvider

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class DocumentSelector:
    """Matches documents by language id."""

    language: str

    def matches(self, document: LineSource) -> bool:
        return document.language_id == self.language


class ProviderRegistration:
    """Handle returned by :meth:`FoldingProviderRegistry.register`."""

    def __init__(
        self,
        registry: "FoldingProviderRegistry",
        selector: DocumentSelector,
        provider: FoldingRangeProvider,
    ) -> None:
        self._registry = registry
        self.selector = selector
        self.provider = provider
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Unregister the provider. Calling this more than once is a no-op."""

        if self._disposed:
            return
        self._disposed = True
        self._registry._remove(self)


class FoldingProviderRegistry:
    """Keeps folding providers in registration order, keyed by selector."""

    def __init__(self) -> None:
        self._registrations: List[ProviderRegistration] = []

    def register(self, selector: DocumentSelector | str, provider: FoldingRangeProvider) -> ProviderRegistration:
        if not isinstance(provider, FoldingRangeProvider):
            raise TypeError(f"{type(provider).__name__} does not implement provide_folding_ranges")
        resolved = DocumentSelector(selector) if isinstance(selector, str) else selector
        registration = ProviderRegistration(self, resolved, provider)
        self._registrations.append(registration)
        LOGGER.debug("Registered folding provider %s for %s", type(provider).__name__, resolved.language)
        return registration

    def providers_for(self, document: LineSource) -> list[FoldingRangeProvider]:
        return [entry.provider for entry in self._registrations if entry.selector.matches(document)]

    def provide_folding_ranges(
        self,
        document: LineSource,
        context: Any | None = None,
        token: CancellationToken | None = None,
    ) -> list[FoldRange]:
        """Collect ranges from every provider matching ``document``."""

        ranges: list[FoldRange] = []
        for provider in self.providers_for(document):
            ranges.extend(provider.provide_folding_ranges(document, context, token))
        return ranges

    def __len__(self) -> int:
        return len(self._registrations)

    def _remove(self, registration: ProviderRegistration) -> None:
        try:
            self._registrations.remove(registration)
        except ValueError:
            return
        LOGGER.debug("Unregistered folding provider for %s", registration.selector.language)


def register_commit_message_folding(
    registry: FoldingProviderRegistry,
    subscriptions: MutableSequence[ProviderRegistration] | None = None,
    *,
    settings: FoldingSettings | None = None,
) -> ProviderRegistration:
    """Register a :class:`CommitMessageFoldingProvider` for its language."""

    provider = CommitMessageFoldingProvider.from_settings(settings or FoldingSettings())
    registration = registry.register(DocumentSelector(provider.language_id), provider)
    if subscriptions is not None:
        subscriptions.append(registration)
    return registration


__all__ = [
    "DocumentSelector",
    "FoldingProviderRegistry",
    "ProviderRegistration",
    "register_commit_message_folding",
]
