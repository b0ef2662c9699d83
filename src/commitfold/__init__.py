"""Foldable region computation for git commit messages."""

from .core.ranges import FoldingRangeKind, FoldRange, LineRange
from .editor.document_model import LineDocument, TextLine
from .folding.classifier import RegionClassifier, compute_folding_ranges
from .folding.provider import CommitMessageFoldingProvider
from .folding.registry import FoldingProviderRegistry, register_commit_message_folding

__version__ = "0.1.0"

__all__ = [
    "CommitMessageFoldingProvider",
    "FoldRange",
    "FoldingProviderRegistry",
    "FoldingRangeKind",
    "LineDocument",
    "LineRange",
    "RegionClassifier",
    "TextLine",
    "compute_folding_ranges",
    "register_commit_message_folding",
]
