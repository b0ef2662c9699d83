"""Fold range computation for commit-message documents."""

from .classifier import RegionClassifier, compute_folding_ranges, is_comment_line, is_header_line
from .provider import CommitMessageFoldingProvider
from .registry import DocumentSelector, FoldingProviderRegistry, register_commit_message_folding

__all__ = [
    "CommitMessageFoldingProvider",
    "DocumentSelector",
    "FoldingProviderRegistry",
    "RegionClassifier",
    "compute_folding_ranges",
    "is_comment_line",
    "is_header_line",
    "register_commit_message_folding",
]
