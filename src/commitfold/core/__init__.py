"""Core value types shared by the classifier and its hosts."""

from .ranges import FoldingRangeKind, FoldRange, LineRange

__all__ = ["FoldingRangeKind", "FoldRange", "LineRange"]
