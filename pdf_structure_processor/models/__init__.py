"""Data models and enums for document structure reconstruction."""

from .data_structures import (
    LayoutThresholds, FragmentStyle, Fragment, PageSpacingProfile,
    ParagraphAccumulator, Block, SegmenterState, PageResult
)
from .enums import BlockType, Alignment, CharClass, BoundaryReason

__all__ = [
    "LayoutThresholds",
    "FragmentStyle",
    "Fragment",
    "PageSpacingProfile",
    "ParagraphAccumulator",
    "Block",
    "SegmenterState",
    "PageResult",
    "BlockType",
    "Alignment",
    "CharClass",
    "BoundaryReason"
]
