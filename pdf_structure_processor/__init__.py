"""
PDF Structure Processor

Reconstructs semantic document structure from the flat stream of positioned
text fragments a PDF page yields. Nothing but geometry and typography is
known about each fragment; words, paragraphs and headings are inferred.

Features:
- Robust per-page line spacing estimation
- Word-space synthesis between adjacent fragments
- Paragraph segmentation driven by layout and typography cues
- Heading, list item and paragraph classification with alignment
- Inline bold/italic/underline markup
- HTML, structured JSON and summary output
"""

from .core.main_processor import DocumentProcessor
from .models.data_structures import (
    LayoutThresholds, FragmentStyle, Fragment, PageSpacingProfile, Block, PageResult
)
from .models.enums import BlockType, Alignment, CharClass, BoundaryReason

__version__ = "1.0.0"
__all__ = [
    "DocumentProcessor",
    "LayoutThresholds",
    "FragmentStyle",
    "Fragment",
    "PageSpacingProfile",
    "Block",
    "PageResult",
    "BlockType",
    "Alignment",
    "CharClass",
    "BoundaryReason"
]
