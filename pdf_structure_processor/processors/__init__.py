"""Text and layout processing modules."""

from .text_processor import TextProcessor
from .layout_analyzer import LayoutAnalyzer
from .spacing_resolver import SpacingResolver
from .inline_formatter import InlineFormatter
from .block_classifier import BlockClassifier
from .paragraph_grouper import ParagraphGrouper

__all__ = [
    "TextProcessor",
    "LayoutAnalyzer",
    "SpacingResolver",
    "InlineFormatter",
    "BlockClassifier",
    "ParagraphGrouper"
]
