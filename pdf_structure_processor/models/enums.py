"""Enumerations for document structure reconstruction."""

from enum import Enum


class BlockType(Enum):
    """Enumeration of semantic block types"""
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list_item"


class Alignment(Enum):
    """Horizontal alignment of a block, valued as the CSS text-align keyword"""
    CENTERED = "center"
    JUSTIFIED = "justify"


class CharClass(Enum):
    """Semantic class of a single character"""
    LETTER = "letter"
    NUMBER = "number"
    SENTENCE_END = "sentence_end"
    COMMA = "comma"
    HYPHEN = "hyphen"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    SPACE = "space"
    OTHER = "other"


class BoundaryReason(Enum):
    """Which rule closed the previous paragraph"""
    PAGE_START = "page_start"
    LARGE_VERTICAL_GAP = "large_vertical_gap"
    LINE_BREAK_WITH_CUE = "line_break_with_cue"
    LONG_PARAGRAPH_SENTENCE_END = "long_paragraph_sentence_end"
    HEADING_ONSET = "heading_onset"
    ISOLATED_SHORT_LINE = "isolated_short_line"
