"""Data structures for document structure reconstruction."""

from dataclasses import dataclass, field
from typing import List, Optional
from .enums import BlockType, Alignment


@dataclass
class LayoutThresholds:
    """Numeric constants driving the layout heuristics"""
    # Horizontal gaps, in multiples of the font size
    min_gap: float = 0.15
    normal_gap: float = 0.25
    large_gap: float = 0.4
    huge_gap: float = 0.6

    # Paragraph segmentation
    indentation: float = 20.0
    short_text_length: int = 50
    long_paragraph_length: int = 100
    large_gap_factor: float = 1.5
    short_line_gap_factor: float = 0.8
    font_size_change: float = 1.0
    heading_font_jump: float = 2.0
    same_line_delta: float = 1.0

    # Alignment
    center_tolerance: float = 10.0
    min_margin: float = 72.0
    max_centered_width_ratio: float = 0.8

    # Heading font sizes
    h1_font_size: float = 20.0
    h2_font_size: float = 16.0
    h3_font_size: float = 14.0

    def validate(self) -> None:
        if not (0 <= self.min_gap <= self.normal_gap <= self.large_gap <= self.huge_gap):
            raise ValueError("gap thresholds must satisfy 0 <= min <= normal <= large <= huge")
        if self.indentation < 0 or self.center_tolerance < 0 or self.min_margin < 0:
            raise ValueError("indentation, center_tolerance and min_margin must be non-negative")
        if self.short_text_length <= 0 or self.long_paragraph_length <= 0:
            raise ValueError("text length thresholds must be positive")
        if not (0 < self.max_centered_width_ratio <= 1):
            raise ValueError("max_centered_width_ratio must be within (0, 1]")
        if not (self.h1_font_size >= self.h2_font_size >= self.h3_font_size):
            raise ValueError("heading font sizes must be in descending order")


@dataclass
class FragmentStyle:
    """Emphasis capabilities of a fragment, resolved by the parsing layer"""
    is_bold: bool = False
    is_italic: bool = False
    is_underline: bool = False


@dataclass
class Fragment:
    """Positioned run of text as handed over by the document parser"""
    text: str
    x: float
    y: float
    width: float
    font_size: float
    style: FragmentStyle = field(default_factory=FragmentStyle)
    font_name: Optional[str] = None

    @property
    def right_edge(self) -> float:
        return self.x + self.width

    @property
    def is_bold(self) -> bool:
        return bool(getattr(self.style, 'is_bold', False))

    @property
    def is_italic(self) -> bool:
        return bool(getattr(self.style, 'is_italic', False))

    @property
    def is_underline(self) -> bool:
        return bool(getattr(self.style, 'is_underline', False))


@dataclass(frozen=True)
class PageSpacingProfile:
    """Robust line pitch estimate for one page"""
    dominant_line_gap: float = 0.0
    sample_count: int = 0


@dataclass
class ParagraphAccumulator:
    """Paragraph under construction, owned by the segmenter"""
    content: str
    plain_text: str
    start_x: float
    end_x: float
    font_size: float
    last_line_width: float = 0.0
    last_line_word_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.content


@dataclass(frozen=True)
class Block:
    """Finished, classified unit of output"""
    block_id: str
    block_type: BlockType
    alignment: Alignment
    content: str
    html: str
    heading_level: Optional[int] = None
    font_size: float = 0.0
    left_margin: float = 0.0
    right_margin: float = 0.0
    text_width: float = 0.0


@dataclass
class SegmenterState:
    """Scan state carried from one fragment to the next within a page"""
    page_width: float
    spacing: PageSpacingProfile
    accumulator: Optional[ParagraphAccumulator] = None
    last_x: Optional[float] = None
    last_right_edge: Optional[float] = None
    last_y: Optional[float] = None
    last_font_size: Optional[float] = None
    last_text: Optional[str] = None
    blocks: List[Block] = field(default_factory=list)
    closed_paragraphs: int = 0
    dropped_paragraphs: int = 0


@dataclass
class PageResult:
    """Blocks reconstructed from one page"""
    page_number: int
    page_width: float
    spacing: PageSpacingProfile
    blocks: List[Block]
    fragment_count: int = 0
