"""Classification of closed paragraphs into headings, list items and paragraphs."""

import re
from typing import Optional, Tuple

from ..models.data_structures import Block, LayoutThresholds, ParagraphAccumulator
from ..models.enums import Alignment, BlockType
from .layout_analyzer import LayoutAnalyzer
from .text_processor import TextProcessor


BULLETS = ('•', '-')
# Leading emphasis tags may wrap the bullet
_BULLET_RE = re.compile(r'^((?:<[^>]+>)*)[•\-]\s*')


class BlockClassifier:
    """Turns a closed paragraph accumulator into an output block"""

    def __init__(self, thresholds: Optional[LayoutThresholds] = None):
        self.thresholds = thresholds or LayoutThresholds()
        self.text_processor = TextProcessor()
        self.layout_analyzer = LayoutAnalyzer(self.thresholds)

    def classify(self, accumulator: ParagraphAccumulator, page_width: float,
                 block_id: str = "block_0") -> Optional[Block]:
        """Normalize, measure and classify a paragraph; empty paragraphs yield None."""
        content = self.text_processor.normalize_text(accumulator.content)
        if not content:
            return None

        visible = self.text_processor.visible_text(content)
        if not visible.strip():
            return None

        left_margin, right_margin, text_width = self.layout_analyzer.compute_margins(
            accumulator.start_x, accumulator.end_x, page_width
        )
        alignment = self.layout_analyzer.determine_alignment(
            visible, accumulator.start_x, accumulator.end_x, page_width
        )

        block_type, heading_level = self.determine_block_type(accumulator.font_size, visible)
        if block_type == BlockType.LIST_ITEM:
            content = self.strip_bullet(content)
            # A bare bullet has nothing to list
            if not self.text_processor.visible_text(content).strip():
                return None

        return Block(
            block_id=block_id,
            block_type=block_type,
            alignment=alignment,
            content=content,
            html=self.render(block_type, heading_level, alignment, content),
            heading_level=heading_level,
            font_size=accumulator.font_size,
            left_margin=left_margin,
            right_margin=right_margin,
            text_width=text_width
        )

    def determine_block_type(self, font_size: float, text: str) -> Tuple[BlockType, Optional[int]]:
        t = self.thresholds
        if font_size > t.h1_font_size:
            return BlockType.HEADING, 1
        if font_size > t.h2_font_size:
            return BlockType.HEADING, 2
        if font_size > t.h3_font_size:
            return BlockType.HEADING, 3
        if text.startswith(BULLETS):
            return BlockType.LIST_ITEM, None
        return BlockType.PARAGRAPH, None

    @staticmethod
    def strip_bullet(content: str) -> str:
        return _BULLET_RE.sub(r'\1', content, count=1)

    @staticmethod
    def render(block_type: BlockType, heading_level: Optional[int],
               alignment: Alignment, content: str) -> str:
        if block_type == BlockType.HEADING:
            tag = f"h{heading_level}"
        elif block_type == BlockType.LIST_ITEM:
            tag = "li"
        else:
            tag = "p"
        return f'<{tag} style="text-align: {alignment.value};">{content}</{tag}>'
