"""Paragraph segmentation of a page's fragment stream."""

import math
from typing import List, Optional, Sequence

from ..models.data_structures import (
    Block, Fragment, LayoutThresholds, PageSpacingProfile, ParagraphAccumulator, SegmenterState
)
from ..models.enums import BoundaryReason
from .block_classifier import BlockClassifier
from .inline_formatter import InlineFormatter
from .layout_analyzer import LayoutAnalyzer
from .spacing_resolver import SpacingResolver
from .text_processor import TextProcessor


class ParagraphGrouper:
    """
    Single-pass paragraph segmentation.

    Fragments are consumed in extraction order. Each one either extends the
    open paragraph (with a synthesized word space when needed) or closes it
    and opens a new one. Closed paragraphs are classified into blocks
    immediately; the end of the page closes the last one.
    """

    def __init__(self, thresholds: Optional[LayoutThresholds] = None):
        self.thresholds = thresholds or LayoutThresholds()
        self.text_processor = TextProcessor()
        self.inline_formatter = InlineFormatter()
        self.layout_analyzer = LayoutAnalyzer(self.thresholds)
        self.spacing_resolver = SpacingResolver(self.thresholds)
        self.block_classifier = BlockClassifier(self.thresholds)

    def group_fragments_into_blocks(self, fragments: Sequence[Fragment], page_width: float,
                                    spacing: Optional[PageSpacingProfile] = None,
                                    block_prefix: str = "block") -> List[Block]:
        """Segment one page's fragments into classified blocks."""
        if spacing is None:
            spacing = self.layout_analyzer.estimate_line_spacing(fragments)

        state = self.start_page(page_width, spacing)
        for fragment in fragments:
            self.process_fragment(state, fragment, block_prefix)
        self.finish_page(state, block_prefix)
        return state.blocks

    def start_page(self, page_width: float, spacing: PageSpacingProfile) -> SegmenterState:
        return SegmenterState(page_width=page_width, spacing=spacing)

    def process_fragment(self, state: SegmenterState, fragment: Fragment,
                         block_prefix: str = "block") -> Optional[BoundaryReason]:
        """Advance the state by one fragment; returns the boundary rule that fired, if any."""
        formatted = self.inline_formatter.format_fragment(fragment)
        reason = self.detect_boundary(state, fragment)

        if reason is not None:
            self.close_paragraph(state, block_prefix)
            state.accumulator = ParagraphAccumulator(
                content=self.text_processor.collapse_spaces(formatted),
                plain_text=fragment.text or '',
                start_x=fragment.x,
                end_x=fragment.right_edge,
                font_size=fragment.font_size
            )
        else:
            self._append_fragment(state, fragment, formatted)

        accumulator = state.accumulator
        accumulator.end_x = max(accumulator.end_x, fragment.right_edge)

        state.last_x = fragment.x
        state.last_right_edge = fragment.right_edge
        state.last_y = fragment.y
        state.last_font_size = fragment.font_size
        state.last_text = fragment.text or ''
        return reason

    def finish_page(self, state: SegmenterState, block_prefix: str = "block") -> None:
        """End of input is itself a boundary."""
        self.close_paragraph(state, block_prefix)

    def detect_boundary(self, state: SegmenterState, fragment: Fragment) -> Optional[BoundaryReason]:
        """Composite paragraph boundary rule, checked in a fixed order."""
        if state.last_y is None or state.accumulator is None:
            return BoundaryReason.PAGE_START

        t = self.thresholds
        y_diff = abs(fragment.y - state.last_y)
        line_gap = state.spacing.dominant_line_gap
        text = fragment.text or ''

        if y_diff > line_gap * t.large_gap_factor:
            return BoundaryReason.LARGE_VERTICAL_GAP

        if y_diff > line_gap and self._has_line_break_cue(state, fragment):
            return BoundaryReason.LINE_BREAK_WITH_CUE

        if (len(state.accumulator.content) > t.long_paragraph_length and
                y_diff > line_gap and
                self.text_processor.ends_with_sentence_end(text)):
            return BoundaryReason.LONG_PARAGRAPH_SENTENCE_END

        if fragment.font_size > state.last_font_size + t.heading_font_jump:
            return BoundaryReason.HEADING_ONSET

        if (self.text_processor.is_short_text(text, t.short_text_length) and
                y_diff > line_gap * t.short_line_gap_factor):
            return BoundaryReason.ISOLATED_SHORT_LINE

        return None

    def _has_line_break_cue(self, state: SegmenterState, fragment: Fragment) -> bool:
        """Signals that a line break also ends the paragraph.

        The outdent test compares against the previous fragment's left origin,
        not its right edge; a right-edge comparison flags every wrapped line
        as an outdent.
        """
        t = self.thresholds
        return (fragment.x < state.accumulator.start_x - t.indentation or
                self.text_processor.ends_with_sentence_end(state.last_text) or
                self.text_processor.is_short_text(state.last_text, t.short_text_length) or
                fragment.x < state.last_x - t.indentation or
                abs(fragment.font_size - state.last_font_size) > t.font_size_change)

    def _append_fragment(self, state: SegmenterState, fragment: Fragment, formatted: str) -> None:
        accumulator = state.accumulator
        new_line = abs(fragment.y - state.last_y) > self.thresholds.same_line_delta

        gap = self.spacing_resolver.normalized_gap(fragment.x, state.last_right_edge, fragment.font_size)
        if new_line and math.isfinite(gap):
            # Horizontal distance across a line wrap says nothing about word breaks
            gap = self.thresholds.large_gap

        separator = ' ' if self.spacing_resolver.resolve_plain(
            accumulator.plain_text, fragment.text or '', gap) else ''
        accumulator.content = self.text_processor.collapse_spaces(accumulator.content + separator + formatted)
        accumulator.plain_text += separator + (fragment.text or '')

        if new_line:
            accumulator.last_line_width = state.last_right_edge - accumulator.start_x
            accumulator.last_line_word_count = len(accumulator.plain_text.split())

    def close_paragraph(self, state: SegmenterState, block_prefix: str = "block") -> Optional[Block]:
        """Flush the open paragraph into a block, if it holds anything."""
        accumulator = state.accumulator
        state.accumulator = None
        if accumulator is None or accumulator.is_empty:
            return None

        state.closed_paragraphs += 1
        block = self.block_classifier.classify(
            accumulator, state.page_width, f"{block_prefix}_{len(state.blocks)}"
        )
        if block is None:
            state.dropped_paragraphs += 1
            return None

        state.blocks.append(block)
        return block
