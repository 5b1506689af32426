"""Word-space synthesis between adjacent text fragments."""

import math
from typing import Optional

from ..models.data_structures import LayoutThresholds
from ..models.enums import CharClass
from .text_processor import TextProcessor


ALPHANUMERIC = (CharClass.LETTER, CharClass.NUMBER)


class SpacingResolver:
    """Decides whether a visible space separates two adjacent fragments"""

    def __init__(self, thresholds: Optional[LayoutThresholds] = None):
        self.thresholds = thresholds or LayoutThresholds()
        self.text_processor = TextProcessor()

    def normalized_gap(self, current_x: float, last_right_edge: float, font_size: float) -> float:
        """Horizontal distance in font-size units; a degenerate font size reads as a huge gap."""
        if not font_size or font_size <= 0:
            return math.inf
        return (current_x - last_right_edge) / font_size

    def resolve(self, trailing_text: str, incoming_text: str, gap: float) -> bool:
        """Classify the characters meeting at the join and apply the spacing rules."""
        trailing = self.text_processor.visible_text(trailing_text or '')
        incoming = self.text_processor.visible_text(incoming_text or '')
        return self.resolve_plain(trailing, incoming, gap)

    def resolve_plain(self, trailing_text: str, incoming_text: str, gap: float) -> bool:
        """Like resolve, for markup-free text; only the edge characters are read."""
        if not trailing_text or not incoming_text:
            return False

        last_class = self.text_processor.classify_char(trailing_text[-1])
        first_class = self.text_processor.classify_char(incoming_text[0])
        return self.needs_space(last_class, first_class, gap)

    def needs_space(self, last_class: CharClass, first_class: CharClass, gap: float) -> bool:
        """Ordered spacing rules; the first one that applies decides."""
        t = self.thresholds

        if last_class == CharClass.SPACE or first_class == CharClass.SPACE:
            return False

        if gap > t.huge_gap:
            return True

        if last_class == CharClass.LETTER and first_class == CharClass.LETTER:
            return gap > t.normal_gap

        if last_class == CharClass.SENTENCE_END and first_class != CharClass.CLOSE_BRACKET:
            return True

        if last_class == CharClass.COMMA and first_class in ALPHANUMERIC:
            return True

        # Hyphenated word continuation
        if last_class == CharClass.HYPHEN or first_class == CharClass.HYPHEN:
            return False

        if last_class in ALPHANUMERIC and first_class in ALPHANUMERIC:
            return gap > t.min_gap

        return gap > t.normal_gap
