"""Page-level layout measurements: line pitch, margins and alignment."""

from typing import List, Optional, Sequence, Tuple

from ..models.data_structures import Fragment, LayoutThresholds, PageSpacingProfile
from ..models.enums import Alignment


class LayoutAnalyzer:
    """Line spacing estimation and block alignment"""

    def __init__(self, thresholds: Optional[LayoutThresholds] = None):
        self.thresholds = thresholds or LayoutThresholds()

    def line_deltas(self, fragments: Sequence[Fragment]) -> List[float]:
        """Baseline deltas between consecutive fragments, same-line pairs excluded."""
        deltas = []
        last_y = None
        for fragment in fragments:
            if last_y is not None:
                delta = abs(fragment.y - last_y)
                if delta > self.thresholds.same_line_delta:
                    deltas.append(delta)
            last_y = fragment.y
        return deltas

    def estimate_line_spacing(self, fragments: Sequence[Fragment]) -> PageSpacingProfile:
        """
        Estimate the dominant baseline-to-baseline distance of a page.

        Deltas outside the inter-quartile range are discarded so that
        paragraph gaps, headings and footnotes do not bias the mean.
        Returns a zero gap when the page has no measurable line breaks.
        """
        deltas = sorted(self.line_deltas(fragments))
        if not deltas:
            return PageSpacingProfile()

        q1 = deltas[int(len(deltas) * 0.25)]
        q3 = deltas[int(len(deltas) * 0.75)]
        normal = [delta for delta in deltas if q1 <= delta <= q3]

        return PageSpacingProfile(
            dominant_line_gap=sum(normal) / len(normal),
            sample_count=len(normal)
        )

    def compute_margins(self, start_x: float, end_x: float, page_width: float) -> Tuple[float, float, float]:
        """Return (left margin, right margin, text width)."""
        return start_x, page_width - end_x, end_x - start_x

    def determine_alignment(self, text: str, start_x: float, end_x: float, page_width: float) -> Alignment:
        """Centered or justified, judged from the margins around the paragraph."""
        t = self.thresholds
        left_margin, right_margin, text_width = self.compute_margins(start_x, end_x, page_width)
        margin_difference = abs(left_margin - right_margin)

        if len(text.strip()) < t.short_text_length:
            is_centered = margin_difference < t.center_tolerance * 2
        else:
            is_centered = (margin_difference < t.center_tolerance and
                           left_margin > t.min_margin and
                           right_margin > t.min_margin and
                           text_width < page_width * t.max_centered_width_ratio)

        return Alignment.CENTERED if is_centered else Alignment.JUSTIFIED
