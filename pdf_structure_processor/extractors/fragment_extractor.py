"""Fragment extraction from PDF pages and font style detection."""

from typing import Dict, Iterable, List, Optional

from ..models.data_structures import Fragment, FragmentStyle


# pymupdf span flag bits
FLAG_ITALIC = 1 << 1
FLAG_BOLD = 1 << 4

UNDERLINE_RENDERING_MODE = 2


class FontStyleDetector:
    """Derive emphasis capabilities from font names and rendering hints"""

    def __init__(self, bold_keywords=None, italic_keywords=None, underline_keywords=None,
                 bold_face_tags=None, bold_weight=600):
        self.bold_keywords = bold_keywords or ('bold', 'black')
        self.italic_keywords = italic_keywords or ('italic', 'oblique')
        self.underline_keywords = underline_keywords or ('underline',)
        # Internal face ids are matched case-sensitively
        self.bold_face_tags = bold_face_tags if bold_face_tags is not None else ('f1',)
        self.bold_weight = bold_weight

    def detect(self, font_name: Optional[str], font_weight: Optional[float] = None,
               rendering_mode: Optional[int] = None, flags: int = 0) -> FragmentStyle:
        name = font_name or ''
        lowered = name.lower()
        flags = flags or 0

        is_bold = (any(keyword in lowered for keyword in self.bold_keywords) or
                   any(tag in name for tag in self.bold_face_tags) or
                   (font_weight is not None and font_weight >= self.bold_weight) or
                   bool(flags & FLAG_BOLD))
        is_italic = (any(keyword in lowered for keyword in self.italic_keywords) or
                     bool(flags & FLAG_ITALIC))
        is_underline = (any(keyword in lowered for keyword in self.underline_keywords) or
                        rendering_mode == UNDERLINE_RENDERING_MODE)

        return FragmentStyle(is_bold=is_bold, is_italic=is_italic, is_underline=is_underline)


class FragmentExtractor:
    """Turn pymupdf text spans into positioned fragments"""

    def __init__(self, style_detector: Optional[FontStyleDetector] = None):
        self.style_detector = style_detector or FontStyleDetector()

    def extract_page_fragments(self, page) -> List[Fragment]:
        """Fragments of a page in extraction order; image blocks are skipped."""
        page_dict = page.get_text("dict")
        return self.spans_to_fragments(self._iter_spans(page_dict.get('blocks', [])))

    def spans_to_fragments(self, spans: Iterable[Dict]) -> List[Fragment]:
        fragments = []
        for span in spans:
            fragment = self.span_to_fragment(span)
            if fragment is not None:
                fragments.append(fragment)
        return fragments

    def span_to_fragment(self, span: Dict) -> Optional[Fragment]:
        origin = span.get('origin')
        bbox = span.get('bbox')
        if not origin or not bbox or len(bbox) < 4:
            return None

        font_name = span.get('font', '')
        # pymupdf spans carry only 'font' and 'flags'; weight and rendering
        # mode stay None unless a caller supplies richer span dicts
        style = self.style_detector.detect(
            font_name,
            font_weight=span.get('weight'),
            rendering_mode=span.get('rendering_mode'),
            flags=span.get('flags', 0)
        )

        return Fragment(
            text=span.get('text', ''),
            x=float(origin[0]),
            y=float(origin[1]),
            width=float(bbox[2] - bbox[0]),
            font_size=float(span.get('size', 0.0)),
            style=style,
            font_name=font_name
        )

    @staticmethod
    def _iter_spans(blocks: List[Dict]) -> Iterable[Dict]:
        for block in blocks:
            if block.get('type', 0) != 0:
                continue
            for line in block.get('lines', []):
                yield from line.get('spans', [])
