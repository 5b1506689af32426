"""PDF access utilities."""

import os
from typing import Iterator, List, Optional, Tuple
import pymupdf as fitz


class PDFUtils:
    """PDF access utilities"""

    @staticmethod
    def open_document(pdf_path: str):
        """Open a PDF; corrupt files raise pymupdf's own errors."""
        if not os.path.exists(pdf_path):
            raise FileNotFoundError(f"PDF file not found: {pdf_path}")
        return fitz.open(pdf_path)

    @staticmethod
    def iter_pages(doc, page_numbers: Optional[List[int]] = None) -> Iterator[Tuple[int, object]]:
        """Yield (0-indexed page number, page) pairs, skipping pages the document lacks."""
        page_numbers = page_numbers if page_numbers is not None else list(range(len(doc)))

        for page_num in page_numbers:
            if page_num < 0 or page_num >= len(doc):
                print(f"Warning: Page {page_num} does not exist in PDF. Skipping.")
                continue
            yield page_num, doc.load_page(page_num)

    @staticmethod
    def page_width(page) -> float:
        return float(page.rect.width)
