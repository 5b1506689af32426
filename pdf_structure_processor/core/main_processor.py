"""Main document processor using modular components."""

import os
import json
from typing import Iterable, List, Optional, Sequence, Tuple

from ..models.data_structures import Fragment, LayoutThresholds, PageResult
from ..extractors.fragment_extractor import FragmentExtractor
from ..processors.layout_analyzer import LayoutAnalyzer
from ..processors.paragraph_grouper import ParagraphGrouper
from ..utils.pdf_utils import PDFUtils
from ..output.html_generator import HTMLGenerator
from ..output.json_generator import JSONGenerator
from ..output.summary_generator import SummaryGenerator


class DocumentProcessor:
    """
    Document structure reconstruction pipeline that combines:
    - Fragment extraction from PDF pages
    - Per-page line spacing estimation
    - Paragraph segmentation and block classification
    - HTML and structured JSON output generation
    """

    def __init__(self, thresholds: Optional[LayoutThresholds] = None,
                 fragment_extractor: Optional[FragmentExtractor] = None, verbose: bool = True):
        self.thresholds = thresholds or LayoutThresholds()
        self.thresholds.validate()
        self.verbose = verbose

        # Initialize modular components
        self.fragment_extractor = fragment_extractor or FragmentExtractor()
        self.layout_analyzer = LayoutAnalyzer(self.thresholds)
        self.paragraph_grouper = ParagraphGrouper(self.thresholds)
        self.pdf_utils = PDFUtils()
        self.html_generator = HTMLGenerator()
        self.json_generator = JSONGenerator()
        self.summary_generator = SummaryGenerator()

    # ========================================================================
    # Page Processing
    # ========================================================================

    def process_page(self, fragments: Sequence[Fragment], page_width: float,
                     page_number: int = 1) -> PageResult:
        """Reconstruct the blocks of one page; performs no I/O."""
        spacing = self.layout_analyzer.estimate_line_spacing(fragments)
        blocks = self.paragraph_grouper.group_fragments_into_blocks(
            fragments, page_width, spacing, block_prefix=f"page_{page_number}_block"
        )
        return PageResult(
            page_number=page_number,
            page_width=page_width,
            spacing=spacing,
            blocks=blocks,
            fragment_count=len(fragments)
        )

    def process_pages(self, pages: Iterable[Tuple[int, float, Sequence[Fragment]]]) -> List[PageResult]:
        """Process (page number, page width, fragments) triples in page number order."""
        return [
            self.process_page(fragments, page_width, page_number)
            for page_number, page_width, fragments in sorted(pages, key=lambda page: page[0])
        ]

    def render_html(self, results: List[PageResult]) -> str:
        return self.html_generator.render_document(results)

    # ========================================================================
    # Document Processing Pipeline
    # ========================================================================

    def extract_pages(self, pdf_path: str,
                      page_numbers: Optional[List[int]] = None) -> List[Tuple[int, float, List[Fragment]]]:
        """Read fragments of the requested 0-indexed pages before any reconstruction runs."""
        doc = self.pdf_utils.open_document(pdf_path)
        try:
            pages = []
            for page_num, page in self.pdf_utils.iter_pages(doc, page_numbers):
                fragments = self.fragment_extractor.extract_page_fragments(page)
                pages.append((page_num + 1, self.pdf_utils.page_width(page), fragments))
            return pages
        finally:
            doc.close()

    def process_document(self, pdf_path: str, output_dir: str,
                         page_numbers: Optional[List[int]] = None) -> List[PageResult]:
        """Process a PDF and write HTML, structure JSON and summary files."""
        os.makedirs(output_dir, exist_ok=True)
        pages = self.extract_pages(pdf_path, page_numbers)
        if not pages:
            raise ValueError("No valid pages found in PDF")

        results = []
        for page_number, page_width, fragments in sorted(pages, key=lambda page: page[0]):
            if self.verbose:
                print(f"Processing page {page_number}...")
            if not fragments and self.verbose:
                print(f"  Warning: No text fragments on page {page_number}")
            results.append(self.process_page(fragments, page_width, page_number))

        stem = os.path.splitext(os.path.basename(pdf_path))[0]

        html_file = os.path.join(output_dir, f'{stem}.html')
        self.html_generator.write_html(html_file, self.render_html(results))

        metadata = self.json_generator.create_document_metadata(pdf_path, len(results), self.thresholds)
        structure_file = os.path.join(output_dir, f'{stem}_structure.json')
        with open(structure_file, 'w', encoding='utf-8') as f:
            json.dump(self.json_generator.create_document_results(metadata, results), f,
                      indent=2, ensure_ascii=False)

        summary = self.summary_generator.create_document_summary(results)
        summary_file = os.path.join(output_dir, 'document_summary.json')
        with open(summary_file, 'w', encoding='utf-8') as f:
            json.dump(summary, f, indent=2, ensure_ascii=False)

        return results
