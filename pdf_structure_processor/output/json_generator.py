"""JSON output generation utilities."""

import os
import datetime
import hashlib
from typing import Dict, List
from dataclasses import asdict

from ..models.data_structures import Block, LayoutThresholds, PageResult


class JSONGenerator:
    """JSON output generation utilities"""

    @staticmethod
    def create_document_metadata(pdf_path: str, page_count: int,
                                 thresholds: LayoutThresholds) -> Dict:
        """Create document-level metadata block."""
        pdf_name = os.path.basename(pdf_path)
        document_id = hashlib.md5(pdf_path.encode()).hexdigest()[:16]

        metadata = {
            'document_id': document_id,
            'source_pdf': pdf_name,
            'source_path': pdf_path,
            'page_count': page_count,
            'processing_timestamp': datetime.datetime.now().isoformat(),
            'extraction_engine': 'pymupdf',
            'processing_version': '1.0.0',
            'thresholds': asdict(thresholds)
        }

        return metadata

    @staticmethod
    def block_to_dict(block: Block) -> Dict:
        return {
            'block_id': block.block_id,
            'block_type': block.block_type.value,
            'heading_level': block.heading_level,
            'alignment': block.alignment.value,
            'content': block.content,
            'html': block.html,
            'font_size': block.font_size,
            'left_margin': block.left_margin,
            'right_margin': block.right_margin,
            'text_width': block.text_width
        }

    @staticmethod
    def page_to_dict(page: PageResult) -> Dict:
        return {
            'page_number': page.page_number,
            'page_width': page.page_width,
            'dominant_line_gap': page.spacing.dominant_line_gap,
            'line_gap_samples': page.spacing.sample_count,
            'fragment_count': page.fragment_count,
            'blocks': [JSONGenerator.block_to_dict(block) for block in page.blocks]
        }

    @staticmethod
    def create_document_results(metadata: Dict, pages: List[PageResult]) -> Dict:
        return {
            'metadata': metadata,
            'pages': [JSONGenerator.page_to_dict(page) for page in pages]
        }
