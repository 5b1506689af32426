"""Document summary generation utilities."""

from typing import Dict, List

from ..models.data_structures import PageResult
from ..models.enums import BlockType
from ..processors.text_processor import TextProcessor


class SummaryGenerator:
    """Document summary generation utilities"""

    @staticmethod
    def create_document_summary(pages: List[PageResult]) -> Dict:
        """Create document summary with block type and alignment metrics."""
        summary = {
            'document_title': None,
            'total_pages': len(pages),
            'all_headings': [],
            'block_summary': {
                'total_blocks': 0,
                'block_types': {},
                'heading_levels': {},
                'alignment_distribution': {},
                'average_block_length': 0.0
            },
            'line_spacing': {
                'pages_with_line_gap': 0,
                'average_line_gap': 0.0
            }
        }

        total_block_length = 0
        total_line_gap = 0.0

        for page in pages:
            if page.spacing.dominant_line_gap > 0:
                summary['line_spacing']['pages_with_line_gap'] += 1
                total_line_gap += page.spacing.dominant_line_gap

            summary['block_summary']['total_blocks'] += len(page.blocks)

            for block in page.blocks:
                btype = block.block_type.value
                summary['block_summary']['block_types'][btype] = \
                    summary['block_summary']['block_types'].get(btype, 0) + 1

                alignment = block.alignment.value
                summary['block_summary']['alignment_distribution'][alignment] = \
                    summary['block_summary']['alignment_distribution'].get(alignment, 0) + 1

                text = TextProcessor.visible_text(block.content)
                total_block_length += len(text)

                if block.block_type == BlockType.HEADING:
                    level = block.heading_level
                    summary['block_summary']['heading_levels'][level] = \
                        summary['block_summary']['heading_levels'].get(level, 0) + 1
                    summary['all_headings'].append({
                        'text': text,
                        'level': level,
                        'page_number': page.page_number,
                        'block_id': block.block_id
                    })
                    if not summary['document_title']:
                        summary['document_title'] = text

        if summary['block_summary']['total_blocks'] > 0:
            summary['block_summary']['average_block_length'] = \
                total_block_length / summary['block_summary']['total_blocks']
        if summary['line_spacing']['pages_with_line_gap'] > 0:
            summary['line_spacing']['average_line_gap'] = \
                total_line_gap / summary['line_spacing']['pages_with_line_gap']

        return summary
