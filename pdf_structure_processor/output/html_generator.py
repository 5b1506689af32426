"""HTML output generation utilities."""

import os
from typing import List

from ..models.data_structures import Block, PageResult


class HTMLGenerator:
    """HTML output generation utilities"""

    @staticmethod
    def render_blocks(blocks: List[Block]) -> str:
        return ''.join(block.html for block in blocks)

    @staticmethod
    def render_document(pages: List[PageResult]) -> str:
        """Concatenate block markup of all pages in page order."""
        ordered = sorted(pages, key=lambda page: page.page_number)
        return ''.join(HTMLGenerator.render_blocks(page.blocks) for page in ordered)

    @staticmethod
    def write_html(html_path: str, html: str) -> str:
        directory = os.path.dirname(html_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(html_path, 'w', encoding='utf-8') as f:
            f.write(html)
        return html_path
