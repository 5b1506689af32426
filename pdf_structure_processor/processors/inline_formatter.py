"""Inline emphasis markup for individual fragments."""

import html

from ..models.data_structures import Fragment


class InlineFormatter:
    """Escapes fragment text and wraps it in nested emphasis tags"""

    @staticmethod
    def format_text(text: str, is_bold: bool = False, is_italic: bool = False,
                    is_underline: bool = False) -> str:
        formatted = html.escape(text or '', quote=False)
        # Innermost first so bold ends up outermost
        if is_underline:
            formatted = f"<u>{formatted}</u>"
        if is_italic:
            formatted = f"<em>{formatted}</em>"
        if is_bold:
            formatted = f"<strong>{formatted}</strong>"
        return formatted

    @staticmethod
    def format_fragment(fragment: Fragment) -> str:
        return InlineFormatter.format_text(
            fragment.text,
            is_bold=fragment.is_bold,
            is_italic=fragment.is_italic,
            is_underline=fragment.is_underline
        )
