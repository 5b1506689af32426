"""Text processing utilities for reconstructed paragraphs."""

import re
import html

from ..models.enums import CharClass


LETTERS = 'a-zA-ZáéíóöőúüűÁÉÍÓÖŐÚÜŰ'
SENTENCE_END_MARKS = '.!?:;'

_LETTER_RE = re.compile(f'[{LETTERS}]')
_TAG_RE = re.compile(r'<[^>]+>')
_MULTI_SPACE_RE = re.compile(r' {2,}')
_WHITESPACE_RE = re.compile(r'\s+')
_SPACE_BEFORE_PUNCT_RE = re.compile(r'\s+([.!?:;,)\]}])')
# The ';' closing an escaped entity is not punctuation
_ENTITY_GUARD = r'(?<!&lt)(?<!&gt)(?<!&amp)'
_PUNCT_BEFORE_ALNUM_RE = re.compile(_ENTITY_GUARD + r'([.!?:;,)\]}])(?=[' + LETTERS + r'0-9])')
# Lookahead so adjacent brackets are each separated in a single pass
_OPEN_BRACKET_RE = re.compile(r'(\S)(?=[(\[{])')


class TextProcessor:
    """Character classification and whitespace normalization"""

    @staticmethod
    def classify_char(char: str) -> CharClass:
        """Map a single character to its semantic class; OTHER is the catch-all."""
        if not char:
            return CharClass.OTHER
        char = char[0]
        if _LETTER_RE.match(char):
            return CharClass.LETTER
        if '0' <= char <= '9':
            return CharClass.NUMBER
        if char in SENTENCE_END_MARKS:
            return CharClass.SENTENCE_END
        if char == ',':
            return CharClass.COMMA
        if char == '-':
            return CharClass.HYPHEN
        if char in ')]}':
            return CharClass.CLOSE_BRACKET
        if char in '([{':
            return CharClass.OPEN_BRACKET
        if char.isspace():
            return CharClass.SPACE
        return CharClass.OTHER

    @staticmethod
    def visible_text(markup: str) -> str:
        """Strip emphasis tags and unescape entities."""
        return html.unescape(_TAG_RE.sub('', markup))

    @staticmethod
    def collapse_spaces(text: str) -> str:
        return _MULTI_SPACE_RE.sub(' ', text)

    @staticmethod
    def normalize_text(text: str) -> str:
        """Normalize paragraph markup; applying it twice changes nothing."""
        text = _WHITESPACE_RE.sub(' ', text)
        text = _SPACE_BEFORE_PUNCT_RE.sub(r'\1', text)
        text = _PUNCT_BEFORE_ALNUM_RE.sub(r'\1 ', text)
        text = _OPEN_BRACKET_RE.sub(r'\1 ', text)
        return text.strip()

    @staticmethod
    def ends_with_sentence_end(text: str) -> bool:
        stripped = (text or '').rstrip()
        return bool(stripped) and stripped[-1] in SENTENCE_END_MARKS

    @staticmethod
    def is_short_text(text: str, threshold: int = 50) -> bool:
        return len((text or '').strip()) < threshold
