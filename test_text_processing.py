#!/usr/bin/env python3
"""
Tests for character classification, normalization and inline formatting
"""

import pytest

from pdf_structure_processor import CharClass, Fragment, FragmentStyle
from pdf_structure_processor.processors import TextProcessor, InlineFormatter


@pytest.mark.parametrize("char, expected", [
    ('a', CharClass.LETTER),
    ('Z', CharClass.LETTER),
    ('é', CharClass.LETTER),
    ('ő', CharClass.LETTER),
    ('Ű', CharClass.LETTER),
    ('7', CharClass.NUMBER),
    ('.', CharClass.SENTENCE_END),
    ('!', CharClass.SENTENCE_END),
    ('?', CharClass.SENTENCE_END),
    (':', CharClass.SENTENCE_END),
    (';', CharClass.SENTENCE_END),
    (',', CharClass.COMMA),
    ('-', CharClass.HYPHEN),
    ('(', CharClass.OPEN_BRACKET),
    ('[', CharClass.OPEN_BRACKET),
    (')', CharClass.CLOSE_BRACKET),
    ('}', CharClass.CLOSE_BRACKET),
    (' ', CharClass.SPACE),
    ('\t', CharClass.SPACE),
    ('%', CharClass.OTHER),
    ('€', CharClass.OTHER),
    ('', CharClass.OTHER),
])
def test_classify_char(char, expected):
    assert TextProcessor.classify_char(char) == expected


@pytest.mark.parametrize("raw, expected", [
    ("Hello   world .", "Hello world."),
    ("  padded\n text\t", "padded text"),
    ("end.Next", "end. Next"),
    ("a,b", "a, b"),
    ("item , next", "item, next"),
    ("see(note)", "see (note)"),
    ("value 3.14 and 1,000", "value 3. 14 and 1, 000"),
    ("page 4.Then", "page 4. Then"),
    ("f((x))", "f ( (x))"),
    ("a{[b]}", "a { [b]}"),
    ("x&lt;y &amp;z", "x&lt;y &amp;z"),
    ("<strong>Bold</strong> .", "<strong>Bold</strong>."),
])
def test_normalize_text(raw, expected):
    assert TextProcessor.normalize_text(raw) == expected


@pytest.mark.parametrize("raw", [
    "Hello   world .",
    "a ,(b",
    "f)(x",
    "end.Next(one)two,three",
    " leading [bracket] text ;trailing",
    "<em>a</em>.(<u>b</u>)",
    "f((x))",
    "a{[b]}",
    "?a..!((\n)",
    "x&lt;5 and 2,5",
])
def test_normalize_text_is_idempotent(raw):
    once = TextProcessor.normalize_text(raw)
    assert TextProcessor.normalize_text(once) == once


def test_collapse_spaces_only_touches_space_runs():
    assert TextProcessor.collapse_spaces("a  b   c\n\nd") == "a b c\n\nd"


def test_visible_text_strips_tags_and_entities():
    assert TextProcessor.visible_text("<strong>a &lt; b</strong>") == "a < b"


def test_sentence_end_and_short_text():
    assert TextProcessor.ends_with_sentence_end("Done.  ")
    assert not TextProcessor.ends_with_sentence_end("Not done")
    assert not TextProcessor.ends_with_sentence_end("")
    assert TextProcessor.is_short_text("  short  ")
    assert not TextProcessor.is_short_text("x" * 50)


@pytest.mark.parametrize("bold, italic, underline, expected", [
    (False, False, False, "word"),
    (True, False, False, "<strong>word</strong>"),
    (False, True, False, "<em>word</em>"),
    (False, False, True, "<u>word</u>"),
    (True, True, False, "<strong><em>word</em></strong>"),
    (True, False, True, "<strong><u>word</u></strong>"),
    (False, True, True, "<em><u>word</u></em>"),
    (True, True, True, "<strong><em><u>word</u></em></strong>"),
])
def test_format_text_nesting(bold, italic, underline, expected):
    assert InlineFormatter.format_text("word", bold, italic, underline) == expected


def test_format_text_escapes_before_wrapping():
    assert InlineFormatter.format_text("a<b & c>", is_bold=True) == "<strong>a&lt;b &amp; c&gt;</strong>"


def test_format_fragment_without_style_has_no_emphasis():
    fragment = Fragment(text="plain", x=0, y=0, width=10, font_size=12, style=None)
    assert InlineFormatter.format_fragment(fragment) == "plain"


def test_format_fragment_uses_style_capabilities():
    fragment = Fragment(text="x", x=0, y=0, width=10, font_size=12,
                        style=FragmentStyle(is_italic=True))
    assert InlineFormatter.format_fragment(fragment) == "<em>x</em>"
