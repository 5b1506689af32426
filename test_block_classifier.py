#!/usr/bin/env python3
"""
Tests for block classification and normalization of closed paragraphs
"""

import pytest

from pdf_structure_processor import Alignment, BlockType
from pdf_structure_processor.models import ParagraphAccumulator
from pdf_structure_processor.processors import BlockClassifier


def paragraph(content, font_size=12.0, start_x=72.0, end_x=300.0):
    return ParagraphAccumulator(content=content, plain_text=content, start_x=start_x,
                                end_x=end_x, font_size=font_size)


@pytest.fixture
def classifier():
    return BlockClassifier()


@pytest.mark.parametrize("font_size, level", [
    (24, 1),
    (20.5, 1),
    (18, 2),
    (15, 3),
])
def test_large_fonts_become_headings(classifier, font_size, level):
    block = classifier.classify(paragraph("Section title", font_size=font_size), 612)
    assert block.block_type == BlockType.HEADING
    assert block.heading_level == level
    assert block.html.startswith(f"<h{level} ")
    assert block.html.endswith(f"</h{level}>")


def test_font_size_at_threshold_is_not_a_heading(classifier):
    block = classifier.classify(paragraph("Body text", font_size=14), 612)
    assert block.block_type == BlockType.PARAGRAPH
    assert block.heading_level is None


@pytest.mark.parametrize("content, expected", [
    ("•Item one", "Item one"),
    ("• Item two", "Item two"),
    ("- dash item", "dash item"),
    ("<strong>•Bold item</strong>", "<strong>Bold item</strong>"),
])
def test_bullets_become_list_items(classifier, content, expected):
    block = classifier.classify(paragraph(content), 612)
    assert block.block_type == BlockType.LIST_ITEM
    assert block.content == expected
    assert block.html == f'<li style="text-align: justify;">{expected}</li>'


def test_heading_size_wins_over_bullet(classifier):
    block = classifier.classify(paragraph("• Big bullet", font_size=22), 612)
    assert block.block_type == BlockType.HEADING
    assert block.content == "• Big bullet"


@pytest.mark.parametrize("content", ["", "   ", "\n\t", "<em> </em>"])
def test_blank_paragraphs_are_dropped(classifier, content):
    assert classifier.classify(paragraph(content), 612) is None


@pytest.mark.parametrize("content", ["•", "-", "• ", "<strong>•</strong>"])
def test_bare_bullets_are_dropped(classifier, content):
    assert classifier.classify(paragraph(content), 612) is None


def test_content_is_normalized(classifier):
    block = classifier.classify(paragraph("  Hello   world ,see(this)  "), 612)
    assert block.content == "Hello world, see (this)"
    assert block.html == '<p style="text-align: justify;">Hello world, see (this)</p>'


def test_geometry_and_alignment_are_recorded(classifier):
    block = classifier.classify(paragraph("Centered title", start_x=250, end_x=362), 612,
                                block_id="page_1_block_4")
    assert block.block_id == "page_1_block_4"
    assert block.left_margin == 250
    assert block.right_margin == 250
    assert block.text_width == 112
    assert block.alignment == Alignment.CENTERED
    assert block.html == '<p style="text-align: center;">Centered title</p>'


def test_blocks_are_immutable(classifier):
    block = classifier.classify(paragraph("Text"), 612)
    with pytest.raises(AttributeError):
        block.content = "changed"
