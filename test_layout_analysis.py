#!/usr/bin/env python3
"""
Tests for line spacing estimation and alignment
"""

import pytest

from pdf_structure_processor import Alignment, Fragment, LayoutThresholds
from pdf_structure_processor.processors import LayoutAnalyzer


def at(y, x=72.0):
    return Fragment(text="line", x=x, y=y, width=100, font_size=12)


@pytest.fixture
def analyzer():
    return LayoutAnalyzer()


def test_empty_and_single_fragment_pages_have_no_line_gap(analyzer):
    assert analyzer.estimate_line_spacing([]).dominant_line_gap == 0
    assert analyzer.estimate_line_spacing([at(100)]).dominant_line_gap == 0


def test_single_baseline_has_no_line_gap(analyzer):
    profile = analyzer.estimate_line_spacing([at(100, x) for x in (72, 150, 300)])
    assert profile.dominant_line_gap == 0
    assert profile.sample_count == 0


def test_jitter_within_a_line_is_ignored(analyzer):
    profile = analyzer.estimate_line_spacing([at(100), at(100.5), at(112)])
    assert profile.dominant_line_gap == pytest.approx(11.5)
    assert profile.sample_count == 1


def test_paragraph_gaps_are_trimmed_away(analyzer):
    ys = [100, 112, 124, 136, 148, 200]
    profile = analyzer.estimate_line_spacing([at(y) for y in ys])
    assert profile.dominant_line_gap == pytest.approx(12.0)
    assert profile.sample_count == 4


def test_direction_of_travel_does_not_matter(analyzer):
    down = analyzer.estimate_line_spacing([at(y) for y in (100, 114, 128, 142)])
    up = analyzer.estimate_line_spacing([at(y) for y in (142, 128, 114, 100)])
    assert down == up
    assert down.dominant_line_gap == pytest.approx(14.0)


def test_compute_margins(analyzer):
    assert analyzer.compute_margins(72, 540, 612) == (72, 72, 468)


def test_short_text_centered_with_near_equal_margins(analyzer):
    # left margin 300, right margin 312
    alignment = analyzer.determine_alignment("x" * 20, 300, 688, 1000)
    assert alignment == Alignment.CENTERED


def test_long_text_with_same_margins_is_justified(analyzer):
    alignment = analyzer.determine_alignment("x" * 200, 300, 688, 1000)
    assert alignment == Alignment.JUSTIFIED


def test_long_text_centered_needs_wide_margins_and_narrow_block(analyzer):
    assert analyzer.determine_alignment("x" * 200, 150, 845, 1000) == Alignment.CENTERED
    # Margins equal but not wider than the minimum margin
    assert analyzer.determine_alignment("x" * 200, 72, 540, 612) == Alignment.JUSTIFIED
    # Margins wide enough but block too wide for the page
    assert analyzer.determine_alignment("x" * 200, 100, 1900, 2000) == Alignment.JUSTIFIED


def test_flush_left_short_text_is_justified(analyzer):
    assert analyzer.determine_alignment("Hello world", 72, 150, 612) == Alignment.JUSTIFIED


def test_thresholds_validation():
    LayoutThresholds().validate()
    with pytest.raises(ValueError):
        LayoutThresholds(min_gap=0.5, normal_gap=0.25).validate()
    with pytest.raises(ValueError):
        LayoutThresholds(max_centered_width_ratio=0).validate()
    with pytest.raises(ValueError):
        LayoutThresholds(h1_font_size=12).validate()
