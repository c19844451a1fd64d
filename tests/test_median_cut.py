"""Tests for the median-cut box splitter."""

from __future__ import annotations

from chromacut.quantize.histogram import build_histogram
from chromacut.quantize.median_cut import median_cut_apply, partial_sums
from chromacut.quantize.vbox import VBox


def _bounds(vbox: VBox) -> tuple[int, ...]:
    return vbox.r1, vbox.r2, vbox.g1, vbox.g2, vbox.b1, vbox.b2


def test_empty_box_yields_nothing() -> None:
    histogram = build_histogram([(0, 0, 0)])

    assert median_cut_apply(histogram, VBox(5, 9, 5, 9, 5, 9, histogram)) == []


def test_single_pixel_box_is_copied() -> None:
    histogram = build_histogram([(10, 20, 30)])
    vbox = VBox.from_histogram(histogram)

    children = median_cut_apply(histogram, vbox)

    assert len(children) == 1
    assert children[0] is not vbox
    assert _bounds(children[0]) == _bounds(vbox)


def test_equal_widths_cut_red_first() -> None:
    histogram = build_histogram([(0, 0, 0)] * 500 + [(255, 255, 255)] * 500)
    vbox = VBox.from_histogram(histogram)

    first, second = median_cut_apply(histogram, vbox)

    assert _bounds(first) == (0, 14, 0, 31, 0, 31)
    assert _bounds(second) == (15, 31, 0, 31, 0, 31)
    assert first.count() == 500
    assert second.count() == 500


def test_widest_axis_is_cut() -> None:
    histogram = build_histogram([(0, 0, 0), (0, 255, 0)])
    vbox = VBox.from_histogram(histogram)

    first, second = median_cut_apply(histogram, vbox)

    assert _bounds(first) == (0, 0, 0, 14, 0, 0)
    assert _bounds(second) == (0, 0, 15, 31, 0, 0)


def test_children_partition_the_parent() -> None:
    pixels = [(r * 8, (r * 3) % 256, 40) for r in range(32)] * 2
    histogram = build_histogram(pixels)
    vbox = VBox.from_histogram(histogram)

    first, second = median_cut_apply(histogram, vbox)

    assert first.r2 + 1 == second.r1
    assert (first.r1, second.r2) == (vbox.r1, vbox.r2)
    assert first.count() + second.count() == vbox.count()
    assert first.count() > 0 and second.count() > 0


def test_population_on_upper_edge_cannot_be_cut() -> None:
    histogram = build_histogram([(255, 0, 0)] * 2)
    vbox = VBox(16, 31, 0, 0, 0, 0, histogram)

    assert median_cut_apply(histogram, vbox) == []


def test_single_interior_slice_leaves_empty_second_child() -> None:
    histogram = build_histogram([(128, 0, 0)] * 2)
    vbox = VBox(0, 31, 0, 0, 0, 0, histogram)

    first, second = median_cut_apply(histogram, vbox)

    assert _bounds(first) == (0, 16, 0, 0, 0, 0)
    assert _bounds(second) == (17, 31, 0, 0, 0, 0)
    assert first.count() == 2
    assert second.count() == 0


def test_partial_sums_accumulate_along_axis() -> None:
    histogram = build_histogram([(0, 0, 0), (8, 0, 0), (8, 0, 0), (24, 0, 0)])
    vbox = VBox(0, 3, 0, 0, 0, 0, histogram)

    partial, total = partial_sums(histogram, vbox, "r")

    assert total == 4
    assert partial == {0: 1, 1: 3, 2: 3, 3: 4}
