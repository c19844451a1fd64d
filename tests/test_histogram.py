"""Tests for the quantized colour histogram."""

from __future__ import annotations

import pytest

from chromacut.quantize.histogram import InvalidInputError, build_histogram, color_index


def test_color_index_interleaves_channels() -> None:
    assert color_index(1, 2, 3) == (1 << 10) + (2 << 5) + 3
    assert color_index(31, 31, 31) == (1 << 15) - 1


def test_build_histogram_counts_quantized_cells() -> None:
    histogram = build_histogram([(255, 0, 0), (250, 3, 7), (0, 0, 8)])

    assert len(histogram) == 2
    assert histogram.total == 3
    assert histogram.at(31, 0, 0) == 2
    assert histogram.at(0, 0, 1) == 1
    assert histogram.at(5, 5, 5) == 0
    assert histogram[color_index(31, 0, 0)] == 2


def test_bounds_track_true_min_and_max() -> None:
    histogram = build_histogram([(200, 100, 50)] * 3)

    assert histogram.bounds() == (25, 25, 12, 12, 6, 6)

    histogram = build_histogram([(0, 255, 16), (255, 0, 16), (8, 8, 200)])
    assert histogram.bounds() == (0, 31, 0, 31, 2, 25)


def test_build_histogram_rejects_empty_input() -> None:
    with pytest.raises(InvalidInputError):
        build_histogram([])


def test_histogram_is_read_only() -> None:
    histogram = build_histogram([(1, 2, 3)])

    with pytest.raises(TypeError):
        histogram[0] = 5  # type: ignore[index]


def test_custom_sigbits_changes_resolution() -> None:
    histogram = build_histogram([(255, 255, 255), (0, 0, 0)], sigbits=4)

    assert histogram.rshift == 4
    assert histogram.bounds() == (0, 15, 0, 15, 0, 15)
    assert histogram.quantize((255, 128, 15)) == (15, 8, 0)


def test_total_counts_every_pixel() -> None:
    pixels = [(r, 0, 255 - r) for r in range(0, 256, 4)] * 3

    histogram = build_histogram(pixels)

    assert histogram.total == len(pixels)
    assert histogram.total == sum(histogram.values())
