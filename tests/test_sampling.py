"""Tests for the pixel sampling pass."""

from __future__ import annotations

from chromacut.imgproc.decode import PixelData
from chromacut.imgproc.sampling import sample_pixels


def _pixels(*rgba: tuple[int, int, int, int]) -> PixelData:
    return PixelData(width=len(rgba), height=1, rgba=bytes(value for pixel in rgba for value in pixel))


def test_transparent_pixels_are_skipped() -> None:
    pixels = _pixels(
        (10, 20, 30, 0),
        (40, 50, 60, 255),
        (70, 80, 90, 0),
        (100, 110, 120, 200),
    )

    assert sample_pixels(pixels, quality=1) == [(40, 50, 60), (100, 110, 120)]


def test_alpha_threshold_is_inclusive() -> None:
    pixels = _pixels((1, 1, 1, 124), (2, 2, 2, 125))

    assert sample_pixels(pixels, quality=1) == [(2, 2, 2)]


def test_near_white_pixels_are_skipped() -> None:
    pixels = _pixels((251, 251, 251, 255), (251, 251, 250, 255), (255, 255, 255, 255))

    assert sample_pixels(pixels, quality=1) == [(251, 251, 250)]


def test_quality_is_the_sampling_stride() -> None:
    pixels = _pixels(*[(i, i, i, 255) for i in range(7)])

    assert sample_pixels(pixels, quality=3) == [(0, 0, 0), (3, 3, 3), (6, 6, 6)]


def test_quality_below_one_uses_default_stride() -> None:
    pixels = _pixels(*[(i, i, i, 255) for i in range(12)])

    assert sample_pixels(pixels, quality=0) == [(0, 0, 0), (5, 5, 5), (10, 10, 10)]
