"""Pixel sampling pass feeding the quantizer."""

from __future__ import annotations

from chromacut.imgproc.decode import PixelData
from chromacut.quantize.histogram import RGB

DEFAULT_QUALITY = 5
MIN_ALPHA = 125
WHITE_THRESHOLD = 250


def sample_pixels(pixels: PixelData, quality: int = DEFAULT_QUALITY) -> list[RGB]:
    """Return every ``quality``-th opaque, non-white pixel as an RGB triple.

    Pixels with alpha below 125 are skipped, as are near-white pixels whose
    three channels all exceed 250. ``quality`` below 1 uses the default stride.
    """

    if quality < 1:
        quality = DEFAULT_QUALITY

    data = pixels.rgba
    samples: list[RGB] = []
    for i in range(0, pixels.pixel_count, quality):
        offset = i * 4
        r, g, b, a = data[offset], data[offset + 1], data[offset + 2], data[offset + 3]
        if a < MIN_ALPHA:
            continue
        if r > WHITE_THRESHOLD and g > WHITE_THRESHOLD and b > WHITE_THRESHOLD:
            continue
        samples.append((r, g, b))
    return samples
