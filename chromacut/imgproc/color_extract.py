"""Dominant colour and palette extraction from decoded images."""

from __future__ import annotations

import logging

from PIL import Image

from chromacut.imgproc.decode import PixelData
from chromacut.imgproc.sampling import DEFAULT_QUALITY, sample_pixels
from chromacut.quantize import quantize
from chromacut.quantize.histogram import RGB
from chromacut.quantize.mmcq import MAX_COLORS, MIN_COLORS

logger = logging.getLogger(__name__)

DEFAULT_COLOR_COUNT = 5
WHITE: RGB = (255, 255, 255)


class ColorExtractor:
    """Median-cut palette detector for already loaded pixel data.

    ``quality`` is the sampling stride: 1 looks at every pixel, larger values
    trade accuracy for speed.
    """

    def __init__(
        self,
        color_count: int = DEFAULT_COLOR_COUNT,
        quality: int = DEFAULT_QUALITY,
    ) -> None:
        self.color_count = color_count
        self.quality = quality

    def get_palette(
        self,
        image: PixelData | Image.Image,
        color_count: int | None = None,
        quality: int | None = None,
    ) -> list[RGB]:
        """Return the representative colours of ``image``.

        The palette may hold a couple of colours more or fewer than requested.
        An image with no usable pixels (for example entirely white or
        transparent) yields ``[(255, 255, 255)]``.
        """

        color_count = self.color_count if color_count is None else color_count
        quality = self.quality if quality is None else quality
        if color_count < MIN_COLORS or color_count > MAX_COLORS:
            color_count = DEFAULT_COLOR_COUNT
        if quality < 1:
            quality = DEFAULT_QUALITY

        pixels = image if isinstance(image, PixelData) else PixelData.from_image(image)
        samples = sample_pixels(pixels, quality)
        cmap = quantize(samples, color_count)
        if cmap is None:
            logger.info("No usable pixels in %dx%d image; returning white", pixels.width, pixels.height)
            return [WHITE]
        return cmap.palette()

    def get_color(self, image: PixelData | Image.Image, quality: int | None = None) -> RGB:
        """Return the first palette entry of a five colour palette."""

        return self.get_palette(image, DEFAULT_COLOR_COUNT, quality)[0]
