"""Dominant colour and palette extraction with modified median-cut quantization."""

from .imgproc.color_extract import ColorExtractor
from .imgproc.decode import ImageDecodeError, ImageSourceError, PixelData, decode_image, load_image
from .imgproc.fetch import ImageFetchError
from .quantize import ColorMap, quantize

__all__ = [
    "ColorExtractor",
    "ColorMap",
    "ImageDecodeError",
    "ImageFetchError",
    "ImageSourceError",
    "PixelData",
    "decode_image",
    "load_image",
    "quantize",
]
