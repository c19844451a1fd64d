"""Palette extraction for images referenced by URL or path."""

from __future__ import annotations

import asyncio
import logging

from chromacut.config.settings import Settings
from chromacut.imgproc.color_extract import DEFAULT_COLOR_COUNT, ColorExtractor
from chromacut.imgproc.decode import ImageSourceError, decode_image
from chromacut.imgproc.fetch import ImageFetcher
from chromacut.metrics.prometheus_exporter import (
    palette_extraction_failures_total,
    palette_extraction_total,
)
from chromacut.quantize.histogram import RGB

logger = logging.getLogger(__name__)


class PaletteService:
    """Coordinates image retrieval, decoding and quantization."""

    def __init__(
        self,
        settings: Settings,
        fetcher: ImageFetcher | None = None,
        extractor: ColorExtractor | None = None,
    ) -> None:
        self._settings = settings
        self._fetcher = fetcher or ImageFetcher(settings)
        self._extractor = extractor or ColorExtractor(
            color_count=settings.palette_color_count,
            quality=settings.palette_quality,
        )

    async def close(self) -> None:
        await self._fetcher.close()

    async def get_palette_from_url(
        self,
        source: str,
        color_count: int | None = None,
        quality: int | None = None,
    ) -> list[RGB]:
        """Fetch ``source`` and return its palette.

        Raises:
            ImageSourceError: the image could not be fetched, read or decoded.
        """

        palette_extraction_total.inc()
        try:
            data = await self._fetcher.fetch(source)
            pixels = await asyncio.to_thread(decode_image, data)
        except ImageSourceError as exc:
            palette_extraction_failures_total.inc()
            logger.warning("Failed to load image %s: %s", source, exc)
            raise

        return await asyncio.to_thread(self._extractor.get_palette, pixels, color_count, quality)

    async def get_color_from_url(self, source: str, quality: int | None = None) -> RGB:
        """Fetch ``source`` and return the first colour of its five colour palette."""

        palette = await self.get_palette_from_url(source, DEFAULT_COLOR_COUNT, quality)
        return palette[0]
