"""Print the palette of an image given by URL or file path."""

from __future__ import annotations

import argparse
import asyncio
from typing import Iterable

from chromacut.config.settings import get_settings
from chromacut.imgproc.decode import ImageSourceError
from chromacut.monitoring.logging import configure_logging
from chromacut.quantize.histogram import RGB
from chromacut.services.palette import PaletteService


def _format_color(color: RGB) -> str:
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}  rgb({r}, {g}, {b})"


def print_palette(palette: Iterable[RGB]) -> None:
    for color in palette:
        print(_format_color(color))


async def _extract(source: str, colors: int | None, quality: int | None) -> list[RGB]:
    service = PaletteService(get_settings())
    try:
        return await service.get_palette_from_url(source, colors, quality)
    finally:
        await service.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("source", help="http(s) URL or path of the image")
    parser.add_argument("--colors", type=int, default=None, help="palette size (2-256)")
    parser.add_argument("--quality", type=int, default=None, help="sampling stride, 1 is densest")
    args = parser.parse_args(argv)

    configure_logging()
    try:
        palette = asyncio.run(_extract(args.source, args.colors, args.quality))
    except ImageSourceError as exc:
        print(f"❌ {exc}")
        return 1
    print_palette(palette)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
