"""Image decoding into raw RGBA buffers."""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError


class ImageSourceError(RuntimeError):
    """Raised when an image cannot be obtained or read."""


class ImageDecodeError(ImageSourceError):
    """Raised when image bytes are not in a format Pillow understands."""


@dataclass(frozen=True, slots=True)
class PixelData:
    """Row-major RGBA pixels, four bytes per pixel."""

    width: int
    height: int
    rgba: bytes

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelData:
        """Convert any Pillow image mode to an RGBA buffer."""

        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        return cls(width=rgba.width, height=rgba.height, rgba=rgba.tobytes())


def decode_image(data: bytes) -> PixelData:
    """Decode encoded image bytes (PNG, JPEG, ...) into :class:`PixelData`."""

    try:
        with Image.open(BytesIO(data)) as img:
            img.load()
            return PixelData.from_image(img)
    except Image.DecompressionBombError as exc:
        raise ImageDecodeError(f"Image is too large to decode: {exc}") from exc
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageDecodeError("Data is not a supported image.") from exc


def load_image(path: str | Path) -> PixelData:
    """Read and decode an image file from disk."""

    source = Path(path).expanduser()
    try:
        data = source.read_bytes()
    except OSError as exc:
        raise ImageSourceError(f"Cannot read image file {source}: {exc}") from exc
    return decode_image(data)
