"""Async retrieval of image bytes from URLs or local paths."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import httpx

from chromacut.config.settings import Settings
from chromacut.imgproc.decode import ImageSourceError
from chromacut.metrics.prometheus_exporter import active_image_fetches

logger = logging.getLogger(__name__)


class ImageFetchError(ImageSourceError):
    """Raised when an image could not be downloaded or read."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class ImageFetcher:
    """Downloads image payloads over HTTP and reads local files."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._client = client or httpx.AsyncClient(
            timeout=settings.fetch_timeout,
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def fetch(self, source: str) -> bytes:
        """Return the raw bytes behind ``source``, a URL or a file path."""

        if is_remote(source):
            return await self._download(source)
        return await self._read_file(Path(source).expanduser())

    async def _download(self, url: str) -> bytes:
        active_image_fetches.inc()
        try:
            async with self._client.stream("GET", url) as response:
                response.raise_for_status()
                content = await self._read_capped(response, url)
        except httpx.TimeoutException as exc:
            raise ImageFetchError(f"Timed out downloading {url}.") from exc
        except httpx.HTTPStatusError as exc:
            raise ImageFetchError(
                f"Image host returned {exc.response.status_code} for {url}.",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise ImageFetchError(f"Could not download {url}: {exc}") from exc
        finally:
            active_image_fetches.dec()

        logger.info("Downloaded %d bytes from %s", len(content), url)
        return content

    async def _read_capped(self, response: httpx.Response, url: str) -> bytes:
        limit = self._settings.fetch_max_bytes
        chunks: list[bytes] = []
        received = 0
        async for chunk in response.aiter_bytes():
            received += len(chunk)
            if received > limit:
                raise ImageFetchError(f"Image at {url} is over the {limit} byte limit.")
            chunks.append(chunk)
        return b"".join(chunks)

    async def _read_file(self, path: Path) -> bytes:
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise ImageFetchError(f"Cannot read image file {path}: {exc}") from exc
