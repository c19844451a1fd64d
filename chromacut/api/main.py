"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, HTTPException, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel, Field

from chromacut.config.settings import get_settings
from chromacut.imgproc.decode import ImageDecodeError, ImageSourceError
from chromacut.imgproc.fetch import ImageFetchError, is_remote
from chromacut.monitoring.logging import configure_logging
from chromacut.services.palette import PaletteService


class PaletteRequest(BaseModel):
    """Image reference and palette options."""

    source: str = Field(min_length=1)
    color_count: int | None = None
    quality: int | None = None


class PaletteResponse(BaseModel):
    """Dominant colour plus the full palette, as ``[r, g, b]`` triples."""

    dominant: list[int]
    palette: list[list[int]]


def create_app() -> FastAPI:
    """Initialise the FastAPI application."""

    settings = get_settings()
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.palette_service.close()

    app = FastAPI(
        title="Chromacut API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
        lifespan=lifespan,
    )
    app.state.palette_service = PaletteService(settings)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used by readiness checks."""

        return {"status": "ok"}

    @app.get("/metrics", tags=["system"])
    async def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.post("/palette", tags=["palette"], response_model=PaletteResponse)
    async def extract_palette(payload: PaletteRequest, request: Request) -> PaletteResponse:
        """Return the palette of the image at ``payload.source``."""

        if not is_remote(payload.source):
            raise HTTPException(status_code=400, detail="Only http and https URLs are accepted.")

        service: PaletteService = request.app.state.palette_service
        try:
            palette = await service.get_palette_from_url(
                payload.source,
                payload.color_count,
                payload.quality,
            )
        except ImageFetchError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        except ImageDecodeError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except ImageSourceError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        return PaletteResponse(
            dominant=list(palette[0]),
            palette=[list(color) for color in palette],
        )

    return app


app = create_app()
