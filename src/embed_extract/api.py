# -*- coding: utf-8 -*-
"""
FastAPI API for the embed service.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import settings
from .extractors import ExtractionError, NoExtractorError
from .logging_config import setup_logging
from .middleware import RequestIDMiddleware
from .models import EmbedRequest, EmbedResponse, HealthResponse
from .service import embed_service

# Setup structured logging
setup_logging()
logger = logging.getLogger(__name__)


# noinspection PyUnusedLocal
@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifecycle management."""
    logger.info("Starting embed service", extra={"version": __version__})

    await embed_service.start()

    yield

    logger.info("Shutting down embed service")
    await embed_service.stop()


app = FastAPI(
    title="Embed Extract Service",
    description="Rich link previews from third-party content sites",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
)

# Middleware stack (order matters: last added = first executed)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.add_middleware(RequestIDMiddleware)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service health endpoint."""
    return HealthResponse(
        status="healthy",
        ready=embed_service.is_ready,
        version=__version__,
        extractors=embed_service.extractor_names,
    )


@app.post("/embed", response_model=EmbedResponse)
async def embed_url(request: EmbedRequest, response: Response) -> EmbedResponse:
    """
    Build a rich preview for a URL.

    - **url**: URL of the content to embed
    """
    if not embed_service.is_ready:
        raise HTTPException(status_code=503, detail="Embed service not started")

    url_str = str(request.url)
    logger.info("Embed request received", extra={"url": url_str[:80]})

    extractor = embed_service.extractor_for(url_str)

    try:
        result = await embed_service.embed(url_str)
    except NoExtractorError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ExtractionError as e:
        logger.warning("Embed failed", extra={"url": url_str[:80], "error": str(e)})
        response.status_code = 502
        return EmbedResponse(
            url=url_str,
            success=False,
            extractor=extractor,
            error=str(e),
        )

    response.headers["Cache-Control"] = f"public, max-age={result.max_age}"

    return EmbedResponse(
        url=url_str,
        success=True,
        embed=result.embed,
        max_age=result.max_age,
        extractor=extractor,
    )
