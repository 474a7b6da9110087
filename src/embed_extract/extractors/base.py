# -*- coding: utf-8 -*-
"""
Shared pieces for site extractors: the extractor protocol, per-process state,
upstream fetch helpers and the per-request error taxonomy.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar
from urllib.parse import SplitResult

import httpx
from pydantic import BaseModel, ValidationError

from ..config import Settings
from ..media import MediaResolver
from ..models import EmbedWithExpire

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ExtractionError(Exception):
    """Per-request failure; no embed is produced."""

    pass


class UpstreamFetchError(ExtractionError):
    """Transport failure or timeout while talking to the upstream site."""

    pass


class UpstreamStatusError(ExtractionError):
    """Upstream answered with a non-success status."""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"Upstream returned HTTP {status_code} for {url}")
        self.status_code = status_code
        self.url = url


class UpstreamDecodeError(ExtractionError):
    """Upstream response could not be decoded."""

    pass


@dataclass
class ServiceState:
    """Process-wide resources handed to every extraction."""

    client: httpx.AsyncClient
    settings: Settings
    media: MediaResolver = field(default_factory=MediaResolver)


class Extractor(Protocol):
    """A site handler: a URL predicate plus an async fetch-and-normalize step."""

    name: str

    def matches(self, url: SplitResult) -> bool:
        ...

    async def extract(self, state: ServiceState, url: SplitResult) -> EmbedWithExpire:
        ...


async def _get(
        client: httpx.AsyncClient,
        url: str,
        **kwargs: Any,
) -> httpx.Response:
    try:
        response = await client.get(url, **kwargs)
    except httpx.HTTPError as e:
        logger.warning("Upstream request failed", extra={"url": url[:80], "error": str(e)})
        raise UpstreamFetchError(f"Request to {url} failed: {e}") from e

    if not response.is_success:
        logger.warning(
            "Upstream error status",
            extra={"url": url[:80], "status_code": response.status_code},
        )
        raise UpstreamStatusError(response.status_code, url)

    return response


async def fetch_json(
        client: httpx.AsyncClient,
        url: str,
        model: type[ModelT],
        **kwargs: Any,
) -> ModelT:
    """GET url and validate the JSON body against model."""
    response = await _get(client, url, **kwargs)

    try:
        return model.model_validate(response.json())
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        raise UpstreamDecodeError(f"Invalid JSON from {url}: {e}") from e


async def fetch_text(client: httpx.AsyncClient, url: str, **kwargs: Any) -> str:
    """GET url and return the decoded body."""
    response = await _get(client, url, **kwargs)
    return response.text
