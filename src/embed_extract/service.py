# -*- coding: utf-8 -*-
"""
Embed service: owns the shared HTTP client and the extractor registry.
"""
import logging

import httpx

from .config import Settings, settings
from .extractors import ExtractorRegistry, ServiceState
from .media import MediaResolver
from .models import EmbedWithExpire

logger = logging.getLogger(__name__)


class EmbedService:
    """Embed extraction with a lifecycle bound to the application.

    start() validates configuration and builds every extractor; a bad
    extractor section makes it raise ConfigError.
    """

    def __init__(self, config: Settings = settings):
        self.config = config
        self.registry: ExtractorRegistry | None = None
        self.state: ServiceState | None = None

    async def start(self, transport: httpx.AsyncBaseTransport | None = None):
        """Build the extractors and open the shared HTTP client."""
        logger.info("Initializing extractors")
        registry = ExtractorRegistry.from_settings(self.config)

        client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                self.config.HTTP_TIMEOUT, connect=self.config.HTTP_CONNECT_TIMEOUT
            ),
            limits=httpx.Limits(max_connections=self.config.MAX_CONNECTIONS),
            headers={"User-Agent": self.config.USER_AGENT},
            follow_redirects=True,
            transport=transport,
        )

        self.registry = registry
        self.state = ServiceState(client=client, settings=self.config, media=MediaResolver())
        logger.info("Embed service ready", extra={"extractors": registry.names})

    async def stop(self):
        """Close the HTTP client."""
        logger.info("Closing embed service...")
        if self.state is not None:
            await self.state.client.aclose()
            self.state = None
        self.registry = None
        logger.info("Embed service closed")

    @property
    def is_ready(self) -> bool:
        return self.state is not None and self.registry is not None

    @property
    def extractor_names(self) -> list[str]:
        return self.registry.names if self.registry is not None else []

    def extractor_for(self, url: str) -> str | None:
        """Name of the extractor that would handle url."""
        if self.registry is None:
            return None
        extractor = self.registry.find(url)
        return extractor.name if extractor is not None else None

    async def embed(self, url: str) -> EmbedWithExpire:
        """
        Build the embed for url.

        Raises:
            RuntimeError: service not started
            NoExtractorError: nothing handles url
            ExtractionError: the upstream fetch or decode failed
        """
        if not self.is_ready:
            raise RuntimeError("Embed service not started")
        return await self.registry.extract(self.state, url)


# Global service instance
embed_service = EmbedService()
