# -*- coding: utf-8 -*-
"""
Site extractors and the registry that dispatches URLs to them.

Factories are tried in the order listed; the first extractor whose
predicate accepts a URL handles it. Adding a site means adding a module
with a `create(settings)` factory and listing it here.
"""
import logging
from typing import Callable, Iterable
from urllib.parse import SplitResult, urlsplit

from ..config import Settings
from ..models import EmbedWithExpire
from . import deviantart, furaffinity
from .base import (
    ExtractionError,
    Extractor,
    ServiceState,
    UpstreamDecodeError,
    UpstreamFetchError,
    UpstreamStatusError,
)

logger = logging.getLogger(__name__)

ExtractorFactory = Callable[[Settings], "Extractor | None"]

# Registration order is match priority
EXTRACTOR_FACTORIES: tuple[ExtractorFactory, ...] = (
    deviantart.create,
    furaffinity.create,
)


def _parse(url: str) -> SplitResult | None:
    try:
        return urlsplit(url)
    except ValueError:
        return None


class NoExtractorError(Exception):
    """No extractor handles the URL."""

    def __init__(self, url: str):
        super().__init__(f"No extractor available for {url}")
        self.url = url


class ExtractorRegistry:
    """Ordered, read-only collection of extractors."""

    def __init__(self, extractors: Iterable[Extractor]):
        self._extractors = tuple(extractors)

    @classmethod
    def from_settings(
            cls,
            settings: Settings,
            factories: Iterable[ExtractorFactory] = EXTRACTOR_FACTORIES,
    ) -> "ExtractorRegistry":
        """
        Build every extractor from configuration.

        Raises:
            ConfigError: an extractor section is present but invalid
        """
        extractors = []
        for factory in factories:
            extractor = factory(settings)
            if extractor is None:
                logger.info("Extractor disabled", extra={"factory": factory.__module__})
                continue
            extractors.append(extractor)

        logger.info(
            "Extractors ready",
            extra={"extractors": [extractor.name for extractor in extractors]},
        )
        return cls(extractors)

    @property
    def names(self) -> list[str]:
        return [extractor.name for extractor in self._extractors]

    def __len__(self) -> int:
        return len(self._extractors)

    def find(self, url: str | SplitResult) -> Extractor | None:
        """First extractor accepting url, or None."""
        parts = _parse(url) if isinstance(url, str) else url
        if parts is None or parts.scheme not in ("http", "https") or not parts.hostname:
            return None
        try:
            parts.port
        except ValueError:
            return None

        for extractor in self._extractors:
            if extractor.matches(parts):
                return extractor
        return None

    async def extract(self, state: ServiceState, url: str) -> EmbedWithExpire:
        """
        Build the embed for url.

        Raises:
            NoExtractorError: nothing handles url
            ExtractionError: the upstream fetch or decode failed
        """
        parts = _parse(url)
        extractor = self.find(parts) if parts is not None else None
        if extractor is None:
            raise NoExtractorError(url)

        logger.info("Extracting", extra={"extractor": extractor.name, "url": url[:80]})
        return await extractor.extract(state, parts)


__all__ = [
    "EXTRACTOR_FACTORIES",
    "ExtractionError",
    "Extractor",
    "ExtractorRegistry",
    "NoExtractorError",
    "ServiceState",
    "UpstreamDecodeError",
    "UpstreamFetchError",
    "UpstreamStatusError",
]
