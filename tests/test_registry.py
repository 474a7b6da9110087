# -*- coding: utf-8 -*-
"""
Tests for the extractor registry.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from embed_extract.config import MissingExtractorField, Settings
from embed_extract.extractors import (
    EXTRACTOR_FACTORIES,
    ExtractorRegistry,
    NoExtractorError,
)
from embed_extract.models import Embed, EmbedWithExpire


class FakeExtractor:
    """Extractor accepting every URL whose path contains a marker."""

    def __init__(self, name: str, marker: str):
        self.name = name
        self.marker = marker
        self.extract = AsyncMock(
            return_value=EmbedWithExpire(embed=Embed(title=name), max_age=1)
        )

    def matches(self, url):
        return self.marker in url.path


class TestRegistryFromSettings:
    """Tests for building the registry."""

    def test_default_order(self):
        """Registry order follows the factory list."""
        registry = ExtractorRegistry.from_settings(
            Settings(EXTRACTORS={"furaffinity": {"a": "x", "b": "y"}})
        )
        assert registry.names == ["deviantart", "furaffinity"]
        assert len(EXTRACTOR_FACTORIES) == 2

    def test_absent_section_disables_extractor(self, settings):
        registry = ExtractorRegistry.from_settings(settings)
        assert registry.names == ["deviantart"]

    def test_invalid_section_fails(self):
        with pytest.raises(MissingExtractorField):
            ExtractorRegistry.from_settings(Settings(EXTRACTORS={"furaffinity": {}}))

    def test_custom_factories(self, settings):
        factories = [
            lambda config: FakeExtractor("one", "/a"),
            lambda config: None,
            lambda config: FakeExtractor("two", "/b"),
        ]
        registry = ExtractorRegistry.from_settings(settings, factories)
        assert registry.names == ["one", "two"]


class TestFind:
    """Tests for URL dispatch."""

    def test_first_match_wins(self):
        first = FakeExtractor("first", "/art/")
        second = FakeExtractor("second", "/art/")
        registry = ExtractorRegistry([first, second])

        assert registry.find("https://example.com/art/1") is first

    def test_order_is_priority(self):
        generic = FakeExtractor("generic", "/")
        specific = FakeExtractor("specific", "/art/")

        assert ExtractorRegistry([specific, generic]).find("https://e.com/art/1") is specific
        assert ExtractorRegistry([generic, specific]).find("https://e.com/art/1") is generic

    def test_no_match(self):
        registry = ExtractorRegistry([FakeExtractor("one", "/art/")])
        assert registry.find("https://example.com/gallery") is None

    @pytest.mark.parametrize(
        "url",
        ["ftp://example.com/art/1", "mailto:someone@example.com", "/art/1", "https://example.com:bad/art/"],
    )
    def test_rejects_unusable_urls(self, url):
        registry = ExtractorRegistry([FakeExtractor("any", "")])
        assert registry.find(url) is None

    def test_builtin_dispatch(self, fa_settings):
        registry = ExtractorRegistry.from_settings(fa_settings)

        assert registry.find("https://www.deviantart.com/a/art/b-1").name == "deviantart"
        assert registry.find("https://www.furaffinity.net/view/1/").name == "furaffinity"
        assert registry.find("https://example.com/art/x") is None


@pytest.mark.asyncio
class TestExtract:
    """Tests for registry extraction."""

    async def test_calls_matching_extractor(self):
        extractor = FakeExtractor("one", "/art/")
        registry = ExtractorRegistry([extractor])
        state = MagicMock()

        result = await registry.extract(state, "https://example.com/art/1?x=y")

        assert result.embed.title == "one"
        called_state, called_url = extractor.extract.await_args.args
        assert called_state is state
        assert called_url.path == "/art/1"

    async def test_no_extractor(self):
        registry = ExtractorRegistry([FakeExtractor("one", "/art/")])

        with pytest.raises(NoExtractorError) as exc_info:
            await registry.extract(MagicMock(), "https://example.com/nope")
        assert exc_info.value.url == "https://example.com/nope"
