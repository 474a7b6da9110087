# -*- coding: utf-8 -*-
"""
Tests for the Pydantic models.
"""
from embed_extract.models import (
    Embed,
    EmbedFlags,
    EmbedMedia,
    EmbedRequest,
    EmbedResponse,
    EmbedWithExpire,
)


class TestEmbed:
    """Tests for the Embed model."""

    def test_default_values(self):
        """A fresh embed is empty."""
        embed = Embed()

        assert embed.title is None
        assert embed.author is None
        assert embed.provider.name is None
        assert embed.imgs == []
        assert embed.flags == EmbedFlags.NONE

    def test_instances_do_not_share_state(self):
        """Mutable defaults are per instance."""
        first, second = Embed(), Embed()
        first.imgs.append(EmbedMedia(url="https://a.example/1.png"))
        first.provider.name = "Site"

        assert second.imgs == []
        assert second.provider.name is None

    def test_has_fullsize_media(self):
        embed = Embed(thumb=EmbedMedia(url="https://a.example/t.png"))
        assert embed.has_fullsize_media() is False

        embed.audio = EmbedMedia(url="https://a.example/a.mp3")
        assert embed.has_fullsize_media() is True

    def test_flags_accumulate(self):
        embed = Embed()
        embed.flags |= EmbedFlags.ADULT
        embed.flags |= EmbedFlags.GRAPHIC

        assert EmbedFlags.ADULT in embed.flags
        assert EmbedFlags.GRAPHIC in embed.flags

    def test_serialization_excludes_html(self):
        """Inline HTML never reaches the serialized embed."""
        embed = Embed(title="T", html="<iframe></iframe>", flags=EmbedFlags.ADULT)
        data = embed.model_dump(mode="json")

        assert "html" not in data
        assert data["flags"] == 1
        assert data["title"] == "T"


class TestApiModels:
    """Tests for request/response models."""

    def test_embed_request_valid(self):
        req = EmbedRequest(url="https://www.deviantart.com/a/art/b-1")  # type: ignore[arg-type]
        assert str(req.url) == "https://www.deviantart.com/a/art/b-1"

    def test_embed_response_failure(self):
        resp = EmbedResponse(url="https://example.com", success=False, error="boom")
        assert resp.embed is None
        assert resp.error == "boom"

    def test_embed_with_expire(self):
        result = EmbedWithExpire(embed=Embed(title="T"), max_age=60)
        assert result.max_age == 60
        assert result.embed.title == "T"
