# -*- coding: utf-8 -*-
"""
Tests for the finalizer and the media resolver.
"""
import pytest
from pydantic import ValidationError

from embed_extract.config import Settings
from embed_extract.finalize import DEFAULT_MAX_AGE, finalize_embed
from embed_extract.media import MediaResolver
from embed_extract.models import Embed, EmbedAuthor, EmbedFlags, EmbedMedia


def media(url: str) -> EmbedMedia:
    return EmbedMedia(url=url)


class TestFinalizeEmbed:
    """Tests for finalize_embed."""

    def test_default_expiry(self):
        result = finalize_embed(Embed(), None)
        assert result.max_age == DEFAULT_MAX_AGE == 4 * 60 * 60

    def test_handler_expiry_wins(self):
        assert finalize_embed(Embed(), 600).max_age == 600
        assert finalize_embed(Embed(), 0).max_age == 0

    def test_custom_default(self):
        assert finalize_embed(Embed(), None, 60).max_age == 60

    def test_url_canonicalized(self):
        embed = Embed(url="https://Example.com/a?b=c#d")
        assert finalize_embed(embed, None).embed.url == "https://example.com/a"

    def test_color_clamped(self):
        assert finalize_embed(Embed(color=0x1FFFFFF), None).embed.color == 0xFFFFFF
        assert finalize_embed(Embed(color=-1), None).embed.color == 0
        assert finalize_embed(Embed(color=0x05CC47), None).embed.color == 0x05CC47

    def test_html_stripped(self):
        assert finalize_embed(Embed(html="<script></script>"), None).embed.html is None

    def test_images_limited(self):
        embed = Embed(imgs=[media(f"https://a.example/{i}.png") for i in range(6)])
        result = finalize_embed(embed, None, max_images=4)
        assert [m.url for m in result.embed.imgs] == [
            f"https://a.example/{i}.png" for i in range(4)
        ]

    def test_negative_image_limit_ignored(self):
        embed = Embed(imgs=[media(f"https://a.example/{i}.png") for i in range(3)])
        result = finalize_embed(embed, None, max_images=-1)
        assert len(result.embed.imgs) == 3

    def test_negative_image_limit_rejected_by_settings(self):
        with pytest.raises(ValidationError):
            Settings(MAX_EMBED_IMAGES=-1)

    def test_flags_and_media_untouched(self):
        thumb = media("https://a.example/t.png")
        embed = Embed(thumb=thumb, flags=EmbedFlags.ADULT | EmbedFlags.GRAPHIC)

        result = finalize_embed(embed, None, max_images=4)

        assert result.embed.flags == EmbedFlags.ADULT | EmbedFlags.GRAPHIC
        assert result.embed.thumb == thumb


@pytest.mark.asyncio
class TestMediaResolver:
    """Tests for the default media resolver."""

    async def test_keeps_absolute_urls(self):
        embed = Embed(
            thumb=media("https://a.example/t.png"),
            imgs=[media("https://a.example/1.png")],
            author=EmbedAuthor(name="a", icon=media("https://a.example/i.png")),
        )
        await MediaResolver().resolve(embed)

        assert embed.thumb is not None
        assert len(embed.imgs) == 1
        assert embed.author.icon is not None

    async def test_drops_unusable_urls(self):
        embed = Embed(
            video=media("/relative/clip.mp4"),
            imgs=[media("javascript:alert(1)"), media("https://a.example/1.png")],
            author=EmbedAuthor(name="a", icon=media("data:image/png;base64,AAAA")),
        )
        await MediaResolver().resolve(embed)

        assert embed.video is None
        assert [m.url for m in embed.imgs] == ["https://a.example/1.png"]
        assert embed.author.icon is None
