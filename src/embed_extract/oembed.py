# -*- coding: utf-8 -*-
"""
oEmbed record and its mapping onto the canonical embed.

https://oembed.com/
"""
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, field_validator

from .models import Embed, EmbedAuthor, EmbedMedia


class OEmbed(BaseModel):
    """Standard oEmbed response fields. Unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    type: str = "link"
    version: str | None = None
    title: str | None = None
    author_name: str | None = None
    author_url: str | None = None
    provider_name: str | None = None
    provider_url: str | None = None
    cache_age: int | None = None
    thumbnail_url: str | None = None
    thumbnail_width: float | None = None
    thumbnail_height: float | None = None

    # photo
    url: str | None = None

    # video/rich
    html: str | None = None

    width: float | None = None
    height: float | None = None

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_str(cls, value):
        # some providers send 1.0 as a number
        return str(value) if isinstance(value, (int, float)) else value


@dataclass
class OEmbedExtra:
    """Hints from an oEmbed record that are not part of the embed itself."""

    max_age: int | None = None


def parse_oembed_to_embed(embed: Embed, oembed: OEmbed) -> OEmbedExtra:
    """
    Copy standard oEmbed fields onto an embed.

    Fields already set on the embed are only replaced when the oEmbed record
    carries a value for them.
    """
    if oembed.title:
        embed.title = oembed.title

    if oembed.author_name:
        embed.author = EmbedAuthor(name=oembed.author_name, url=oembed.author_url)

    if oembed.provider_name:
        embed.provider.name = oembed.provider_name
    if oembed.provider_url:
        embed.provider.url = oembed.provider_url

    if oembed.thumbnail_url:
        embed.thumb = EmbedMedia(url=oembed.thumbnail_url)

    if oembed.type == "photo" and oembed.url:
        embed.imgs.append(EmbedMedia(url=oembed.url, description=oembed.title))
    elif oembed.type in ("video", "rich") and oembed.html:
        embed.html = oembed.html

    max_age = oembed.cache_age
    if max_age is not None and max_age < 0:
        max_age = None

    return OEmbedExtra(max_age=max_age)
