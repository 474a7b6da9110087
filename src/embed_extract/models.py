# -*- coding: utf-8 -*-
"""
Pydantic data models for embeds and the API.
"""
from enum import IntFlag

from pydantic import BaseModel, Field, HttpUrl


class EmbedFlags(IntFlag):
    """Content safety flags. Flags are only ever added, never cleared."""

    NONE = 0
    ADULT = 1 << 0
    GRAPHIC = 1 << 1
    SPOILER = 1 << 2


class EmbedMedia(BaseModel):
    """A media reference with optional alt text."""

    url: str
    description: str | None = None


class EmbedAuthor(BaseModel):
    """Author of the embedded content."""

    name: str = ""
    url: str | None = None
    icon: EmbedMedia | None = None


class EmbedProvider(BaseModel):
    """Site the embedded content comes from."""

    name: str | None = None
    url: str | None = None
    icon: EmbedMedia | None = None


class Embed(BaseModel):
    """Canonical rich preview record."""

    title: str | None = None
    description: str | None = None
    author: EmbedAuthor | None = None
    provider: EmbedProvider = Field(default_factory=EmbedProvider)
    thumb: EmbedMedia | None = None
    imgs: list[EmbedMedia] = Field(default_factory=list)
    video: EmbedMedia | None = None
    audio: EmbedMedia | None = None
    # Inline HTML supplied by oEmbed, never returned to callers
    html: str | None = Field(default=None, exclude=True)
    color: int | None = None
    url: str | None = None
    flags: EmbedFlags = EmbedFlags.NONE

    def has_fullsize_media(self) -> bool:
        return bool(self.imgs) or self.video is not None or self.audio is not None


class EmbedWithExpire(BaseModel):
    """An embed with the number of seconds it may be cached for."""

    embed: Embed
    max_age: int


class EmbedRequest(BaseModel):
    """Embed request schema."""

    url: HttpUrl = Field(..., description="URL to build an embed for")


class EmbedResponse(BaseModel):
    """Embed response schema."""

    url: str
    success: bool
    embed: Embed | None = None
    max_age: int | None = None
    extractor: str | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    ready: bool
    version: str
    extractors: list[str] = Field(default_factory=list)
