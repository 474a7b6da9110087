# -*- coding: utf-8 -*-
"""
Media resolution hook.

Sizing, hashing and proxying of media belong to a separate image service.
The resolver here is the seam extractors await before finalizing: the
default implementation only checks that every media URL is an absolute
http(s) URL and drops the ones that are not.
"""
import logging
from urllib.parse import urlsplit

from .models import Embed, EmbedMedia

logger = logging.getLogger(__name__)


def is_fetchable(media: EmbedMedia | None) -> bool:
    if media is None:
        return False
    try:
        parts = urlsplit(media.url)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


class MediaResolver:
    """Validates (and in subclasses, enriches) media references of an embed."""

    async def resolve(self, embed: Embed) -> None:
        dropped = 0

        for name in ("thumb", "video", "audio"):
            media = getattr(embed, name)
            if media is not None and not is_fetchable(media):
                setattr(embed, name, None)
                dropped += 1

        kept = [media for media in embed.imgs if is_fetchable(media)]
        dropped += len(embed.imgs) - len(kept)
        embed.imgs = kept

        if embed.author is not None and embed.author.icon is not None:
            if not is_fetchable(embed.author.icon):
                embed.author.icon = None
                dropped += 1

        if dropped:
            logger.debug("Dropped unusable media", extra={"dropped": dropped})
