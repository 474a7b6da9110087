# -*- coding: utf-8 -*-
"""
Handler-agnostic finishing steps applied to every embed.
"""
import logging

from .models import Embed, EmbedWithExpire
from .util import canonicalize_url

logger = logging.getLogger(__name__)

# 4 hours
DEFAULT_MAX_AGE = 60 * 60 * 4

MAX_COLOR = 0xFFFFFF


def finalize_embed(
        embed: Embed,
        max_age: int | None,
        default_max_age: int = DEFAULT_MAX_AGE,
        *,
        max_images: int | None = None,
) -> EmbedWithExpire:
    """
    Apply defaults and limits, and attach the expiry hint.

    Flags and resolved media items are left untouched.

    Args:
        embed: Embed built by an extractor
        max_age: Expiry supplied by the handler or upstream, if any
        default_max_age: Expiry used when max_age is None
        max_images: Keep at most this many gallery images

    Returns:
        EmbedWithExpire with max_age in seconds
    """
    if embed.url is not None:
        embed.url = canonicalize_url(embed.url)

    if embed.color is not None:
        embed.color = min(max(embed.color, 0), MAX_COLOR)

    # inline HTML from upstream is never forwarded
    embed.html = None

    if max_images is not None and 0 <= max_images < len(embed.imgs):
        logger.debug(
            "Truncating gallery",
            extra={"images": len(embed.imgs), "max_images": max_images},
        )
        del embed.imgs[max_images:]

    expires = max_age if max_age is not None else default_max_age

    return EmbedWithExpire(embed=embed, max_age=max(expires, 0))
