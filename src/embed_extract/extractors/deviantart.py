# -*- coding: utf-8 -*-
"""
DeviantArt extractor, backed by the public oEmbed endpoint.

https://www.deviantart.com/developers/oembed
"""
import logging
from urllib.parse import SplitResult

from ..config import Settings
from ..finalize import DEFAULT_MAX_AGE, finalize_embed
from ..models import Embed, EmbedFlags, EmbedMedia, EmbedWithExpire
from ..oembed import OEmbed, parse_oembed_to_embed
from ..util import canonicalize_url, format_list, has_path, host_matches, title_case
from .base import ServiceState, fetch_json

logger = logging.getLogger(__name__)

OEMBED_ENDPOINT = "https://backend.deviantart.com/oembed"

PROVIDER_NAME = "DeviantArt"
PROVIDER_URL = "https://www.deviantart.com"
PROVIDER_ICON = "https://st.deviantart.net/eclipse/icons/da_favicon_v2.ico"
COLOR = 0x05CC47

# short link hosts
SHORT_HOSTS = frozenset({"sta.sh", "fav.me"})

MAX_TAGS = 16


class DeviantArtOEmbed(OEmbed):
    """DeviantArt adds a safety label and a comma separated tag list."""

    safety: str = ""
    tags: str = ""


def format_tags(tags: str, limit: int = MAX_TAGS) -> str | None:
    """
    Turn "one, two,three" into "One, Two, Three".

    At most `limit` tags are listed; a trailing "More" marks that some
    were left out.
    """
    # entries without a single word character are dropped
    items = [title_case(tag) for tag in tags.split(",")]
    items = [tag for tag in items if tag]
    if not items:
        return None

    listed = items[:limit]
    if len(items) > limit:
        listed.append(title_case("more"))

    return format_list(listed)


class DeviantArtExtractor:
    """Art pages and short links, resolved through oEmbed."""

    name = "deviantart"

    def matches(self, url: SplitResult) -> bool:
        host = (url.hostname or "").rstrip(".")
        if host_matches(host, "deviantart.com"):
            return "/art/" in url.path
        return host in SHORT_HOSTS and has_path(url)

    async def extract(self, state: ServiceState, url: SplitResult) -> EmbedWithExpire:
        canonical_url = canonicalize_url(url)

        logger.debug("Fetching oEmbed", extra={"url": canonical_url[:80]})

        oembed = await fetch_json(
            state.client,
            OEMBED_ENDPOINT,
            DeviantArtOEmbed,
            params={"url": canonical_url},
        )

        embed = Embed()

        extra = parse_oembed_to_embed(embed, oembed)

        if oembed.safety == "adult":
            embed.flags |= EmbedFlags.ADULT

        if embed.description is None and oembed.tags:
            embed.description = format_tags(oembed.tags)

        # don't allow HTML embeds
        embed.html = None

        embed.provider.name = embed.provider.name or PROVIDER_NAME
        embed.provider.url = embed.provider.url or PROVIDER_URL
        embed.provider.icon = EmbedMedia(url=PROVIDER_ICON)

        # the thumbnail is a downscaled copy of the full image
        if embed.has_fullsize_media():
            embed.thumb = None

        embed.color = COLOR
        embed.url = canonical_url

        return finalize_embed(
            embed,
            extra.max_age,
            DEFAULT_MAX_AGE,
            max_images=state.settings.MAX_EMBED_IMAGES,
        )


def create(settings: Settings) -> DeviantArtExtractor:
    """DeviantArt needs no configuration."""
    return DeviantArtExtractor()
