# -*- coding: utf-8 -*-
"""
FurAffinity extractor.

FurAffinity has no API, so submission pages are fetched with a logged-in
session cookie and scraped. The page structure relied on:

    div.submission-area          primary media (class submission-writing for stories)
    div.submission-description   description
    div.submission-title         title, followed by an a[href^="/user/"] author link
    img.submission-user-icon     author avatar
    span.rating-box              rating, class "general" for all-ages
    span.tags > a                content tags

Any of these may be missing; the matching field is then left empty.
"""
import logging
from urllib.parse import SplitResult, urljoin

from bs4 import BeautifulSoup

from ..config import (
    InvalidExtractorField,
    InvalidUserAgent,
    MissingExtractorField,
    Settings,
    is_valid_header_value,
)
from ..finalize import DEFAULT_MAX_AGE, finalize_embed
from ..html_extract import (
    MediaKind,
    accumulate_text,
    aggregate_description,
    fix_relative_scheme,
    find_link_sibling,
    find_primary_media,
    has_class,
    is_text,
)
from ..models import Embed, EmbedAuthor, EmbedMedia, EmbedProvider, EmbedWithExpire
from ..safety import classify_rating, classify_tags
from ..util import canonicalize_url
from .base import ServiceState, fetch_text

logger = logging.getLogger(__name__)

SITE_URL = "https://www.furaffinity.net"
HOSTS = frozenset({"furaffinity.net", "www.furaffinity.net"})
SUBMISSION_PREFIXES = ("/view/", "/full/")
USER_PREFIX = "/user/"

COLOR = 0xADD8F5

PROVIDER = EmbedProvider(
    name="FurAffinity",
    url=SITE_URL,
    icon=EmbedMedia(url=f"{SITE_URL}/themes/beta/img/favicon.ico"),
)

USER_AGENT_KEY = "%browser"


def parse_html(html: str, url: SplitResult) -> Embed:
    """Build an embed from a submission page."""
    doc = BeautifulSoup(html, "lxml")
    embed = Embed()

    area = doc.select_one("div.submission-area")
    if area is not None:
        primary = find_primary_media(area)
        if primary is not None:
            kind, media = primary
            if kind is MediaKind.IMAGE:
                if has_class(area, "submission-writing"):
                    embed.thumb = media
                else:
                    embed.imgs.append(media)
            elif kind is MediaKind.VIDEO:
                embed.video = media
            elif kind is MediaKind.AUDIO:
                embed.audio = media

    node = doc.select_one("div.submission-description")
    if node is not None:
        embed.description = aggregate_description(node)

    author = EmbedAuthor()

    node = doc.select_one("div.submission-title")
    if node is not None:
        embed.title = accumulate_text(node).strip()

        link = find_link_sibling(node, USER_PREFIX)
        if link is not None:
            author.url = urljoin(SITE_URL, link["href"])
            author.name = accumulate_text(link).strip()

    node = doc.select_one("img.submission-user-icon")
    if node is not None and node.get("src"):
        author.icon = EmbedMedia(url=fix_relative_scheme(node["src"]))

    if author.name or author.url or author.icon:
        embed.author = author

    node = doc.select_one("span.rating-box")
    if node is not None:
        embed.flags = classify_rating(node.get("class") or [], embed.flags)

    # ratings are often wrong, so tags are checked too
    embed.flags = classify_tags(_iter_tags(doc), embed.flags)

    embed.url = canonicalize_url(url)
    embed.color = COLOR
    embed.provider = PROVIDER.model_copy(deep=True)

    return embed


def _iter_tags(doc: BeautifulSoup):
    for link in doc.select("span.tags > a"):
        # first text node, even when wrapped in inline markup
        text = next((node for node in link.descendants if is_text(node)), None)
        if text is not None:
            yield str(text)


class FurAffinityExtractor:
    """Submission pages, scraped with a session cookie."""

    name = "furaffinity"

    def __init__(self, cookie: str, user_agent: str):
        self.cookie = cookie
        self.user_agent = user_agent

    def matches(self, url: SplitResult) -> bool:
        return url.hostname in HOSTS and url.path.startswith(SUBMISSION_PREFIXES)

    async def extract(self, state: ServiceState, url: SplitResult) -> EmbedWithExpire:
        page_url = url.geturl()

        logger.debug("Fetching submission page", extra={"url": page_url[:80]})

        html = await fetch_text(
            state.client,
            page_url,
            headers={"Cookie": self.cookie, "User-Agent": self.user_agent},
        )

        embed = parse_html(html, url)

        await state.media.resolve(embed)

        return finalize_embed(
            embed,
            None,
            DEFAULT_MAX_AGE,
            max_images=state.settings.MAX_EMBED_IMAGES,
        )


def create(settings: Settings) -> FurAffinityExtractor | None:
    """
    Build the extractor from the "furaffinity" section.

    Returns None when the section is absent.

    Raises:
        MissingExtractorField: a or b cookie value missing
        InvalidUserAgent: the %browser user agent is not configured or invalid
        InvalidExtractorField: the cookie values cannot form a header
    """
    section = settings.EXTRACTORS.get("furaffinity")
    if section is None:
        return None

    a = section.get("a")
    if a is None:
        raise MissingExtractorField("furaffinity.a")

    b = section.get("b")
    if b is None:
        raise MissingExtractorField("furaffinity.b")

    user_agent = settings.USER_AGENTS.get(USER_AGENT_KEY)
    if user_agent is None:
        raise InvalidUserAgent(f"{USER_AGENT_KEY} not found")
    if not is_valid_header_value(user_agent):
        raise InvalidUserAgent(f"{USER_AGENT_KEY} is not a valid header value")

    cookie = f"b={b}; a={a}"
    if not is_valid_header_value(cookie):
        raise InvalidExtractorField("furaffinity.(a|b)")

    return FurAffinityExtractor(cookie=cookie, user_agent=user_agent)
