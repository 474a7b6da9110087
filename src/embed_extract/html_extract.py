# -*- coding: utf-8 -*-
"""
HTML extraction engine.

Tree-walking routines that pull media, text and links out of markup that was
never meant to be machine-read. Everything here is synchronous and works on a
parsed BeautifulSoup tree; site handlers decide which subtrees to feed in.

Traversal is a depth-first, document-order visit of every node (the root
included). The visitor returns a Visit signal to keep going, skip the
children of the current node, or stop the walk entirely.
"""
from enum import Enum
from typing import Callable

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .models import EmbedMedia


class Visit(Enum):
    """Traversal signal returned by a visitor."""

    CONTINUE = "continue"
    SKIP = "skip"
    STOP = "stop"


class MediaKind(Enum):
    """Kind of the primary media of a submission."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"


MEDIA_TAGS = {
    "img": MediaKind.IMAGE,
    "video": MediaKind.VIDEO,
    "audio": MediaKind.AUDIO,
}

# Plugin embeds we cannot represent; meeting one first means "no media"
UNSUPPORTED_MEDIA_TAGS = frozenset({"object", "embed"})


def is_text(node: PageElement | None) -> bool:
    """True for text nodes, false for comments, doctypes, CDATA and the like."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def has_class(node: Tag, name: str) -> bool:
    """Case-insensitive CSS class check."""
    name = name.casefold()
    return any(cls.casefold() == name for cls in node.get("class") or ())


def walk(root: PageElement, visit: Callable[[PageElement], Visit]) -> None:
    """Visit root and its descendants depth-first in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        signal = visit(node)

        if signal is Visit.STOP:
            return
        if signal is Visit.SKIP or not isinstance(node, Tag):
            continue

        stack.extend(reversed(node.contents))


def fix_relative_scheme(url: str) -> str:
    """Turn a protocol-relative URL ("//host/path") into an https one."""
    if url.startswith("//"):
        return f"https:{url}"
    return url


def trim_nl(text: str) -> str:
    return text.strip("\r\n")


def accumulate_text(node: PageElement) -> str:
    """Concatenate every text node below node, unmodified."""
    chunks: list[str] = []

    def visit(current: PageElement) -> Visit:
        if is_text(current):
            chunks.append(str(current))
        return Visit.CONTINUE

    walk(node, visit)
    return "".join(chunks)


def find_primary_media(area: Tag) -> tuple[MediaKind, EmbedMedia] | None:
    """
    Find the media that represents a submission.

    The first img/video/audio element in document order decides both the
    kind and the source. An unsupported embed (object/embed) reached first
    means there is no usable media, even if a supported element follows.

    Returns:
        (kind, media) or None if nothing usable was found.
    """
    found: list[tuple[MediaKind, EmbedMedia]] = []

    def visit(node: PageElement) -> Visit:
        if not isinstance(node, Tag):
            return Visit.CONTINUE
        if node.name in UNSUPPORTED_MEDIA_TAGS:
            return Visit.STOP

        kind = MEDIA_TAGS.get(node.name)
        if kind is None:
            return Visit.CONTINUE

        src = node.get("src")
        if not src and kind is not MediaKind.IMAGE:
            source = node.find("source", src=True)
            src = source.get("src") if source is not None else None

        if src:
            media = EmbedMedia(url=fix_relative_scheme(src), description=node.get("alt"))
            found.append((kind, media))

        return Visit.STOP

    walk(area, visit)
    return found[0] if found else None


def aggregate_description(node: Tag) -> str:
    """
    Rebuild readable text from a description subtree.

    - text nodes: surrounding newlines and leading whitespace removed
    - <br>: a newline, never leaving more than one blank line in a row
    - <img alt>: the alt text, unless the very next sibling is a text node
      repeating it
    """
    description = ""

    def visit(current: PageElement) -> Visit:
        nonlocal description

        if is_text(current):
            description += trim_nl(str(current)).lstrip()
        elif isinstance(current, Tag):
            if current.name == "br":
                if not description.endswith("\n\n"):
                    description += "\n"
            elif current.name == "img":
                alt = current.get("alt")
                if alt is not None and not _repeats_alt(current, alt):
                    description += alt

        return Visit.CONTINUE

    walk(node, visit)
    return description.rstrip()


def _repeats_alt(img: Tag, alt: str) -> bool:
    # only the immediate sibling is checked
    sibling = img.next_sibling
    return is_text(sibling) and str(sibling).strip() == alt


def find_link_sibling(node: Tag, prefix: str) -> Tag | None:
    """First following sibling element whose href starts with prefix."""
    for sibling in node.next_siblings:
        if not isinstance(sibling, Tag):
            continue
        href = sibling.get("href")
        if href and href.startswith(prefix):
            return sibling
    return None
