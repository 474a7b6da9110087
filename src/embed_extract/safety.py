# -*- coding: utf-8 -*-
"""
Heuristic content safety classification.

Upstream sites are lax about enforcing their own ratings, so explicit ratings
are combined with keyword matching over content tags. The keyword lists are
best effort and deliberately narrow: a tag must match a keyword exactly.
"""
from typing import Iterable

from .models import EmbedFlags


class TagSet:
    """Immutable case-insensitive set of keywords."""

    __slots__ = ("_tags",)

    def __init__(self, tags: Iterable[str]):
        self._tags = frozenset(tag.casefold() for tag in tags)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and tag.strip().casefold() in self._tags

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TagSet({sorted(self._tags)!r})"


# fmt: off
ADULT_TAGS = TagSet([
    "nsfw", "sex", "horny", "r18", "fetish", "hentai", "yiff",
    "rape", "necrophilia", "vore", "hyper", "clit",
    "erection", "penis", "cum", "pussy", "dick",
    "porn", "ssbbw", "immobility", "ussbbw",
])

GRAPHIC_TAGS = TagSet(["gore", "snuff", "necrophilia"])
# fmt: on


def classify_tags(
        tags: Iterable[str],
        flags: EmbedFlags = EmbedFlags.NONE,
) -> EmbedFlags:
    """
    Add ADULT/GRAPHIC to flags based on content tags.

    Stops reading tags as soon as both flags are set. Flags already present
    are kept.
    """
    both = EmbedFlags.ADULT | EmbedFlags.GRAPHIC
    if both in flags:
        return flags

    for tag in tags:
        if EmbedFlags.ADULT not in flags and tag in ADULT_TAGS:
            flags |= EmbedFlags.ADULT

        if EmbedFlags.GRAPHIC not in flags and tag in GRAPHIC_TAGS:
            flags |= EmbedFlags.GRAPHIC

        if both in flags:
            break

    return flags


def classify_rating(
        labels: Iterable[str] | None,
        flags: EmbedFlags = EmbedFlags.NONE,
        general: str = "general",
) -> EmbedFlags:
    """
    Set ADULT when a rating element exists and is not the all-ages one.

    Args:
        labels: Labels (e.g. CSS classes) of the rating element, or None if
            the page has no rating element.
        flags: Flags collected so far.
        general: Label marking all-ages content.
    """
    if labels is None:
        return flags
    if general not in {label.casefold() for label in labels}:
        flags |= EmbedFlags.ADULT
    return flags
