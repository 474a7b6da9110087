# -*- coding: utf-8 -*-
"""
URL and text helpers shared by the extractors.
"""
import re
from typing import Iterable
from urllib.parse import SplitResult, urlsplit

DEFAULT_PORTS = {"http": 80, "https": 443}

# Words for title casing: acronyms, capitalized or lowercase runs (camelCase splits)
_WORD_PATTERN = re.compile(r"[0-9A-Z]+(?![^\W_A-Z])|[0-9]*[A-Z]?[^\W_A-Z]+|[^\W_]+")


def _split(url: str | SplitResult) -> SplitResult:
    return urlsplit(url) if isinstance(url, str) else url


def canonicalize_url(url: str | SplitResult) -> str:
    """
    Reduce a URL to its origin and path.

    Query string, fragment and credentials are dropped, the host is
    lowercased and default ports are omitted. An empty path becomes "/".
    """
    parts = _split(url)
    scheme = parts.scheme.lower()
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"

    port = parts.port
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        host = f"{host}:{port}"

    return f"{scheme}://{host}{parts.path or '/'}"


def host_matches(host: str | None, domain: str) -> bool:
    """Check whether host is domain itself or one of its subdomains."""
    if not host:
        return False
    host = host.lower().rstrip(".")
    return host == domain or host.endswith("." + domain)


def has_path(parts: SplitResult) -> bool:
    """Check for a path with something besides slashes."""
    return bool(parts.path.strip("/"))


def title_case(text: str) -> str:
    """
    Title-case a tag: split into words and capitalize each one.

    >>> title_case("digital_art")
    'Digital Art'
    >>> title_case("fanArt")
    'Fan Art'
    """
    return " ".join(word.capitalize() for word in _WORD_PATTERN.findall(text))


def format_list(items: Iterable[str]) -> str:
    """Join items into a comma separated list."""
    return ", ".join(items)
