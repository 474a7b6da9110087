#!/usr/bin/env python3
"""
Manual embed check - prints the embed built for a URL.

Uses the EmbedService with the extractors enabled by the current
environment (.env included).

Usage:
    python scripts/embed_url.py URL [--save]

Example:
    python scripts/embed_url.py https://www.deviantart.com/artist/art/Sunset-123
    python scripts/embed_url.py https://www.furaffinity.net/view/123/ --save
"""
import asyncio
import sys
from pathlib import Path
from urllib.parse import urlparse

from embed_extract.extractors import ExtractionError, NoExtractorError
from embed_extract.models import EmbedFlags
from embed_extract.service import embed_service


async def embed_url(url: str, save: bool = False) -> None:
    """Build the embed for a URL and print it as JSON."""
    print(f"\n{'=' * 60}")
    print(f"Embedding: {url}")
    print(f"{'=' * 60}\n")

    await embed_service.start()
    try:
        print(f"Extractor: {embed_service.extractor_for(url) or 'none'}")
        result = await embed_service.embed(url)
    except NoExtractorError as e:
        print(f"No extractor: {e}")
        return
    except ExtractionError as e:
        print(f"Extraction failed: {e}")
        return
    finally:
        await embed_service.stop()

    flags = ", ".join(
        flag.name for flag in EmbedFlags if flag and flag in result.embed.flags
    )
    print(f"Max age: {result.max_age}s")
    print(f"Flags: {flags or 'none'}")

    output = result.embed.model_dump_json(indent=2, exclude_none=True)

    if save:
        parsed = urlparse(url)
        path_slug = parsed.path.strip("/").replace("/", "_") or "index"
        samples_dir = Path("tests/samples")
        samples_dir.mkdir(parents=True, exist_ok=True)
        filepath = samples_dir / f"{parsed.netloc}_{path_slug}.json"
        filepath.write_text(output)
        print(f"\nSaved: {filepath}")
    else:
        print(f"\n{'─' * 60}\n")
        print(output)


def main():
    args = sys.argv[1:]
    save = "--save" in args
    args = [a for a in args if a != "--save"]
    if not args:
        print(__doc__)
        sys.exit(1)
    asyncio.run(embed_url(args[0], save=save))


if __name__ == "__main__":
    main()
