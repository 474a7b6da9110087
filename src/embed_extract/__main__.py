# -*- coding: utf-8 -*-
"""
Entry point to run the service via python -m embed_extract.
"""
import uvicorn

from embed_extract.config import settings


def main():
    """Start the Uvicorn server."""
    uvicorn.run(
        "embed_extract.api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
