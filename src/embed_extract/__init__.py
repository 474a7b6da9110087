# -*- coding: utf-8 -*-
"""
Embed Extract Service - rich link previews for third-party content sites.
"""
__version__ = "1.0.0"

from .api import app  # noqa: E402
from .models import Embed, EmbedFlags, EmbedWithExpire  # noqa: E402

__all__ = ["app", "Embed", "EmbedFlags", "EmbedWithExpire", "__version__"]
