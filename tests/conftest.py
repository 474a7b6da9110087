# -*- coding: utf-8 -*-
"""
Pytest configuration and fixtures.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from embed_extract.api import app
from embed_extract.config import Settings
from embed_extract.models import Embed, EmbedFlags, EmbedMedia, EmbedWithExpire
from embed_extract.service import EmbedService

FA_PAGE = """<!DOCTYPE html>
<html>
<head><title>Sunset by Artist -- Fur Affinity [dot] net</title></head>
<body>
<div class="submission-area">
  <img id="submissionImg" src="//d.furaffinity.net/art/artist/123/sunset.png" alt="Sunset">
</div>
<div class="submission-id-sub-container">
<div class="submission-title"><h2>Sunset</h2></div>
<a href="/user/artist/"><strong>Artist</strong></a>
</div>
<img class="submission-user-icon floatleft avatar" src="//a.furaffinity.net/1/artist.gif">
<div class="submission-description user-submitted-links">
  First line<br>
  <br>
  <br>
  Second line <img alt="Cat" src="/cat.png"> Cat
</div>
<span class="rating-box inline mature">Mature</span>
<span class="tags"><a href="/search/@keywords sunset">sunset</a><a href="/search/@keywords gore">Gore</a></span>
</body>
</html>
"""


@pytest.fixture
def settings():
    """Settings with no extractor sections."""
    return Settings(EXTRACTORS={})


@pytest.fixture
def fa_settings():
    """Settings with FurAffinity credentials."""
    return Settings(
        EXTRACTORS={"furaffinity": {"a": "aaa", "b": "bbb"}},
        USER_AGENTS={"%browser": "TestBrowser/1.0"},
    )


@pytest.fixture
def fa_page():
    """A FurAffinity submission page."""
    return FA_PAGE


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def sample_result():
    """A finished embed."""
    return EmbedWithExpire(
        embed=Embed(
            title="Sunset",
            imgs=[EmbedMedia(url="https://images.example/sunset.jpg")],
            color=0x05CC47,
            url="https://www.deviantart.com/artist/art/Sunset-123",
            flags=EmbedFlags.ADULT,
        ),
        max_age=14400,
    )


@pytest.fixture
def mock_embed_service(sample_result):
    """Mock embed service that always succeeds."""
    mock = MagicMock(spec=EmbedService)
    mock.is_ready = True
    mock.extractor_names = ["deviantart"]
    mock.extractor_for = MagicMock(return_value="deviantart")
    mock.embed = AsyncMock(return_value=sample_result)
    return mock
