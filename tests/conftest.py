from __future__ import annotations

import pytest

from tests.helpers import FakeYouTubeService
from yt_channel_stats.core.config import AppConfig
from yt_channel_stats.core.youtube import YouTubeClient


@pytest.fixture
def fake_service() -> FakeYouTubeService:
    return FakeYouTubeService()


@pytest.fixture
def youtube_client(fake_service: FakeYouTubeService) -> YouTubeClient:
    return YouTubeClient(fake_service)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig()
