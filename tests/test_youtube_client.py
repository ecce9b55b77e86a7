from __future__ import annotations

from typing import Any

import httplib2
import pytest
from google.auth import exceptions as auth_exceptions

from tests.helpers import FakeYouTubeService, http_error
from yt_channel_stats.core.youtube import youtube_client as youtube_client_module
from yt_channel_stats.core.youtube.errors import ApiStatusError, DecodeError, TransportError
from yt_channel_stats.core.youtube.youtube_client import YouTubeClient


def test_playlist_items_request_parameters(fake_service: FakeYouTubeService, youtube_client: YouTubeClient) -> None:
    fake_service.queue("playlistItems", {"items": []})

    youtube_client.fetch_playlist_items("UP1", max_results=50, page_token="t1")

    assert fake_service.calls_to("playlistItems") == [
        {"part": "contentDetails", "playlistId": "UP1", "maxResults": 50, "pageToken": "t1"}
    ]


def test_video_search_request_parameters(fake_service: FakeYouTubeService, youtube_client: YouTubeClient) -> None:
    fake_service.queue("search", {"items": []})

    youtube_client.search_videos("C1", "rust", max_results=5)

    assert fake_service.calls_to("search") == [
        {
            "part": "snippet",
            "type": "video",
            "channelId": "C1",
            "q": "rust",
            "maxResults": 5,
            "pageToken": None,
        }
    ]


def test_subscriptions_request_is_scoped_to_the_token_owner(
    fake_service: FakeYouTubeService, youtube_client: YouTubeClient
) -> None:
    fake_service.queue("subscriptions", {"items": []})

    youtube_client.fetch_subscriptions()

    assert fake_service.calls_to("subscriptions")[0]["mine"] is True


def test_http_error_becomes_api_status_error(fake_service: FakeYouTubeService, youtube_client: YouTubeClient) -> None:
    fake_service.queue("videos", http_error(403, "quotaExceeded"))

    with pytest.raises(ApiStatusError) as excinfo:
        youtube_client.fetch_video("v1")

    assert excinfo.value.status == 403
    assert isinstance(excinfo.value, DecodeError)


@pytest.mark.parametrize("failure", [OSError("connection reset"), httplib2.ServerNotFoundError("no host")])
def test_network_failure_becomes_transport_error(
    fake_service: FakeYouTubeService, youtube_client: YouTubeClient, failure: Exception
) -> None:
    fake_service.queue("channels", failure)

    with pytest.raises(TransportError):
        youtube_client.fetch_channel("C1", part="contentDetails")


def test_unrefreshable_token_becomes_unauthorized_status(
    fake_service: FakeYouTubeService, youtube_client: YouTubeClient
) -> None:
    fake_service.queue("subscriptions", auth_exceptions.RefreshError("missing refresh_token"))

    with pytest.raises(ApiStatusError) as excinfo:
        youtube_client.fetch_subscriptions()

    assert excinfo.value.status == 401


def test_auth_transport_failure_becomes_transport_error(
    fake_service: FakeYouTubeService, youtube_client: YouTubeClient
) -> None:
    fake_service.queue("subscriptions", auth_exceptions.TransportError("token endpoint unreachable"))

    with pytest.raises(TransportError):
        youtube_client.fetch_subscriptions()


def test_malformed_body_becomes_decode_error(fake_service: FakeYouTubeService, youtube_client: YouTubeClient) -> None:
    fake_service.queue("search", ValueError("Expecting value: line 1 column 1 (char 0)"))

    with pytest.raises(DecodeError):
        youtube_client.search_channels("@x")


def test_from_api_key_passes_developer_key(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}

    def fake_build(service_name: str, version: str, **kwargs: Any) -> FakeYouTubeService:
        captured.update(kwargs, service_name=service_name, version=version)
        return FakeYouTubeService()

    monkeypatch.setattr(youtube_client_module, "build", fake_build)

    YouTubeClient.from_api_key("secret-key")

    assert captured["service_name"] == "youtube"
    assert captured["version"] == "v3"
    assert captured["developerKey"] == "secret-key"
    assert "credentials" not in captured


def test_from_oauth_token_uses_bearer_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}

    def fake_build(service_name: str, version: str, **kwargs: Any) -> FakeYouTubeService:
        captured.update(kwargs)
        return FakeYouTubeService()

    monkeypatch.setattr(youtube_client_module, "build", fake_build)

    YouTubeClient.from_oauth_token("ya29.token")

    assert captured["credentials"].token == "ya29.token"
    assert "developerKey" not in captured


def test_build_failure_becomes_transport_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_build(*args: Any, **kwargs: Any) -> None:
        raise OSError("network unreachable")

    monkeypatch.setattr(youtube_client_module, "build", failing_build)

    with pytest.raises(TransportError):
        YouTubeClient.from_api_key("k")
