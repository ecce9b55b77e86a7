from __future__ import annotations

import json
from collections import defaultdict
from typing import Any

import httplib2
from googleapiclient.errors import HttpError


class _FakeRequest:
    def __init__(self, response: Any) -> None:
        self._response = response

    def execute(self) -> Any:
        if isinstance(self._response, BaseException):
            raise self._response
        return self._response


class _FakeResource:
    def __init__(self, service: FakeYouTubeService, name: str) -> None:
        self._service = service
        self._name = name

    def list(self, **params: Any) -> _FakeRequest:
        self._service.calls.append((self._name, params))
        queue = self._service.responses[self._name]
        if not queue:
            raise AssertionError(f"unexpected {self._name}.list call with {params}")
        return _FakeRequest(queue.pop(0))


class FakeYouTubeService:
    """Stands in for the googleapiclient youtube v3 resource; replays queued payloads."""

    def __init__(self) -> None:
        self.responses: dict[str, list[Any]] = defaultdict(list)
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def queue(self, resource: str, *responses: Any) -> FakeYouTubeService:
        self.responses[resource].extend(responses)
        return self

    def calls_to(self, resource: str) -> list[dict[str, Any]]:
        return [params for name, params in self.calls if name == resource]

    def search(self) -> _FakeResource:
        return _FakeResource(self, "search")

    def channels(self) -> _FakeResource:
        return _FakeResource(self, "channels")

    def playlistItems(self) -> _FakeResource:  # noqa: N802
        return _FakeResource(self, "playlistItems")

    def videos(self) -> _FakeResource:
        return _FakeResource(self, "videos")

    def playlists(self) -> _FakeResource:
        return _FakeResource(self, "playlists")

    def subscriptions(self) -> _FakeResource:
        return _FakeResource(self, "subscriptions")


def http_error(status: int, message: str = "request failed") -> HttpError:
    body = json.dumps({"error": {"code": status, "message": message}}).encode("utf-8")
    return HttpError(httplib2.Response({"status": str(status)}), body)


def channel_search_payload(*channel_ids: str) -> dict[str, Any]:
    return {
        "kind": "youtube#searchListResponse",
        "items": [
            {"id": {"kind": "youtube#channel", "channelId": channel_id}, "snippet": {"title": channel_id}}
            for channel_id in channel_ids
        ],
    }


def channel_payload(uploads_playlist_id: str | None = "UP1") -> dict[str, Any]:
    item: dict[str, Any] = {"id": "C1"}
    if uploads_playlist_id is not None:
        item["contentDetails"] = {"relatedPlaylists": {"likes": "", "uploads": uploads_playlist_id}}
    return {"kind": "youtube#channelListResponse", "items": [item]}


def playlist_items_payload(video_ids: list[str], next_page_token: str | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "items": [{"contentDetails": {"videoId": video_id}} for video_id in video_ids],
    }
    if next_page_token is not None:
        payload["nextPageToken"] = next_page_token
    return payload


def video_payload(
    video_id: str,
    title: str | None = None,
    views: str | None = None,
    likes: str | None = None,
    published_at: str = "2024-01-01T00:00:00Z",
) -> dict[str, Any]:
    statistics: dict[str, str] = {}
    if views is not None:
        statistics["viewCount"] = views
    if likes is not None:
        statistics["likeCount"] = likes
    return {
        "items": [
            {
                "id": video_id,
                "snippet": {"title": title or f"Video {video_id}", "publishedAt": published_at},
                "statistics": statistics,
            }
        ]
    }


def playlists_payload(titles: list[str], next_page_token: str | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "items": [{"snippet": {"title": title, "description": f"About {title}"}} for title in titles],
    }
    if next_page_token is not None:
        payload["nextPageToken"] = next_page_token
    return payload


def video_search_payload(video_ids: list[str], next_page_token: str | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "items": [
            {
                "id": {"kind": "youtube#video", "videoId": video_id},
                "snippet": {
                    "title": f"Hit {video_id}",
                    "description": f"Description {video_id}",
                    "publishedAt": "2024-02-02T00:00:00Z",
                },
            }
            for video_id in video_ids
        ],
    }
    if next_page_token is not None:
        payload["nextPageToken"] = next_page_token
    return payload


def subscriptions_payload(titles: list[str], next_page_token: str | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"items": [{"snippet": {"title": title}} for title in titles]}
    if next_page_token is not None:
        payload["nextPageToken"] = next_page_token
    return payload
