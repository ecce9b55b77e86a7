"""
YouTube API Client
Thin transport over the YouTube Data API v3 discovery resource.

Each method issues exactly one request and returns the decoded JSON payload.
Library failures are mapped onto the error taxonomy in `errors`:
network failures become TransportError, non-2xx answers ApiStatusError and
unparseable bodies DecodeError.
"""

import logging
from typing import Any, Dict, Optional

import httplib2
from google.auth import exceptions as auth_exceptions
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .errors import ApiStatusError, DecodeError, TransportError

logger = logging.getLogger(__name__)


class YouTubeClient:
    """
    YouTube Data API client.

    Responsibilities:
    - Build the discovery resource from an API key or an OAuth bearer token.
    - Expose one method per endpoint used by the commands.
    - Translate googleapiclient/httplib2 failures into client errors.
    """

    def __init__(self, service: Any):
        """
        Args:
            service: A `googleapiclient` resource for youtube v3 (or anything
                exposing the same `resource().list(**params).execute()` calls).
        """
        self._service = service

    @classmethod
    def from_api_key(cls, api_key: str) -> "YouTubeClient":
        """Client for public data; the key travels as the `key` query parameter."""
        return cls(cls._build_service(developerKey=api_key))

    @classmethod
    def from_oauth_token(cls, oauth_token: str) -> "YouTubeClient":
        """Client for the authenticated user's data; the token is sent as a bearer header."""
        return cls(cls._build_service(credentials=Credentials(token=oauth_token)))

    @staticmethod
    def _build_service(**auth: Any) -> Any:
        try:
            # cache_discovery=False prevents the 'file_cache' warning in logs
            return build("youtube", "v3", cache_discovery=False, **auth)
        except HttpError as e:
            raise TransportError(f"Could not load the YouTube API description: {e}")
        except (httplib2.HttpLib2Error, OSError) as e:
            raise TransportError(f"Could not reach the YouTube API: {e}")

    def _execute(self, request: Any, what: str) -> Dict[str, Any]:
        try:
            return request.execute()
        except HttpError as e:
            raise ApiStatusError(f"{what} rejected with HTTP {e.resp.status}: {e.reason}", status=e.resp.status)
        except auth_exceptions.RefreshError as e:
            # A bearer-only token cannot be refreshed after a 401
            raise ApiStatusError(f"{what} rejected: token is invalid or expired ({e})", status=401)
        except auth_exceptions.TransportError as e:
            raise TransportError(f"{what} failed: {e}")
        except (httplib2.HttpLib2Error, OSError) as e:
            raise TransportError(f"{what} failed: {e}")
        except ValueError as e:
            raise DecodeError(f"{what} returned a malformed body: {e}")

    def search_channels(self, query: str) -> Dict[str, Any]:
        """search.list restricted to channels."""
        logger.debug(f"Searching channels for {query!r}")
        request = self._service.search().list(part="snippet", type="channel", q=query)
        return self._execute(request, "Channel search")

    def fetch_channel(self, channel_id: str, part: str) -> Dict[str, Any]:
        """channels.list for a single channel id."""
        logger.debug(f"Fetching channel {channel_id} ({part})")
        request = self._service.channels().list(part=part, id=channel_id)
        return self._execute(request, "Channel lookup")

    def fetch_playlist_items(self, playlist_id: str, max_results: int = 50, page_token: Optional[str] = None) -> Dict[str, Any]:
        """playlistItems.list, one page."""
        logger.debug(f"Fetching playlist items of {playlist_id} (page_token={page_token})")
        request = self._service.playlistItems().list(
            part="contentDetails",
            playlistId=playlist_id,
            maxResults=max_results,
            pageToken=page_token
        )
        return self._execute(request, "Playlist items")

    def fetch_video(self, video_id: str) -> Dict[str, Any]:
        """videos.list with snippet and statistics for one video."""
        logger.debug(f"Fetching video {video_id}")
        request = self._service.videos().list(part="snippet,statistics", id=video_id)
        return self._execute(request, f"Video {video_id}")

    def fetch_playlists(self, channel_id: str, max_results: int = 50, page_token: Optional[str] = None) -> Dict[str, Any]:
        """playlists.list of a channel, one page."""
        logger.debug(f"Fetching playlists of {channel_id} (page_token={page_token})")
        request = self._service.playlists().list(
            part="snippet",
            channelId=channel_id,
            maxResults=max_results,
            pageToken=page_token
        )
        return self._execute(request, "Playlists")

    def search_videos(self, channel_id: str, query: str, max_results: int = 5, page_token: Optional[str] = None) -> Dict[str, Any]:
        """search.list restricted to videos of one channel, one page."""
        logger.debug(f"Searching videos of {channel_id} for {query!r} (page_token={page_token})")
        request = self._service.search().list(
            part="snippet",
            type="video",
            channelId=channel_id,
            q=query,
            maxResults=max_results,
            pageToken=page_token
        )
        return self._execute(request, "Video search")

    def fetch_subscriptions(self, max_results: int = 50, page_token: Optional[str] = None) -> Dict[str, Any]:
        """subscriptions.list for the authenticated user, one page."""
        logger.debug(f"Fetching subscriptions (page_token={page_token})")
        request = self._service.subscriptions().list(
            part="snippet",
            mine=True,
            maxResults=max_results,
            pageToken=page_token
        )
        return self._execute(request, "Subscriptions")
