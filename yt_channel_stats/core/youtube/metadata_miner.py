"""
Video Metadata Miner Service
Uploads playlist lookup, video id enumeration and per-video statistics.
"""

import logging
from typing import List, Optional

from .errors import DecodeError, MissingFieldError
from .paginator import collect_items
from .responses import Page, parse_channel_page, parse_playlist_items_page, parse_video_stats_page
from .video_info import VideoInfo
from .youtube_client import YouTubeClient
from ..config.app_config import AppConfig

logger = logging.getLogger(__name__)


class VideoMetadataMiner:
    """
    Service responsible for mining the statistics of every upload of a channel.

    Responsibilities:
    - Find the channel's uploads playlist.
    - Iterate through the uploads playlist with pagination.
    - Fetch statistics one video at a time, skipping videos that fail.

    Page-level failures (channel lookup, playlist pages) propagate and abort
    the run. Item-level failures only drop the affected video.
    """

    def __init__(self, youtube_client: YouTubeClient, config: AppConfig):
        self._client = youtube_client
        self._config = config

    def mine_all_videos(self, channel_id: str) -> List[VideoInfo]:
        """
        Retrieves statistics for all videos in the channel's uploads playlist.

        Returns:
            List[VideoInfo]: Successfully decoded videos, in playlist order.
        """
        uploads_playlist_id = self.lookup_uploads_playlist(channel_id)

        video_ids = self.discover_video_ids(uploads_playlist_id)
        logger.info(f"Discovered {len(video_ids)} videos in uploads playlist {uploads_playlist_id}")

        if not video_ids:
            logger.info(f"Uploads playlist {uploads_playlist_id} is empty")
            return []

        return self.fetch_video_records(video_ids)

    def lookup_uploads_playlist(self, channel_id: str) -> str:
        """Reads contentDetails.relatedPlaylists.uploads of the channel."""
        page = parse_channel_page(self._client.fetch_channel(channel_id, part="contentDetails"))

        if not page.items or not page.items[0].uploads_playlist_id:
            raise MissingFieldError(f"Channel {channel_id} has no uploads playlist")

        return page.items[0].uploads_playlist_id

    def discover_video_ids(self, uploads_playlist_id: str) -> List[str]:
        """Iterates through playlist items to collect video IDs."""
        page_size = self._config.playlist_items_page_size

        def fetch_page(page_token: Optional[str]) -> Page[str]:
            response = self._client.fetch_playlist_items(
                playlist_id=uploads_playlist_id,
                max_results=page_size,
                page_token=page_token
            )
            return parse_playlist_items_page(response)

        return collect_items(fetch_page, max_pages=self._config.max_pages)

    def fetch_video_records(self, video_ids: List[str]) -> List[VideoInfo]:
        """
        Fetches statistics for each video id in order.

        A video whose response does not decode (including non-2xx answers) or
        contains no items is logged and skipped. Transport failures propagate.
        """
        videos: List[VideoInfo] = []

        for video_id in video_ids:
            try:
                page = parse_video_stats_page(self._client.fetch_video(video_id), video_id)
            except DecodeError as e:
                logger.warning(f"Failed to decode video {video_id}: {e}")
                continue

            if not page.items:
                logger.warning(f"No items for video {video_id}")
                continue

            videos.append(page.items[0])

        logger.info(f"Fetched statistics for {len(videos)} of {len(video_ids)} videos")
        return videos
