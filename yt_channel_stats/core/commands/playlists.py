"""
Playlists command
Lists every public playlist of a channel.
"""

import logging
from typing import List, Optional

from ..config.app_config import AppConfig
from ..youtube.handle_resolver import HandleResolver
from ..youtube.paginator import collect_items
from ..youtube.responses import Page, parse_playlists_page
from ..youtube.video_info import PlaylistInfo
from ..youtube.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


def run_playlists(youtube_client: YouTubeClient, config: AppConfig, channel_handle: str) -> Optional[List[PlaylistInfo]]:
    """Returns the playlists printed, or None when the handle resolves to no channel."""
    channel_id = HandleResolver(youtube_client).resolve(channel_handle)
    if channel_id is None:
        logger.warning(f"No channel found for handle {channel_handle}")
        return None

    def fetch_page(page_token: Optional[str]) -> Page[PlaylistInfo]:
        response = youtube_client.fetch_playlists(
            channel_id=channel_id,
            max_results=config.playlists_page_size,
            page_token=page_token
        )
        return parse_playlists_page(response)

    playlists = collect_items(fetch_page, max_pages=config.max_pages)

    if not playlists:
        logger.warning(f"No public playlists found for channel {channel_handle}")
        return playlists

    print(f"Public Playlists for {channel_handle}:")
    for playlist in playlists:
        print(f"Title: {playlist.title}\nDescription: {playlist.description}\n")
    print(f"Total playlists: {len(playlists)}")

    return playlists
