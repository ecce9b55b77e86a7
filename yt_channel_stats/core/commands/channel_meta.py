"""
Channel metadata command
"""

import logging
from typing import Optional

from ..youtube.channel_info import ChannelInfo
from ..youtube.handle_resolver import HandleResolver
from ..youtube.responses import parse_channel_page
from ..youtube.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


def _count(value: Optional[int]) -> str:
    return "hidden" if value is None else str(value)


def run_channel_meta(youtube_client: YouTubeClient, channel_handle: str) -> Optional[ChannelInfo]:
    """Print snippet and statistics of a channel. Returns None when nothing was found."""
    channel_id = HandleResolver(youtube_client).resolve(channel_handle)
    if channel_id is None:
        logger.warning(f"No channel found for handle {channel_handle}")
        return None

    page = parse_channel_page(youtube_client.fetch_channel(channel_id, part="snippet,statistics"))
    if not page.items:
        logger.warning(f"No metadata found for channel {channel_handle}")
        return None

    channel = page.items[0]

    if channel.has_snippet:
        print(f"Channel Title: {channel.title}")
        print(f"Description: {channel.description}")
        print(f"Published At: {channel.published_at}")

    if channel.has_statistics:
        print(f"Subscribers: {_count(channel.subscriber_count)}")
        print(f"Total Views: {_count(channel.view_count)}")
        print(f"Video Count: {_count(channel.video_count)}")

    return channel
