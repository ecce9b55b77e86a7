"""
Search videos command
Free-text video search scoped to one channel.
"""

import logging
from typing import List, Optional

from ..config.app_config import AppConfig
from ..youtube.errors import DecodeError
from ..youtube.handle_resolver import HandleResolver
from ..youtube.paginator import iterate_pages
from ..youtube.responses import Page, parse_video_search_page
from ..youtube.video_info import VideoSearchHit
from ..youtube.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


def run_search_videos(
    youtube_client: YouTubeClient,
    config: AppConfig,
    channel_handle: str,
    query: str
) -> Optional[List[VideoSearchHit]]:
    """
    Print every search hit for `query` among the channel's videos.

    Unlike the stats command, a result page that fails to decode does not
    abort the command: pagination stops and the hits collected so far are
    printed. A channel search that fails to decode is logged and ends the
    command without an error status.

    Returns:
        The hits printed, or None when no channel could be resolved.
    """
    try:
        channel_id = HandleResolver(youtube_client).resolve(channel_handle)
    except DecodeError as e:
        logger.error(f"Failed to decode channel search: {e}")
        return None

    if channel_id is None:
        logger.warning(f"No channel found for handle {channel_handle}")
        return None

    def fetch_page(page_token: Optional[str]) -> Page[VideoSearchHit]:
        response = youtube_client.search_videos(
            channel_id=channel_id,
            query=query,
            max_results=config.video_search_page_size,
            page_token=page_token
        )
        return parse_video_search_page(response)

    hits: List[VideoSearchHit] = []
    try:
        for page in iterate_pages(fetch_page, max_pages=config.max_pages):
            hits.extend(page.items)
    except DecodeError as e:
        logger.warning(f"Failed to decode video search page: {e}")

    print(f"Total raw items collected: {len(hits)}")
    for hit in hits:
        print(
            f"Title: {hit.title}\n"
            f"Published: {hit.published_at}\n"
            f"Description: {hit.description}\n"
            f"Video ID: {hit.video_id}\n"
        )

    return hits
