"""
Channel Handle Resolver
Maps a human-chosen @handle to the channel's opaque id.
"""

import logging
from typing import Optional

from .responses import parse_channel_search_page
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


def normalize_handle(handle: str) -> str:
    """Prefix '@' unless already present. Idempotent."""
    return handle if handle.startswith("@") else f"@{handle}"


class HandleResolver:
    """
    Resolves channel handles through a channel-type search.

    The first search hit is taken as-is. Ambiguous or colliding names can
    therefore resolve to an unintended channel; no scoring or verification
    against the requested handle is done.
    """

    def __init__(self, youtube_client: YouTubeClient):
        self._client = youtube_client

    def resolve(self, handle: str) -> Optional[str]:
        """
        Returns:
            The channel id, or None when the search has no results.

        Raises:
            DecodeError, TransportError: the search itself failed.
        """
        query = normalize_handle(handle)
        page = parse_channel_search_page(self._client.search_channels(query))

        if not page.items:
            return None

        channel_id = page.items[0]
        logger.info(f"Resolved {query} to channel {channel_id}")
        return channel_id
