"""
Subscriptions dump command
Lists the channels the token's owner is subscribed to.
"""

import logging
from typing import List, Optional

from ..config.app_config import AppConfig
from ..youtube.errors import ApiStatusError
from ..youtube.paginator import collect_items
from ..youtube.responses import Page, parse_subscriptions_page
from ..youtube.video_info import SubscriptionInfo
from ..youtube.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


def run_subscriptions(youtube_client: YouTubeClient, config: AppConfig) -> List[SubscriptionInfo]:
    """
    Print the title of every subscription.

    A rejected token or any other error answer from the API is reported like
    an empty subscription list. Network failures propagate.
    """
    def fetch_page(page_token: Optional[str]) -> Page[SubscriptionInfo]:
        response = youtube_client.fetch_subscriptions(
            max_results=config.subscriptions_page_size,
            page_token=page_token
        )
        return parse_subscriptions_page(response)

    try:
        subscriptions = collect_items(fetch_page, max_pages=config.max_pages)
    except ApiStatusError as e:
        logger.debug(f"Subscriptions request rejected: {e}")
        subscriptions = []

    if not subscriptions:
        logger.warning("No subscriptions found or invalid token.")
        return subscriptions

    for subscription in subscriptions:
        print(f"title: {subscription.title}")

    return subscriptions
