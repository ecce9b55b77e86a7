"""
Stats command
Handle -> channel id -> uploads playlist -> video ids -> per-video statistics -> report.
"""

import logging
from typing import Optional

from ..analysis.stats_aggregator import StatsAggregator, StatsReport, render_report
from ..config.app_config import AppConfig
from ..youtube.handle_resolver import HandleResolver
from ..youtube.metadata_miner import VideoMetadataMiner
from ..youtube.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


def run_stats(
    youtube_client: YouTubeClient,
    config: AppConfig,
    channel_handle: str,
    sort_key: Optional[str] = None,
    sort_order: Optional[str] = None
) -> Optional[StatsReport]:
    """
    Print per-video statistics and totals for every upload of a channel.

    Returns:
        The rendered report, or None when the handle resolves to no channel.
    """
    channel_id = HandleResolver(youtube_client).resolve(channel_handle)
    if channel_id is None:
        logger.warning(f"No channel found for handle {channel_handle}")
        return None

    miner = VideoMetadataMiner(youtube_client, config)
    videos = miner.mine_all_videos(channel_id)

    report = StatsAggregator().analyze(videos, sort_key=sort_key, sort_order=sort_order)
    render_report(report)
    return report
