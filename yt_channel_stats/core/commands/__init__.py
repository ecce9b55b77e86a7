"""
Command workflows, one per CLI subcommand
"""

from .channel_meta import run_channel_meta
from .playlists import run_playlists
from .search_videos import run_search_videos
from .stats import run_stats
from .subscriptions import run_subscriptions

__all__ = [
    "run_channel_meta",
    "run_playlists",
    "run_search_videos",
    "run_stats",
    "run_subscriptions",
]
