"""
Video Information Domain Models
Records built from the videos, playlists and search endpoints.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass(frozen=True)
class VideoInfo:
    """
    Domain model representing a single video's statistics.
    Counts are always non-negative; unknown counts are stored as 0.
    """
    video_id: str
    title: str
    published_at: str
    views: int
    likes: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert object to dictionary (used to build analysis frames)."""
        return asdict(self)


@dataclass(frozen=True)
class PlaylistInfo:
    """A public playlist of a channel. Only display fields are kept."""
    title: str
    description: str = ""


@dataclass(frozen=True)
class VideoSearchHit:
    """A single result of a video search scoped to one channel."""
    video_id: str
    title: str
    description: str = ""
    published_at: str = ""


@dataclass(frozen=True)
class SubscriptionInfo:
    title: str
