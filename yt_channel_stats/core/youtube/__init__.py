"""
YouTube API integration module
"""

from .channel_info import ChannelInfo
from .errors import ApiStatusError, DecodeError, MissingFieldError, TransportError, YouTubeClientError
from .handle_resolver import HandleResolver, normalize_handle
from .video_info import PlaylistInfo, SubscriptionInfo, VideoInfo, VideoSearchHit
from .youtube_client import YouTubeClient

__all__ = [
    "ApiStatusError",
    "ChannelInfo",
    "DecodeError",
    "HandleResolver",
    "MissingFieldError",
    "PlaylistInfo",
    "SubscriptionInfo",
    "TransportError",
    "VideoInfo",
    "VideoSearchHit",
    "YouTubeClient",
    "YouTubeClientError",
    "normalize_handle",
]
