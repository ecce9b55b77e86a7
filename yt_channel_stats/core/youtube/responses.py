"""
Response Decoders
Turns decoded JSON payloads of the YouTube Data API into typed pages.

Decoding is tolerant: only the fields that identify a record are required.
Everything else falls back to a default so that, for example, a video
without a likeCount simply counts as zero likes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from .channel_info import ChannelInfo
from .errors import DecodeError
from .video_info import PlaylistInfo, SubscriptionInfo, VideoInfo, VideoSearchHit

T = TypeVar("T")

# Counters are unsigned 64-bit values on the API side
MAX_COUNT = 2 ** 64 - 1


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a listing endpoint."""
    items: List[T] = field(default_factory=list)
    next_page_token: Optional[str] = None


def parse_count(value: Any) -> int:
    """
    Parse an API counter into a non-negative int.

    The API serializes counters as decimal strings. Anything that is not a
    plain run of ASCII digits (missing, negative, fractional, garbage) or
    that overflows an unsigned 64-bit counter is 0.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, str) and value.isascii() and value.isdigit():
        value = int(value)
    if isinstance(value, int) and 0 <= value <= MAX_COUNT:
        return value
    return 0


def _optional_count(mapping: Dict[str, Any], key: str) -> Optional[int]:
    if key not in mapping:
        return None
    return parse_count(mapping[key])


def _require_mapping(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"{what}: expected an object, got {type(value).__name__}")
    return value


def _optional_mapping(mapping: Dict[str, Any], key: str, what: str) -> Optional[Dict[str, Any]]:
    value = mapping.get(key)
    if value is None:
        return None
    return _require_mapping(value, f"{what}.{key}")


def _items(payload: Any, what: str, required: bool = True) -> List[Dict[str, Any]]:
    """Extract the `items` array of a listing payload."""
    payload = _require_mapping(payload, what)
    if "items" not in payload:
        if required:
            raise DecodeError(f"{what}: missing field 'items'")
        return []

    items = payload["items"]
    if not isinstance(items, list):
        raise DecodeError(f"{what}: field 'items' must be an array")
    return [_require_mapping(item, f"{what}.items[{i}]") for i, item in enumerate(items)]


def _required_string(mapping: Dict[str, Any], key: str, what: str) -> str:
    value = mapping.get(key)
    if not isinstance(value, str):
        raise DecodeError(f"{what}: missing field '{key}'")
    return value


def _string(mapping: Optional[Dict[str, Any]], key: str, default: str = "") -> str:
    if not mapping:
        return default
    value = mapping.get(key)
    return value if isinstance(value, str) else default


def _next_page_token(payload: Dict[str, Any]) -> Optional[str]:
    token = payload.get("nextPageToken")
    if isinstance(token, str) and token:
        return token
    return None


def parse_channel_search_page(payload: Any) -> Page[str]:
    """search.list(type=channel) -> channel ids, in API order."""
    what = "channel search"
    channel_ids = []
    for item in _items(payload, what):
        id_block = _require_mapping(item.get("id"), f"{what}.id")
        channel_ids.append(_required_string(id_block, "channelId", f"{what}.id"))
    return Page(items=channel_ids, next_page_token=_next_page_token(payload))


def parse_channel_page(payload: Any) -> Page[ChannelInfo]:
    """channels.list -> ChannelInfo records for whatever parts were requested."""
    what = "channel"
    channels = []
    for item in _items(payload, what):
        snippet = _optional_mapping(item, "snippet", what)
        statistics = _optional_mapping(item, "statistics", what)
        content_details = _optional_mapping(item, "contentDetails", what)

        uploads_playlist_id = None
        if content_details is not None:
            related = _optional_mapping(content_details, "relatedPlaylists", f"{what}.contentDetails")
            uploads = _string(related, "uploads")
            uploads_playlist_id = uploads or None

        stats = statistics or {}
        channels.append(ChannelInfo(
            channel_id=_string(item, "id"),
            title=_string(snippet, "title"),
            description=_string(snippet, "description"),
            published_at=_string(snippet, "publishedAt"),
            has_snippet=snippet is not None,
            has_statistics=statistics is not None,
            subscriber_count=_optional_count(stats, "subscriberCount"),
            view_count=_optional_count(stats, "viewCount"),
            video_count=_optional_count(stats, "videoCount"),
            uploads_playlist_id=uploads_playlist_id
        ))
    return Page(items=channels, next_page_token=_next_page_token(payload))


def parse_playlist_items_page(payload: Any) -> Page[str]:
    """playlistItems.list(part=contentDetails) -> video ids of one page."""
    what = "playlist items"
    video_ids = []
    for item in _items(payload, what):
        details = _require_mapping(item.get("contentDetails"), f"{what}.contentDetails")
        video_ids.append(_required_string(details, "videoId", f"{what}.contentDetails"))
    return Page(items=video_ids, next_page_token=_next_page_token(payload))


def parse_video_stats_page(payload: Any, video_id: str) -> Page[VideoInfo]:
    """
    videos.list(part=snippet,statistics) -> VideoInfo records.

    The snippet title identifies the record and is required. Statistics may
    be missing entirely (or lack likeCount when likes are hidden); such
    counters decode as 0.
    """
    what = f"video {video_id}"
    videos = []
    for item in _items(payload, what):
        snippet = _require_mapping(item.get("snippet"), f"{what}.snippet")
        statistics = _optional_mapping(item, "statistics", what) or {}
        videos.append(VideoInfo(
            video_id=_string(item, "id", video_id),
            title=_required_string(snippet, "title", f"{what}.snippet"),
            published_at=_string(snippet, "publishedAt"),
            views=parse_count(statistics.get("viewCount")),
            likes=parse_count(statistics.get("likeCount"))
        ))
    return Page(items=videos, next_page_token=_next_page_token(payload))


def parse_playlists_page(payload: Any) -> Page[PlaylistInfo]:
    """playlists.list(part=snippet) -> title/description pairs."""
    what = "playlists"
    playlists = []
    for item in _items(payload, what):
        snippet = _require_mapping(item.get("snippet"), f"{what}.snippet")
        playlists.append(PlaylistInfo(
            title=_required_string(snippet, "title", f"{what}.snippet"),
            description=_string(snippet, "description")
        ))
    return Page(items=playlists, next_page_token=_next_page_token(payload))


def parse_video_search_page(payload: Any) -> Page[VideoSearchHit]:
    """search.list(type=video) -> search hits. A page without items is empty."""
    what = "video search"
    hits = []
    for item in _items(payload, what, required=False):
        id_block = _require_mapping(item.get("id"), f"{what}.id")
        snippet = _require_mapping(item.get("snippet"), f"{what}.snippet")
        hits.append(VideoSearchHit(
            video_id=_required_string(id_block, "videoId", f"{what}.id"),
            title=_required_string(snippet, "title", f"{what}.snippet"),
            description=_string(snippet, "description"),
            published_at=_string(snippet, "publishedAt")
        ))
    return Page(items=hits, next_page_token=_next_page_token(payload))


def parse_subscriptions_page(payload: Any) -> Page[SubscriptionInfo]:
    """subscriptions.list(mine=true) -> subscribed channel titles. Untitled entries are dropped."""
    what = "subscriptions"
    subscriptions = []
    for item in _items(payload, what, required=False):
        title = _string(_optional_mapping(item, "snippet", what), "title")
        if title:
            subscriptions.append(SubscriptionInfo(title=title))
    return Page(items=subscriptions, next_page_token=_next_page_token(payload))
