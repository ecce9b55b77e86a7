"""
Channel Information Domain Model
Channel snippet, statistics and content details as returned by channels.list.
"""

from typing import Optional


class ChannelInfo:
    """
    Domain model representing one record of the channels endpoint.

    Every part is optional because callers request different parts
    (contentDetails for the stats workflow, snippet/statistics for metadata).
    """

    def __init__(
        self,
        channel_id: str = "",
        title: str = "",
        description: str = "",
        published_at: str = "",
        has_snippet: bool = False,
        has_statistics: bool = False,
        subscriber_count: Optional[int] = None,
        view_count: Optional[int] = None,
        video_count: Optional[int] = None,
        uploads_playlist_id: Optional[str] = None
    ):
        self.channel_id = channel_id
        self.title = title
        self.description = description
        self.published_at = published_at
        self.has_snippet = has_snippet
        self.has_statistics = has_statistics
        self.subscriber_count = subscriber_count
        self.view_count = view_count
        self.video_count = video_count
        self.uploads_playlist_id = uploads_playlist_id

    def __repr__(self) -> str:
        return (
            f"ChannelInfo(title={self.title!r}, id={self.channel_id!r}, "
            f"uploads={self.uploads_playlist_id!r})"
        )
