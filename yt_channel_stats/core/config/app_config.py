"""
Application Configuration Model
Represents a validated configuration state
"""

from typing import Optional


class AppConfig:
    """
    Immutable configuration object for the channel stats client.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    Credentials are not part of it: keys and tokens come from the command line.
    """

    def __init__(
        self,
        playlist_items_page_size: int = 50,
        playlists_page_size: int = 50,
        video_search_page_size: int = 5,
        subscriptions_page_size: int = 50,
        max_pages: Optional[int] = 10000,
        log_level: str = "WARNING",
        log_file: Optional[str] = None
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            playlist_items_page_size: maxResults for playlistItems.list (1-50)
            playlists_page_size: maxResults for playlists.list (1-50)
            video_search_page_size: maxResults for video search (1-50)
            subscriptions_page_size: maxResults for subscriptions.list (1-50)
            max_pages: Safety bound on pages per listing (None = unbounded)
            log_level: Root logging level name
            log_file: Optional path of an additional log file
        """
        self._playlist_items_page_size = playlist_items_page_size
        self._playlists_page_size = playlists_page_size
        self._video_search_page_size = video_search_page_size
        self._subscriptions_page_size = subscriptions_page_size
        self._max_pages = max_pages
        self._log_level = log_level
        self._log_file = log_file

    @property
    def playlist_items_page_size(self) -> int:
        """Page size used to enumerate the uploads playlist."""
        return self._playlist_items_page_size

    @property
    def playlists_page_size(self) -> int:
        """Page size used to list a channel's playlists."""
        return self._playlists_page_size

    @property
    def video_search_page_size(self) -> int:
        """Page size used for video search within a channel."""
        return self._video_search_page_size

    @property
    def subscriptions_page_size(self) -> int:
        return self._subscriptions_page_size

    @property
    def max_pages(self) -> Optional[int]:
        """Maximum pages fetched per listing (None = unbounded)."""
        return self._max_pages

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def log_file(self) -> Optional[str]:
        return self._log_file

    def with_log_level(self, log_level: str) -> "AppConfig":
        """Copy of this configuration with a different log level."""
        return AppConfig(
            playlist_items_page_size=self._playlist_items_page_size,
            playlists_page_size=self._playlists_page_size,
            video_search_page_size=self._video_search_page_size,
            subscriptions_page_size=self._subscriptions_page_size,
            max_pages=self._max_pages,
            log_level=log_level,
            log_file=self._log_file
        )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"AppConfig(playlist_items_page_size={self.playlist_items_page_size}, "
            f"video_search_page_size={self.video_search_page_size}, "
            f"max_pages={self.max_pages}, "
            f"log_level={self.log_level!r})"
        )
