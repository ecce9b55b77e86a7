"""
YouTube client error taxonomy
"""

from typing import Optional


class YouTubeClientError(Exception):
    """Base class for every failure raised while talking to the YouTube API."""
    pass


class TransportError(YouTubeClientError):
    """Raised when the request never produced a response (network failure)."""
    pass


class DecodeError(YouTubeClientError):
    """Raised when a response body does not decode into the expected shape."""
    pass


class ApiStatusError(DecodeError):
    """
    Raised when the API answers with a non-2xx status.

    The error body is not a valid page for any endpoint, so it follows the
    same policy as any other undecodable body.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class MissingFieldError(YouTubeClientError):
    """Raised when a decoded response lacks a field the workflow cannot do without."""
    pass
