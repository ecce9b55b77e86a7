"""
YouTube Channel Stats
Pagination-and-aggregation client for the YouTube Data API v3.
"""

__version__ = "0.1.0"
