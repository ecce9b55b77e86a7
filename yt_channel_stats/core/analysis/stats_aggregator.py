"""
Stats Aggregator Service
Totals, sort policy and report rendering for the stats command.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, TextIO

import pandas as pd

from ..youtube.video_info import VideoInfo

logger = logging.getLogger(__name__)

SORT_KEYS = ("likes", "views")
SORT_ORDERS = ("asc", "desc")
DEFAULT_SORT_ORDER = "asc"
VIDEO_COLUMNS = ["video_id", "title", "published_at", "views", "likes"]


@dataclass(frozen=True)
class StatsReport:
    """Ordered videos plus totals over every successfully decoded video."""
    videos: List[VideoInfo]
    total_views: int
    total_likes: int
    processed_count: int


class StatsAggregator:
    """
    Service responsible for turning mined videos into a report.

    Responsibilities:
    - Sum views and likes over the decoded videos.
    - Apply the requested sort (stable, by likes or views).
    - Render the report as text.

    Totals are computed from the unsorted input, so sorting never changes them.
    """

    def analyze(
        self,
        videos: List[VideoInfo],
        sort_key: Optional[str] = None,
        sort_order: Optional[str] = None
    ) -> StatsReport:
        """
        Execute the aggregation: Totals -> Sort.

        Returns:
            StatsReport: sorted videos (or input order) and totals.
        """
        # Plain int sums; numpy int64 would wrap on very large counters
        total_views = sum(v.views for v in videos)
        total_likes = sum(v.likes for v in videos)

        ordered = videos
        if sort_key is not None:
            ordered = self.sort_videos(videos, sort_key, sort_order)

        return StatsReport(
            videos=ordered,
            total_views=total_views,
            total_likes=total_likes,
            processed_count=len(videos)
        )

    def sort_videos(self, videos: List[VideoInfo], sort_key: str, sort_order: Optional[str] = None) -> List[VideoInfo]:
        """
        Sort by `likes` or `views`, `asc` (default) or `desc`.

        Ties keep their input order. An unknown key/order combination is not
        an error: a warning is logged and the input order is returned.
        """
        order = sort_order or DEFAULT_SORT_ORDER
        if sort_key not in SORT_KEYS or order not in SORT_ORDERS:
            logger.warning(f"Unknown sort combination: {sort_key} {order}")
            return list(videos)

        df = self._to_frame(videos)
        df = df.sort_values(by=sort_key, ascending=(order == "asc"), kind="stable")
        return [videos[position] for position in df.index]

    def _to_frame(self, videos: List[VideoInfo]) -> pd.DataFrame:
        return pd.DataFrame([v.to_dict() for v in videos], columns=VIDEO_COLUMNS)


def render_report(report: StatsReport, out: Optional[TextIO] = None):
    """Print every video followed by the summary lines."""
    for video in report.videos:
        print(
            f"Title: {video.title}\n"
            f"Published: {video.published_at}\n"
            f"Views: {video.views}\n"
            f"Likes: {video.likes}\n",
            file=out
        )

    print(f"Processed {report.processed_count} videos", file=out)
    print(f"Total likes across all videos: {report.total_likes}", file=out)
    print(f"Total views across all videos: {report.total_views}", file=out)
