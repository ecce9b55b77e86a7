"""
Analysis module: aggregation and reporting of mined video statistics
"""

from .stats_aggregator import StatsAggregator, StatsReport, render_report

__all__ = ["StatsAggregator", "StatsReport", "render_report"]
