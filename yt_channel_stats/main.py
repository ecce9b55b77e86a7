"""
YouTube Channel Stats - Command Line Interface
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.commands import run_channel_meta, run_playlists, run_search_videos, run_stats, run_subscriptions
from .core.config import AppConfig, ConfigLoader, ConfigValidationError
from .core.config.config_loader import LOG_LEVELS
from .core.youtube import YouTubeClient, YouTubeClientError

logger = logging.getLogger(__name__)


def setup_logging(config: AppConfig) -> logging.Logger:
    """Configure logging: stderr always, plus a file when configured."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if config.log_file:
        log_file = Path(config.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers
    )
    return logging.getLogger(__name__)


def load_configuration(config_path: Optional[str]) -> AppConfig:
    """Load and validate the configuration file, or use defaults when none is given."""
    if config_path is None:
        return AppConfig()

    try:
        return ConfigLoader(Path(config_path)).load()
    except FileNotFoundError as e:
        print(f"Configuration file not found: {e}", file=sys.stderr)
        sys.exit(1)
    except ConfigValidationError as e:
        print(f"Configuration validation failed: {e}", file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt-channel-stats",
        description="Aggregate public metadata of YouTube channels."
    )
    parser.add_argument("--config", default=None, help="Path to a YAML configuration file.")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None,
                        help="Override the configured log level.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    stats = subparsers.add_parser("stats", help="Views and likes of every upload of a channel.")
    stats.add_argument("channel_handle")
    stats.add_argument("api_key")
    stats.add_argument("sort_key", nargs="?", default=None, help="likes or views")
    stats.add_argument("sort_order", nargs="?", default=None, help="asc (default) or desc")

    dump_subs = subparsers.add_parser("dump-subs", help="Subscriptions of the token's owner.")
    dump_subs.add_argument("oauth_token")

    channel_meta = subparsers.add_parser("channel-meta", help="Snippet and statistics of a channel.")
    channel_meta.add_argument("channel_handle")
    channel_meta.add_argument("api_key")

    playlists = subparsers.add_parser("playlists", help="Public playlists of a channel.")
    playlists.add_argument("channel_handle")
    playlists.add_argument("api_key")

    search_videos = subparsers.add_parser("search-videos", help="Search videos within a channel.")
    search_videos.add_argument("channel_handle")
    search_videos.add_argument("api_key")
    search_videos.add_argument("query")

    return parser


def run_command(args: argparse.Namespace, config: AppConfig):
    """Dispatch parsed arguments to the matching command."""
    if args.command == "dump-subs":
        run_subscriptions(YouTubeClient.from_oauth_token(args.oauth_token), config)
        return

    youtube_client = YouTubeClient.from_api_key(args.api_key)

    if args.command == "stats":
        run_stats(youtube_client, config, args.channel_handle, args.sort_key, args.sort_order)
    elif args.command == "channel-meta":
        run_channel_meta(youtube_client, args.channel_handle)
    elif args.command == "playlists":
        run_playlists(youtube_client, config, args.channel_handle)
    elif args.command == "search-videos":
        run_search_videos(youtube_client, config, args.channel_handle, args.query)


def main(argv: Optional[List[str]] = None):
    """Main execution entry for the CLI."""
    args = build_parser().parse_args(argv)

    config = load_configuration(args.config)
    if args.log_level:
        config = config.with_log_level(args.log_level)

    log = setup_logging(config)
    log.debug(f"Running {args.command} with {config!r}")

    try:
        run_command(args, config)
    except YouTubeClientError as e:
        log.error(f"{args.command} failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
