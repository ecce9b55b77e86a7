"""
Configuration Loader
Loads and validates YAML configuration files
"""

from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .app_config import AppConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
MAX_PAGE_SIZE = 50


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from YAML files.

    Responsibilities:
    - Read YAML configuration file
    - Validate types and value ranges
    - Fill in defaults for absent fields
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Path):
        """
        Initialize ConfigLoader with path to config file.

        Args:
            config_path: Path to YAML configuration file
        """
        self._config_path = config_path

    def load(self) -> AppConfig:
        """
        Load and validate configuration from YAML file.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        config_data = self._load_yaml()
        defaults = AppConfig()

        return AppConfig(
            playlist_items_page_size=self._validate_page_size(
                config_data, "playlist_items_page_size", defaults.playlist_items_page_size
            ),
            playlists_page_size=self._validate_page_size(
                config_data, "playlists_page_size", defaults.playlists_page_size
            ),
            video_search_page_size=self._validate_page_size(
                config_data, "video_search_page_size", defaults.video_search_page_size
            ),
            subscriptions_page_size=self._validate_page_size(
                config_data, "subscriptions_page_size", defaults.subscriptions_page_size
            ),
            max_pages=self._validate_max_pages(config_data, defaults.max_pages),
            log_level=self._validate_log_level(config_data, defaults.log_level),
            log_file=self._validate_log_file(config_data)
        )

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML file and return parsed data. An empty file means all defaults."""
        if not self._config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self._config_path}"
            )

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            if data is None:
                return {}

            if not isinstance(data, dict):
                raise ConfigValidationError(
                    "Configuration must be a YAML mapping/dictionary"
                )

            return data

        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax: {e}")

    def _validate_page_size(self, config: Dict[str, Any], key: str, default: int) -> int:
        """Validate a maxResults field (1 to 50, as accepted by the API)."""
        if key not in config:
            return default

        value = config[key]

        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigValidationError(
                f"Field '{key}' must be an integer, got {type(value).__name__}"
            )

        if not (1 <= value <= MAX_PAGE_SIZE):
            raise ConfigValidationError(
                f"Field '{key}' must be between 1 and {MAX_PAGE_SIZE}, got {value}"
            )

        return value

    def _validate_max_pages(self, config: Dict[str, Any], default: Optional[int]) -> Optional[int]:
        """Validate max_pages field (optional, null = unbounded)."""
        if "max_pages" not in config:
            return default

        max_pages = config["max_pages"]

        if max_pages is None:
            return None

        if not isinstance(max_pages, int) or isinstance(max_pages, bool):
            raise ConfigValidationError(
                f"Field 'max_pages' must be an integer or null, got {type(max_pages).__name__}"
            )

        if max_pages <= 0:
            raise ConfigValidationError(
                f"Field 'max_pages' must be greater than 0 or null, got {max_pages}"
            )

        return max_pages

    def _validate_log_level(self, config: Dict[str, Any], default: str) -> str:
        """Validate log_level field."""
        if "log_level" not in config:
            return default

        log_level = config["log_level"]

        if not isinstance(log_level, str):
            raise ConfigValidationError(
                f"Field 'log_level' must be a string, got {type(log_level).__name__}"
            )

        log_level = log_level.strip().upper()
        if log_level not in LOG_LEVELS:
            raise ConfigValidationError(
                f"Field 'log_level' must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        return log_level

    def _validate_log_file(self, config: Dict[str, Any]) -> Optional[str]:
        """Validate log_file field (optional)."""
        log_file = config.get("log_file")

        if log_file is None:
            return None

        if not isinstance(log_file, str):
            raise ConfigValidationError(
                f"Field 'log_file' must be a string or null, got {type(log_file).__name__}"
            )

        if not log_file.strip():
            raise ConfigValidationError("Field 'log_file' cannot be empty")

        return log_file.strip()
