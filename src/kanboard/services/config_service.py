"""Configuration service for loading kanboard.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models import BoardConfig, KanboardConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching application configuration."""

    CONFIG_FILE = "kanboard.yml"

    def __init__(self, project_root: Path) -> None:
        """Initialize the config service.

        Args:
            project_root: Directory containing kanboard.yml
        """
        self.project_root = project_root
        self._config: KanboardConfig | None = None
        self._config_error: str | None = None

    @property
    def config_path(self) -> Path:
        return self.project_root / self.CONFIG_FILE

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    def get_config(self) -> KanboardConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_board_config(self) -> BoardConfig:
        """Convenience method to get board configuration."""
        return self.get_config().board

    def reload(self) -> None:
        """Clear cached configuration, forcing reload on next access."""
        self._config = None
        self._config_error = None

    def _load_config(self) -> KanboardConfig:
        """Load configuration from file or return default."""
        config_path = self.config_path
        self._config_error = None

        if not config_path.exists():
            logger.debug("No %s found, using defaults", self.CONFIG_FILE)
            return KanboardConfig.default()

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            return self._fallback(f"Invalid YAML in {self.CONFIG_FILE}: {e}")
        except OSError as e:
            return self._fallback(f"Error reading {self.CONFIG_FILE}: {e}")

        if data is None:
            return self._fallback(f"{self.CONFIG_FILE} is empty")
        if not isinstance(data, dict):
            return self._fallback(f"{self.CONFIG_FILE} must contain a mapping")

        try:
            config = KanboardConfig(**data)
        except ValidationError as e:
            return self._fallback(f"Invalid {self.CONFIG_FILE}: {e}")

        logger.info(
            "Loaded %s with %d columns and %d boards",
            self.CONFIG_FILE,
            len(config.board.columns),
            len(config.boards),
        )
        return config

    def _fallback(self, message: str) -> KanboardConfig:
        self._config_error = message
        logger.warning(message)
        return KanboardConfig.default()
