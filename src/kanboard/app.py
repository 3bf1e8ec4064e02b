"""Wiring of settings, configuration and services."""

import logging

from .config import Settings
from .logging import setup_logging
from .services import (
    BoardService,
    ConfigService,
    FilterService,
    TaskService,
    WorkspaceService,
)

logger = logging.getLogger(__name__)


def build_workspace(settings: Settings | None = None) -> WorkspaceService:
    """Configure logging, load kanboard.yml and return a ready workspace."""
    settings = settings or Settings()
    setup_logging(settings.verbose, settings.log_file)

    config_service = ConfigService(settings.project_root)
    config = config_service.get_config()
    if config_service.has_config_error:
        logger.warning("Using default configuration: %s", config_service.config_error)

    board_service = BoardService(strict=settings.strict_drag)
    return WorkspaceService(
        config=config,
        board_service=board_service,
        task_service=TaskService(board_service.ids),
        filter_service=FilterService(),
    )
