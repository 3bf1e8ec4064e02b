"""Logging configuration for kanboard."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

LOGGER_NAME = "kanboard"

# Handlers installed here carry these names so a later call can find them
STDERR_HANDLER = "kanboard.stderr"
FILE_HANDLER = "kanboard.file"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _drop_own_handlers(logger: logging.Logger) -> None:
    """Detach and close handlers a previous setup_logging call installed."""
    for handler in list(logger.handlers):
        if handler.get_name() in (STDERR_HANDLER, FILE_HANDLER):
            logger.removeHandler(handler)
            handler.close()


def _attach(
    logger: logging.Logger,
    handler: logging.Handler,
    name: str,
    level: int,
    formatter: logging.Formatter,
) -> None:
    handler.set_name(name)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure the kanboard logger from verbosity and an optional log file.

    Repeated calls replace the handlers of the previous call rather than
    adding more; handlers installed by the embedding application are left
    alone. With verbose=0 and no log_file the logger gets no handlers of
    its own.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    logger = logging.getLogger(LOGGER_NAME)
    _drop_own_handlers(logger)

    if verbose == 0 and log_file is None:
        return

    level = logging.DEBUG if verbose >= 2 else logging.INFO
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if verbose > 0:
        _attach(logger, logging.StreamHandler(sys.stderr), STDERR_HANDLER, level, formatter)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_file), FILE_HANDLER, level, formatter)

    started = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("=" * 60)
    logger.info("kanboard starting | %s | level=%s", started, logging.getLevelName(level))
    logger.info("=" * 60)
