from __future__ import annotations

import logging
import sys
from pathlib import Path

from incometax.config import Settings, get_settings

LOGGER_NAME = "incometax"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _open_file_sink(logger: logging.Logger, path: Path) -> logging.Handler | None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:
        logger.warning("Unable to open log file %s: %s", path, exc)
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def configure_logging(settings: Settings | None = None) -> list[logging.Handler]:
    """Attach handlers to the ``incometax`` logger and return them for removal."""
    settings = settings or get_settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level_number())

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handlers: list[logging.Handler] = [stream_handler]

    if settings.log_file:
        file_handler = _open_file_sink(logger, Path(settings.log_file))
        if file_handler is not None:
            handlers.append(file_handler)

    for handler in handlers:
        logger.addHandler(handler)
    logger.debug(
        "Logging configured: level=%s file=%s build=%s@%s",
        settings.log_level,
        settings.log_file,
        settings.build_version,
        settings.build_sha,
    )
    return handlers


def detach_handlers(handlers: list[logging.Handler]) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in handlers:
        logger.removeHandler(handler)
        handler.close()
