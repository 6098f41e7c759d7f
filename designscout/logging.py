"""Logging utilities for designscout commands and pipelines."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "designscout"

_LEVEL_NAMES = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class LevelFilterAdapter(logging.LoggerAdapter):
    """Logger adapter that drops records below a per-pipeline threshold."""

    def __init__(self, logger: logging.Logger, threshold: int) -> None:
        super().__init__(logger, {})
        self.threshold = threshold

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802 - logging API name
        if level < self.threshold:
            return False
        return self.logger.isEnabledFor(level)


def resolve_level(value: int | str | None, default: int = logging.INFO) -> int:
    """Translate a config-style level name (or number) into a logging level."""
    if value is None:
        return default
    if isinstance(value, int):
        return value
    level = _LEVEL_NAMES.get(value.strip().lower())
    if level is None:
        raise ValueError(f"Unknown log level: {value}")
    return level


def get_logger(
    name: str | None = None, *, level: int | None = None
) -> logging.Logger | LevelFilterAdapter:
    """Return a module-scoped logger under the designscout hierarchy.

    When ``level`` is given the logger is wrapped so records below it are
    discarded regardless of the process-wide configuration.
    """
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    logger = logging.getLogger(full_name)
    if level is None:
        return logger
    return LevelFilterAdapter(logger, level)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the designscout logger with console output and optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[designscout] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["LevelFilterAdapter", "configure_logging", "get_logger", "resolve_level"]
