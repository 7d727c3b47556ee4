"""Logging configuration for hueforge command-line tools.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are installed here, once, by whichever entry point owns the process.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path

__all__ = ["LOG_FORMAT", "parse_level", "setup_logging", "get_log_path"]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOG_FILENAME = "hueforge.log"
_LOG_DIR_ENV = "HUEFORGE_LOG_DIR"
_NOISY_LOGGERS: tuple[str, ...] = ("ruamel", "jsonschema")
_CONFIGURED = False
_LOG_PATH: Path | None = None


def parse_level(level: int | str) -> int:
    """Translate ``"debug"``/``"INFO"``/``20`` into a logging level number."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    return resolved


def setup_logging(
    level: int | str = logging.WARNING,
    *,
    log_dir: Path | str | None = None,
    console: bool = True,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
    force: bool = False,
) -> Path | None:
    """Configure root logging; returns the log file path when file logging is on.

    A rotating ``hueforge.log`` is written only when ``log_dir`` or the
    ``HUEFORGE_LOG_DIR`` environment variable names a directory. Console
    output goes to stderr so rendered themes on stdout stay clean.
    """

    global _CONFIGURED, _LOG_PATH
    if _CONFIGURED and not force:
        return _LOG_PATH

    numeric_level = parse_level(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: list[logging.Handler] = []

    log_path: Path | None = None
    target_dir = _resolve_log_dir(log_dir)
    if target_dir is not None:
        target_dir.mkdir(parents=True, exist_ok=True)
        log_path = target_dir / _LOG_FILENAME
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(level=numeric_level, handlers=handlers, force=True)
    logging.captureWarnings(True)
    _tune_external_loggers(numeric_level)

    _CONFIGURED = True
    _LOG_PATH = log_path
    return log_path


def get_log_path() -> Path | None:
    """Return the currently configured log file if available."""

    return _LOG_PATH


def _resolve_log_dir(log_dir: Path | str | None) -> Path | None:
    candidate = log_dir or os.environ.get(_LOG_DIR_ENV)
    if not candidate:
        return None
    return Path(candidate).expanduser()


def _tune_external_loggers(root_level: int) -> None:
    quiet_level = max(logging.WARNING, root_level)
    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(quiet_level)
