"""
Centralized logging configuration for the family tree console.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Master log file (default: ``logs/family_tree.log``), plus optional per-module
  logs when ``logging.per_module_files`` is enabled.
* Console logging at ``logging.console_level`` (WARNING by default) so log
  records do not interleave with the interactive menu.
* Optional log rotation controlled by ``config/family_tree.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from family_tree.config import TreeConfig, get_config
from family_tree.utils.pathing import resolve_project_path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
BASE_LOGGER_NAME = "family_tree"

# Cache so handlers are only created once per module
_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_log_dir: Path = resolve_project_path("logs")
_rotate_logs: bool = False
_per_module_files: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _level(name: object, fallback: int) -> int:
    return getattr(logging, str(name).upper(), fallback)


def _ensure_log_dir(cfg: Optional[TreeConfig] = None) -> Path:
    """Resolve and create the log directory from configuration."""
    global _log_dir
    cfg = cfg or get_config()

    log_dir = resolve_project_path(cfg.logging.get("dir") or "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    _log_dir = log_dir
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if _rotate_logs:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger(cfg: Optional[TreeConfig] = None) -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level, _rotate_logs, _per_module_files

    if _base_configured:
        return logging.getLogger(BASE_LOGGER_NAME)

    cfg = cfg or get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _per_module_files = bool(cfg.logging.get("per_module_files", False))
    master_log_name = cfg.logging.get("file", "family_tree.log")

    base_level = _level(cfg.logging.get("level", "INFO"), logging.INFO)
    console_level = _level(cfg.logging.get("console_level", "WARNING"), logging.WARNING)
    debug_enabled = bool(getattr(cfg, "debug", False))

    _effective_level = logging.DEBUG if debug_enabled else base_level

    log_dir = _ensure_log_dir(cfg)
    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    # Master log handler
    base_logger.addHandler(_build_file_handler(log_dir / master_log_name, _effective_level))

    # Console handler
    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else console_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _drop_handlers(logger: Logger, *, module_only: bool = False) -> None:
    for handler in list(logger.handlers):
        if module_only and not getattr(handler, "is_module_handler", False):
            continue
        logger.removeHandler(handler)
        handler.close()


def _module_handler_exists(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    log_dir = _log_dir
    path = log_dir / f"{module_name.replace('.', '_')}.log"

    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    * Names outside the ``family_tree`` hierarchy are nested under it, so every
      module logger inherits the base console + master log handlers.
    * With ``per_module_files`` each module also gains ``logs/<module>.log``.
    * The debug flag in ``config/family_tree.yml`` forces DEBUG level output.
    """

    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)

    if logger_name != base_logger.name:
        if _per_module_files and not _module_handler_exists(logger):
            _attach_module_handler(logger, logger_name)
        logger.propagate = True
    else:
        # Base logger already owns the master + console handlers
        logger.propagate = False

    _logger_cache[logger_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())


def configure_logging(cfg: Optional[TreeConfig] = None) -> Logger:
    """Rebuild the handlers and levels from ``cfg`` (default: the active config).

    Module loggers are created at import time with whatever config was active
    then; command line overrides call this to apply theirs.
    """
    global _base_configured

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    _drop_handlers(base_logger)
    for logger_name, logger in _logger_cache.items():
        if logger_name != BASE_LOGGER_NAME:
            _drop_handlers(logger, module_only=True)

    _base_configured = False
    base_logger = _configure_base_logger(cfg)

    for logger_name, logger in _logger_cache.items():
        logger.setLevel(_effective_level)
        if logger_name != BASE_LOGGER_NAME and _per_module_files:
            _attach_module_handler(logger, logger_name)

    return base_logger
