"""Package-local logging utilities.

This package is a library first. By default it emits no logs unless the host
application configures logging. CLI users can opt into logs via
``LINKSMITH_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import os
import sys

from loguru import logger as _loguru_logger

LOGGER_NAME = "linksmith"
logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
_loguru_logger.disable(LOGGER_NAME)

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_loguru_sink_id: int | None = None


def configure_logging(level: str | None = None) -> None:
    """Configure package logging for CLI/runtime diagnostics.

    This is opt-in. If neither ``level`` nor ``LINKSMITH_LOG_LEVEL`` is
    provided, configuration is skipped and both the stdlib logger and the
    loguru records emitted by the pipeline stay silent.
    """
    env_level = os.getenv("LINKSMITH_LOG_LEVEL", "")
    raw_level = level if level is not None else (env_level or "")
    resolved_level = raw_level.strip()
    global _loguru_sink_id
    pkg_logger = logging.getLogger(LOGGER_NAME)
    # Always reset handlers to avoid stale stderr streams across repeated CLI calls.
    pkg_logger.handlers = []
    # Only the sink added here is removed; host sinks are left alone.
    if _loguru_sink_id is not None:
        _loguru_logger.remove(_loguru_sink_id)
        _loguru_sink_id = None

    if not resolved_level:
        pkg_logger.addHandler(logging.NullHandler())
        pkg_logger.setLevel(logging.NOTSET)
        pkg_logger.propagate = False
        _loguru_logger.disable(LOGGER_NAME)
        return

    level_name = resolved_level.upper() if resolved_level.upper() in _LEVELS else "INFO"
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(getattr(logging, level_name))
    pkg_logger.propagate = False

    _loguru_sink_id = _loguru_logger.add(
        sys.stderr,
        level=level_name,
        filter=LOGGER_NAME,
        format="{time:YYYY-MM-DD HH:mm:ss,SSS} | {level} | {name} | {message}",
    )
    _loguru_logger.enable(LOGGER_NAME)
