"""Logging configuration for the suggestion engine.

Records emitted while a file is being validated carry that file's path,
taken from ``lint_file_ctx`` (set by ``track_validation``).
"""

import logging
import sys
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from suggest_members.config.settings import Settings

LOGGER_NAME = "suggest_members"
LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(lint_file)s%(message)s"

# Path of the file currently being validated
lint_file_ctx: ContextVar[str | None] = ContextVar("lint_file", default=None)


class LintFileFilter(logging.Filter):
    """Adds ``lint_file`` (``"[<path>] "`` or empty) to every record."""

    def filter(self, record):
        lint_file = lint_file_ctx.get()
        record.lint_file = f"[{lint_file}] " if lint_file else ""
        return True


def _attach_filter(handler: logging.Handler) -> None:
    if not any(isinstance(f, LintFileFilter) for f in handler.filters):
        handler.addFilter(LintFileFilter())


def configure_logging(settings: "Settings | None" = None) -> logging.Logger:
    """
    Configure and return the package logger.

    The level follows ``settings.debug`` (``SUGGEST_DEBUG`` in the environment
    or ``.env``); the process-wide settings are used when none are given.
    """
    if settings is None:
        from suggest_members.config.settings import get_settings

        settings = get_settings()

    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    logger = logging.getLogger(LOGGER_NAME)
    for handler in [*logger.handlers, *logging.root.handlers]:
        _attach_filter(handler)

    if settings.debug:
        logger.setLevel(logging.DEBUG)
        logger.debug("Debug logging enabled")
    else:
        logger.setLevel(logging.INFO)

    return logger


logger = logging.getLogger(LOGGER_NAME)
