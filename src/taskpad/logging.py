"""Structured logging for taskpad.

Log lines go to stderr so they never interleave with the task table, which
rich prints to stdout. ``log_format`` picks between a console renderer for
people and one JSON object per line for tools.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.typing import FilteringBoundLogger, Processor

if TYPE_CHECKING:
    from taskpad.config import TaskpadSettings

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _renderers(log_format: str) -> list[Processor]:
    if log_format == "json":
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [
        structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )
    ]


def configure_logging(settings: "TaskpadSettings | None" = None) -> None:
    """Point structlog at stderr with the level and format from settings.

    Calling it again replaces the previous setup. Loggers are not cached,
    so module-level loggers follow the latest call.
    """
    level = _LEVELS[settings.log_level] if settings is not None else logging.WARNING
    log_format = settings.log_format if settings is not None else "console"

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            *_renderers(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # prompt_toolkit runs on asyncio, which logs its internals through stdlib logging
    logging.getLogger("asyncio").setLevel(max(level, logging.WARNING))


def bind_context(**values: object) -> None:
    """Add key/values to every log line in the current context.

    TaskApp binds the running command name this way:

        bind_context(command="delete")
        logger.debug("executing_command")  # carries command="delete"
    """
    structlog.contextvars.bind_contextvars(**values)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


class Loggers:
    """One named logger per layer."""

    @staticmethod
    def cli() -> FilteringBoundLogger:
        """Terminal UI: commands, dialogs, the prompt loop."""
        return structlog.get_logger("taskpad.cli")

    @staticmethod
    def store() -> FilteringBoundLogger:
        """TaskStore mutations and listener failures."""
        return structlog.get_logger("taskpad.store")
