"""
Logging configuration using structlog for structured, JSON-based logging.

Logs go to stderr so that stdout carries only the messages meant for the
user (prompts and the final branch report).
"""

import logging
import sys

import structlog

DEFAULT_LOG_LEVEL = "WARNING"
_VERBOSITY_LEVELS = {0: DEFAULT_LOG_LEVEL, 1: "INFO"}


def level_for_verbosity(verbose: int, log_level: str | None = None) -> str:
    """Resolve the effective log level.

    An explicit ``log_level`` wins. Otherwise ``-v`` selects INFO and
    ``-vv`` (or more) selects DEBUG.
    """
    if log_level:
        return log_level.upper()
    return _VERBOSITY_LEVELS.get(verbose, "DEBUG")


def configure_logging(log_level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structured logging with JSON output.

    Sets up structlog with a pipeline of processors for rich, structured logs
    that include timestamps, log levels, stack traces, and contextual information.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelNamesMapping()[log_level.upper()]),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
