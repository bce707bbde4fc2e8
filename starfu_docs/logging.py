"""Logging utilities for starfu_docs.

Library modules only ask for loggers through :func:`get_logger`; handlers are
installed once by the CLI through :func:`configure_logging`. Records are
prefixed with the emitting component (``discovery``, ``section``...) so a
warning about a skipped file can be traced to the step that produced it.
"""

from __future__ import annotations

import logging

_LOGGER_NAME = "starfu_docs"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the starfu_docs hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags onto a logging level.

    ``verbose`` wins over ``quiet``; neither flag reports progress at INFO.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


class _ComponentFilter(logging.Filter):
    """Expose the logger name relative to the package as ``component``."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name.startswith(f"{_LOGGER_NAME}."):
            name = name[len(_LOGGER_NAME) + 1 :]
        elif name == _LOGGER_NAME:
            name = "core"
        record.component = name
        return True


def configure_logging(
    *, verbose: bool = False, quiet: bool = False
) -> logging.Logger:
    """Configure the package logger with a single console handler."""
    level = resolve_level(verbose=verbose, quiet=quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI runs repeatedly.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.addFilter(_ComponentFilter())
    stream_handler.setFormatter(
        logging.Formatter("[starfu-docs] %(levelname)s %(component)s: %(message)s")
    )
    logger.addHandler(stream_handler)
    return logger


__all__ = ["configure_logging", "get_logger", "resolve_level"]
