"""Project-wide logging setup for underbar.

Modules log through children of the ``underbar`` logger, obtained with
:func:`get_logger`, so one handler configured here covers the whole package.
Level and format come from :mod:`underbar.core.config`.
"""

import logging
import sys

from underbar.core.config import settings

__all__ = ["logger", "setup_logger", "get_logger"]

ROOT_NAME = "underbar"


def setup_logger(
    name: str = ROOT_NAME,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    A logger that already has handlers is returned untouched.

    Args:
        name: Logger name
        level: Log level name; defaults to ``settings.LOG_LEVEL``
        format_string: Record format; defaults to ``settings.LOG_FORMAT``

    Returns:
        Configured logger instance
    """
    configured = logging.getLogger(name)
    if configured.handlers:
        return configured

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt=format_string or settings.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    configured.addHandler(handler)
    configured.setLevel((level or settings.LOG_LEVEL).upper())
    configured.propagate = False
    return configured


def get_logger(module_name: str) -> logging.Logger:
    """Child of the project logger for ``module_name``.

    ``"underbar.functional.decorators"`` maps to the
    ``underbar.functional.decorators`` logger; names outside the package are
    nested under ``underbar``.
    """
    if module_name == ROOT_NAME or module_name.startswith(ROOT_NAME + "."):
        return logging.getLogger(module_name)
    return logger.getChild(module_name)


logger = setup_logger()
