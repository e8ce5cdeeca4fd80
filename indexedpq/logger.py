"""Logging setup shared by the benchmark runner and the CLI."""

import logging
import os

ROOT_LOGGER = "indexedpq"
LOG_LEVEL_ENV = "INDEXEDPQ_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMAT = "%(levelname)s %(asctime)s %(name)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%m-%d %H:%M:%S"

_root_configured = False
_handler = None


def resolve_level(name: str):
    """Return the numeric level for ``name``, or None if logging does not know it."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else None


def _configure_root() -> None:
    global _root_configured, _handler
    if _root_configured:
        return
    root = logging.getLogger(ROOT_LOGGER)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    if _handler not in root.handlers:
        root.addHandler(_handler)
    root.propagate = False

    requested = os.getenv(LOG_LEVEL_ENV, "INFO")
    level = resolve_level(requested)
    root.setLevel(logging.INFO if level is None else level)
    _root_configured = True
    if level is None:
        root.warning("Unknown %s=%r, using INFO", LOG_LEVEL_ENV, requested)


def init_logger(name: str) -> logging.Logger:
    """Return a logger under the package root, configuring the root once."""
    _configure_root()
    return logging.getLogger(name)


def set_level(level: str) -> None:
    _configure_root()
    resolved = resolve_level(level)
    if resolved is None:
        raise ValueError(f"Unknown log level: {level!r}")
    logging.getLogger(ROOT_LOGGER).setLevel(resolved)
