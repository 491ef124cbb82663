"""Logging setup shared by the package modules."""

import logging

PACKAGE_LOGGER = "study_page_analyzer"


def _package_logger() -> logging.Logger:
    """Package logger owning the single stream handler; module loggers propagate to it."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def get_logger(name: str, level=None) -> logging.Logger:
    """Create or reuse a module-level logger writing through the package handler."""
    package_logger = _package_logger()
    logger = package_logger if name == PACKAGE_LOGGER else logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_package_level(level) -> None:
    """Apply a level (name or number) to every logger of this package."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    _package_logger().setLevel(level)
    for name, logger in logging.root.manager.loggerDict.items():
        if name.startswith(PACKAGE_LOGGER + ".") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
