"""Process logging configuration for the command line front-end."""

from __future__ import annotations

import logging

PACKAGE_LOGGER_NAME = "cloud_api_manager"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "cloud_api_manager.stderr"


def level_for_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int = 0) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    A handler left by an earlier call is replaced, so output goes to the
    `sys.stderr` current at configuration time.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level_for_verbosity(verbosity))
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger.addHandler(handler)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return package_logger
