from __future__ import annotations

import logging

LOGGER_NAME = "pingdom_client"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def setup_logging(verbose: bool, handler: logging.Handler | None = None) -> logging.Handler:
    """Send this package's log records to ``handler`` (stderr by default).

    Only the ``pingdom_client`` logger is touched; the root logger and its
    handlers stay the application's business.  Calling again replaces the
    handler installed by the previous call.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = handler or logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return _handler
