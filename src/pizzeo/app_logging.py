"""Logging setup for the ``pizzeo`` package logger.

Every module logs through ``logging.getLogger(__name__)`` under ``pizzeo``, so
one handler on that logger covers the API, the services and the adapters.
"""

import logging

LOGGER_NAME = "pizzeo"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the ``pizzeo`` logger.

    ``level`` is usually ``Settings.log_level``. ``create_app`` calls this for
    every app it builds, so repeated calls only adjust the level and never add
    a second handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
