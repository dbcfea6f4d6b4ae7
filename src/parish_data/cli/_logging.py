"""Logging setup for the ``parish-data`` command line."""

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"

# Held at WARNING unless verbose.
_QUIET_LOGGERS = ("asyncio", "config")


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr, at DEBUG with ``--verbose`` and INFO otherwise.

    Any handlers already on the root logger are replaced, so repeated
    invocations in one process do not duplicate output. Cache hits, misses and
    invalidations are logged at DEBUG under ``parish_data``.
    """
    level = logging.DEBUG if verbose else logging.INFO
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    quiet_level = logging.NOTSET if verbose else logging.WARNING
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
    logging.getLogger("parish_data").debug("Logging configured at %s", logging.getLevelName(level))
