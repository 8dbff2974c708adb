# log.py
# Console logging setup for the CLI; library modules only call getLogger(__name__).

from __future__ import annotations
import logging

_LOGGER_CONFIGURED = False


def setup_logging(level: int = logging.WARNING) -> None:
    """Attach one stderr handler to the root logger (idempotent)."""
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        logging.getLogger().setLevel(level)
        return

    logger = logging.getLogger()
    logger.setLevel(level)
    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    _LOGGER_CONFIGURED = True
