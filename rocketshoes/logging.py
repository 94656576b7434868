# rocketshoes/logging.py
import logging
import os
import sys

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# per-request client chatter
QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Send records to stdout unless a host (uvicorn, pytest) already configured the root logger."""
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
