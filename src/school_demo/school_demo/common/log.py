from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(*, debug: bool = False) -> None:
    """Configure the root logger once per process.

    ``LOG_LEVEL`` overrides the level derived from ``debug``.
    """
    default_level = "DEBUG" if debug else "INFO"
    level_name = os.getenv("LOG_LEVEL", default_level).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
