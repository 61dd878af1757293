"""Logging setup for applications embedding flashlib.

Library modules only create loggers; applications call ``configure_logging``
once at startup to attach a handler.
"""

import logging
import sys
from typing import Optional

from flashlib.core.settings import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for flashlib.

    Args:
        level: Log level name; defaults to ``FlashSettings.log_level``
    """
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
