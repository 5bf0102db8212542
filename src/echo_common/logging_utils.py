import logging
import os

from echo_common.errors import StartupError

LOG_FORMAT = '%(asctime)s - %(message)s'


def configure_logging():
    """Configure root logging from LOG_LEVEL (default INFO)"""
    name = os.getenv('LOG_LEVEL') or 'INFO'
    level = logging.getLevelName(name.upper())
    # getLevelName returns "Level <name>" for names it does not know
    if not isinstance(level, int):
        raise StartupError(f"Unknown LOG_LEVEL {name!r}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
