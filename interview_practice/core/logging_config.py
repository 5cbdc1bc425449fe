"""
Description:
Configures the loguru sink used across the service.

Dependencies:
- loguru: For logging.
"""
import sys
from loguru import logger


def configure_logging(level: str = "INFO") -> None:
    """Replace the default loguru sink with one at the requested level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    logger.info(f"Logging configured at level {level.upper()}")
