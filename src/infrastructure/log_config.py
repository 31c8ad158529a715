import sys

from loguru import logger


def configure_logging(level: str = "INFO") -> None:
    """Send loguru output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level)
