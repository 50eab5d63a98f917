"""
Logging configuration for the scraper.
"""

import logging
import sys

from shop_scraper.config import config

# Create logger
logger = logging.getLogger('shop_scraper')
logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

if not logger.handlers:
    # Console handler with formatting
    console = logging.StreamHandler(sys.stdout)

    formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-5s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    console.setFormatter(formatter)

    logger.addHandler(console)


def get_logger(name):
    """Get a child logger for one component."""
    return logger.getChild(name)
