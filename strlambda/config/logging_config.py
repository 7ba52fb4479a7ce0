"""Logging setup for the strlambda command line."""
import logging
import sys
import os
from typing import Optional

PACKAGE_LOGGER = "strlambda"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure logging for command line use. Library code never calls this;
    compilation decisions are logged at DEBUG under the 'strlambda' logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown
               names fall back to INFO.
        log_file: Optional path to a log file; its directory is created.
                  If None, logs go to stdout.

    Returns:
        The package logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    config = {'level': numeric_level, 'format': LOG_FORMAT}
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        config['filename'] = log_file
    else:
        config['stream'] = sys.stdout
    logging.basicConfig(**config)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    package_logger.debug("Logging initialized at %s level", logging.getLevelName(numeric_level))
    return package_logger

def get_logger(name: str) -> logging.Logger:
    """Returns the logger for a module name, e.g. get_logger(__name__)."""
    return logging.getLogger(name)
