"""Logging to <data dir>/semaphurl.log and stderr."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from .config import data_dir

MAX_LOG_BYTES = 5 * 1024 * 1024


def setup_logging(log_level_str="INFO", log_dir=None):
    """Set up logging to the data directory's semaphurl.log"""
    log_dir = log_dir or data_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / 'semaphurl.log'

    log_level = getattr(logging, str(log_level_str).upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=1, encoding='utf-8'),
            logging.StreamHandler(sys.stderr)
        ],
        force=True,
    )
    return logging.getLogger("semaphurl")
