"""
Logging configuration for Practice Review

One console handler plus one file per day under the user logs directory.
"""

import logging
import os
import sys
import time
from pathlib import Path
from datetime import datetime

from ..config import Config

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggingConfig:
    """
    Logging configuration manager

    Provides static methods for setting up and getting loggers.
    """

    _initialized = False

    @staticmethod
    def resolve_level(level=None) -> int:
        """
        Pick the log level: explicit argument, then PRACTICE_REVIEW_LOG_LEVEL,
        then INFO.
        """
        if level is None:
            level = os.environ.get(Config.LOG_LEVEL_ENV, 'INFO')
        if isinstance(level, int):
            return level
        resolved = logging.getLevelName(str(level).upper())
        return resolved if isinstance(resolved, int) else logging.INFO

    @staticmethod
    def setup_logging(
        log_dir: Path = None,
        level=None,
        log_to_file: bool = True,
        log_to_console: bool = True
    ) -> logging.Logger:
        """
        Configure application logging

        Args:
            log_dir: Directory for daily log files
            level: Level name or number (see resolve_level)
            log_to_file: Enable file logging
            log_to_console: Enable console logging

        Returns:
            Package logger ('practice_review')
        """
        level = LoggingConfig.resolve_level(level)

        logger = logging.getLogger('practice_review')
        logger.setLevel(level)
        logger.handlers.clear()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        if log_to_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        if log_to_file and log_dir:
            try:
                log_dir.mkdir(parents=True, exist_ok=True)
                LoggingConfig.prune_old_logs(log_dir)
                log_file = log_dir / f"practice_review_{datetime.now().strftime('%Y%m%d')}.log"

                file_handler = logging.FileHandler(log_file, encoding='utf-8')
                file_handler.setLevel(level)
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)
            except OSError as e:
                logger.warning(f"Could not set up file logging: {e}")

        LoggingConfig._initialized = True
        return logger

    @staticmethod
    def prune_old_logs(log_dir: Path, keep_days: int = None) -> int:
        """
        Delete daily log files older than keep_days

        Returns:
            Number of files removed
        """
        keep_days = Config.LOG_RETENTION_DAYS if keep_days is None else keep_days
        cutoff = time.time() - keep_days * 86400
        removed = 0
        for log_file in log_dir.glob("practice_review_*.log"):
            try:
                if log_file.stat().st_mtime < cutoff:
                    log_file.unlink()
                    removed += 1
            except OSError:
                continue
        return removed

    @staticmethod
    def is_initialized() -> bool:
        return LoggingConfig._initialized

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Get a logger for a specific module (typically __name__)"""
        return logging.getLogger(name)


__all__ = ['LoggingConfig', 'LOG_FORMAT']
