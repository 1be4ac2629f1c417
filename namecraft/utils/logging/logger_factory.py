"""Module: logger_factory.py

Author: Michael Economou
Date: 2026-10-12

logger_factory.py
Logger factory with caching.
Provides centralized logger management with thread-safe operations.
"""

import logging
import threading

from namecraft.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Maintains a single logger instance per module name, so repeated lookups
    from hot paths (preview generation runs per file) stay cheap.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name: Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance

        """
        if name is None:
            import inspect

            frame = inspect.currentframe()
            caller = frame.f_back if frame is not None else None
            name = caller.f_globals.get("__name__", "unknown") if caller else "unknown"

        with cls._lock:
            if name not in cls._loggers:
                logger = get_logger(name)

                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)

                cls._loggers[name] = logger

            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set logging level for all cached loggers.

        Args:
            level: Logging level (e.g., logging.DEBUG, logging.INFO)

        """
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def get_logger_count(cls) -> int:
        """Get number of cached loggers."""
        return len(cls._loggers)

    @classmethod
    def clear_cache(cls) -> None:
        """Clear all cached loggers."""
        with cls._lock:
            cls._loggers.clear()
            cls._global_level = None

    @classmethod
    def get_cached_names(cls) -> list[str]:
        """Get list of all cached logger names."""
        return list(cls._loggers.keys())


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience function for getting cached logger.

    Args:
        name: Logger name

    Returns:
        logging.Logger: Cached logger instance

    """
    return LoggerFactory.get_logger(name)
