#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import threading

import coloredlogs

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class GeoLogger:
    """
    Per-class logger registry.
    Loggers are named "Geo.<ClassName>" so a host application can tune them as a group.
    """

    _loggers = {}
    _lock = threading.RLock()

    @staticmethod
    def getLogger(class_name):
        """Get a logger instance for the given class name."""
        with GeoLogger._lock:
            if class_name not in GeoLogger._loggers:
                GeoLogger._loggers[class_name] = logging.getLogger(f"Geo.{class_name}")
            return GeoLogger._loggers[class_name]


def _levelMethod(level, prefix=""):
    def log(self, msg, *args, **kwargs):
        self.logger.log(level, prefix + msg, *args, **kwargs)

    return log


def GEO_LOGGER(cls):
    """
    Class decorator giving cls a shared `logger` and the instance helpers
    debug/info/warning/error plus trace (debug with a "TRACE: " prefix).
    """
    cls.logger = GeoLogger.getLogger(cls.__name__)
    cls.debug = _levelMethod(logging.DEBUG)
    cls.info = _levelMethod(logging.INFO)
    cls.warning = _levelMethod(logging.WARNING)
    cls.error = _levelMethod(logging.ERROR)
    cls.trace = _levelMethod(logging.DEBUG, "TRACE: ")
    return cls


def setup_logging(log_level="INFO", logger_name="Geo"):
    """Install colored console output on the package loggers and return the logger."""
    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper())

    logger = logging.getLogger(logger_name)
    coloredlogs.install(level=log_level, logger=logger, fmt=LOG_FORMAT)

    # Keep numpy chatter out of debug sessions
    logging.getLogger("numpy").setLevel(logging.WARNING)
    return logger
