"""Console logging setup driven by a config and environment variables."""

import logging
import os
import sys
from dataclasses import dataclass, replace

__all__ = ["TRACE", "LoggerConfig", "level_from_env", "setup_logging"]

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

DEFAULT_PATTERN = "[%(asctime)s.%(msecs)03d] [%(levelname)s] [%(filename)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ENV_LEVELS = {
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "TRACE": TRACE,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "CRITICAL": logging.CRITICAL,
}

_LEVEL_NAMES = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}


@dataclass
class LoggerConfig:
    """Settings for the application logger."""

    name: str = "fusion_slam"
    dir: str = "../../logs"
    queue_size: int = 8192
    pattern: str = DEFAULT_PATTERN
    flush_interval: int = 3
    console_level: int = logging.INFO
    file_level: int = logging.INFO

    def log_filename(self):
        """Path of the log file inside ``dir``."""
        prefix = self.dir
        if prefix and not prefix.endswith("/"):
            prefix += "/"
        return f"{prefix}{self.name}.log"


def level_from_env(env_var, default):
    """Read a level name (INFO, DEBUG, TRACE, ERROR, WARN, CRITICAL) from the environment."""
    value = os.environ.get(env_var)
    if value is None:
        return default
    return _ENV_LEVELS.get(value, default)


class _ConsoleHandler(logging.StreamHandler):
    """Console handler installed by :func:`setup_logging`."""


def _level_name(level):
    return _LEVEL_NAMES.get(level, logging.getLevelName(level).lower())


def setup_logging(config=None):
    """Install the console handler on the root logger and return the named logger."""
    config = replace(config if config is not None else LoggerConfig())
    config.console_level = level_from_env("LOG_CONSOLE_LEVEL", config.console_level)

    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, _ConsoleHandler)]:
        root.removeHandler(handler)
        handler.close()

    console = _ConsoleHandler(sys.stdout)
    console.setLevel(config.console_level)
    console.setFormatter(logging.Formatter(config.pattern, datefmt=DATE_FORMAT))
    root.addHandler(console)
    root.setLevel(TRACE)

    logger = logging.getLogger(config.name)
    logger.info("Logger initialized with name: %s", config.name)
    logger.info("Logger directory: %s", config.dir)
    logger.info("Logger console level: %s", _level_name(config.console_level))
    logger.info("Logger file level: %s", _level_name(config.file_level))
    return logger