"""
Logging Helpers
^^^^^^^^^^^^^^^
Provides `get_logger` for module loggers and a `setup_logger` function
to configure logging using the packaged logger.cfg.
"""
import configparser
import logging
import logging.config
import os

CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "logger.cfg"
)


def get_logger(name: str) -> logging.Logger:
    """Get the logger for `name` without touching the logging configuration."""
    return logging.getLogger(name)


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with the provided name using the 'logger.cfg' file.
    """
    config = configparser.ConfigParser()
    config.read(CONFIG_PATH)
    logging.config.fileConfig(config, disable_existing_loggers=False)

    return get_logger(name)
