"""Logging configuration"""
import logging.config

from .config import Settings


def setup_logging(config: Settings) -> None:
    """Console logging, plus a file when LOG_FILE is set"""
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        }
    }
    if config.LOG_FILE:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "standard",
            "filename": config.LOG_FILE,
            "mode": "a",
            "encoding": "utf-8",
        }

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s %(levelname)s:%(name)s:%(message)s"}
        },
        "handlers": handlers,
        "root": {
            "level": config.LOG_LEVEL,
            "handlers": list(handlers),
        },
        "loggers": {
            "second_brain": {"level": config.LOG_LEVEL},
            "sqlalchemy.engine": {"level": "INFO" if config.DEBUG else "WARNING"},
        },
    })
