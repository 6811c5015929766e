import logging
from logging import config as logging_config

# S3 clients log every request at DEBUG/INFO
NOISY_LOGGERS = ("botocore", "boto3", "aiobotocore", "aioboto3", "urllib3")

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Colors the level name; the record itself is left unchanged."""

    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[36m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[41m",
    }
    RESET = "\x1b[0m"

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        record.levelname = f"{self.LEVEL_COLORS.get(record.levelno, '')}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def _formatter(fmt: str) -> dict:
    return {"()": "gallerygate.logging_config.ColoredFormatter", "format": fmt, "datefmt": DATE_FORMAT}


def configure_logging(level: str = "INFO") -> None:
    """Send application, uvicorn and gallery event logs to stdout."""
    cfg = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": _formatter("%(asctime)s %(levelname)-5s [%(name)s] %(message)s"),
            "access": _formatter("%(asctime)s %(levelname)-5s %(message)s"),
        },
        "handlers": {
            "default": {"class": "logging.StreamHandler", "formatter": "default", "stream": "ext://sys.stdout"},
            "access": {"class": "logging.StreamHandler", "formatter": "access", "stream": "ext://sys.stdout"},
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": level, "propagate": False},
            "uvicorn.access": {"handlers": ["access"], "level": level, "propagate": False},
            "gallerygate": {"level": level},
        },
        "root": {"handlers": ["default"], "level": level},
    }
    cfg["loggers"].update({name: {"level": "WARNING"} for name in NOISY_LOGGERS})

    logging_config.dictConfig(cfg)


__all__ = ["ColoredFormatter", "configure_logging"]
