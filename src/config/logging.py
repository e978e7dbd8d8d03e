import logging
from logging.config import dictConfig


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the API process."""
    level = (level or "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,  # keep uvicorn loggers
            "formatters": {
                "plain": {
                    "format": "%(asctime)s %(levelname)-5s %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
            },
            "handlers": {
                "stream": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "plain",
                }
            },
            "root": {
                "level": level,
                "handlers": ["stream"],
            },
            "loggers": {
                "uvicorn": {"level": "INFO", "handlers": [], "propagate": True},
                "uvicorn.access": {"level": "INFO", "handlers": [], "propagate": True},
                # httpx logs every request at INFO
                "httpx": {"level": "WARNING"},
            },
        }
    )
