import os
from logging import config, getLevelName, getLogger

LOGGER_NAME = "ip_sonar"
LOG_LEVEL = getLevelName(os.getenv("LOG_LEVEL", "INFO"))  # DEBUG, WARNING, ERROR

log_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(levelname)-8s %(asctime)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        LOGGER_NAME: {"handlers": ["default"], "level": LOG_LEVEL, "propagate": False},
        "httpx": {"handlers": ["default"], "level": "WARNING", "propagate": False},
    },
}


def configure_logging() -> None:
    """Apply the package logging configuration.

    Libraries should not configure logging on import, so applications
    (e.g. run_example.py) call this explicitly.
    """
    config.dictConfig(log_config)


# Get the "ip_sonar" logger
logger = getLogger(LOGGER_NAME)
