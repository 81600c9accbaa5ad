import copy
import logging.config
from typing import Any

from uvicorn.config import LOGGING_CONFIG

from char_frequency import config


def build_logging_config(level: str | None = None) -> dict[str, Any]:
    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_config["formatters"].pop("access", None)
    log_config["handlers"].pop("access", None)
    log_config["formatters"]["default"]["fmt"] = "%(asctime)s " + log_config["formatters"]["default"]["fmt"]
    log_config["loggers"] = {
        "char_frequency": {
            "handlers": ["default"],
            "level": level or ("DEBUG" if config.DEBUG else config.LOG_LEVEL.upper()),
            "propagate": False,
        }
    }
    return log_config


def configure_logging(level: str | None = None) -> None:
    logging.config.dictConfig(build_logging_config(level))
