import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

CONFIG_BASE_PATH = Path(os.path.abspath(os.path.dirname(__file__))) / Path("..")

config = {
    **dotenv_values(CONFIG_BASE_PATH / Path(".env.development")),  # common configurable settings
    **dotenv_values(CONFIG_BASE_PATH / Path(".env.local")),  # developer overrides
    **os.environ,  # environment overrides
}


LOGGERS = {}


def get_logger(name="htmlrestrict", level=None):
    if name in LOGGERS:
        return LOGGERS[name]

    fmt = "{asctime}.{msecs:03.0f} - {name} - {levelname} - {msg}"
    root_level = level or int(config.get("LOG_LEVEL", logging.INFO))
    app_level = level or int(config.get("LOG_LEVEL_APP", root_level))
    datefmt = r"%Y-%m-%dT%H:%M:%S"

    # configure root and third party loggers
    logging.basicConfig(format=fmt, level=root_level, datefmt=datefmt, style="{")

    handler = logging.StreamHandler()
    formatter = logging.Formatter(fmt, datefmt, style="{")
    handler.setFormatter(formatter)

    logger = logging.getLogger(name)
    logger.addHandler(handler)
    logger.setLevel(app_level)
    logger.propagate = False
    LOGGERS[name] = logger

    return logger


def is_truthy(value):
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class RestrictConfig:
    # Trace every parser event through the engine's logger
    DEBUG = is_truthy(config.get("RESTRICT_DEBUG", ""))

    # JSON file holding the default tag rules for the command line filter,
    # deny-all when unset
    RULES_FILE = config.get("RESTRICT_RULES_FILE")

    ENCODING = config.get("RESTRICT_ENCODING", "utf-8")
