import logging
import os
from typing import Optional, Union

from .env import env_get

LOG_LEVEL_VAR = "EMPLOYEE_STREAMS_LOG_LEVEL"
LOG_FILE_VAR = "EMPLOYEE_STREAMS_LOG_FILE"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(
    level: Optional[Union[int, str]] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Setup basic logging configuration

    Args:
        level: Logging level, falls back to EMPLOYEE_STREAMS_LOG_LEVEL (default INFO)
        log_file: Optional log file path, falls back to EMPLOYEE_STREAMS_LOG_FILE

    Returns:
        logging.Logger: Logger for this module
    """
    if level is None:
        level = env_get(LOG_LEVEL_VAR, "INFO")
    if isinstance(level, str):
        level_name = level.upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name}")

    if log_file is None:
        log_file = env_get(LOG_FILE_VAR)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    return logging.getLogger(__name__)
