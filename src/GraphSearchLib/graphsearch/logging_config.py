"""Настройка логирования для приложений, использующих graphsearch"""

import logging
from typing import Optional, Union

from . import config


def setup_logging(level: Optional[Union[int, str]] = None):
    """
    Настроить корневой логгер.

    Args:
        level: Уровень логирования (имя или число).
               Если None, берется из LOG_LEVEL
    """
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level_name = level.upper()
        level = getattr(logging, level_name, None)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=level,
        format=config.LOG_FORMAT
    )


def get_trace_logger() -> logging.Logger:
    """Логгер, в который по умолчанию пишется трассировка поиска"""
    return logging.getLogger(config.TRACE_LOGGER_NAME)
