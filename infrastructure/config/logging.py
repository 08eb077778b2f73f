"""日志配置"""

import logging
import os
from typing import Optional

from infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Settings, logger: Optional[logging.Logger] = None) -> logging.Logger:
    """
    按配置初始化日志

    Args:
        settings: 应用配置
        logger: 要配置的日志记录器，默认为根记录器

    Returns:
        配置好的日志记录器
    """
    logger = logger or logging.getLogger()
    logger.setLevel(settings.log_level)

    formatter = logging.Formatter(LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    log_path = os.path.abspath(settings.log_file) if settings.log_file else ""
    has_file_handler = any(
        isinstance(h, logging.FileHandler) and h.baseFilename == log_path
        for h in logger.handlers
    )

    if settings.log_file and not has_file_handler:
        log_dir = os.path.dirname(settings.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
