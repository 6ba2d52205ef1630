# File: src/chaingate/monitoring/logging_config.py

import logging
import logging.handlers
import os
from datetime import datetime
from typing import Optional

from ..utils.config import Config
from ..utils.logger import LOG_FORMAT

DEBUG_ENVIRONMENTS = (
    Config.ENVIRONMENT_DEV,
    Config.ENVIRONMENT_STAGING,
    Config.ENVIRONMENT_PROD,
)


class LogConfig:
    def __init__(
        self,
        environment: str = Config.ENVIRONMENT_DEV,
        log_dir: Optional[str] = None,
        level: Optional[str] = None,
        max_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        logger_name: str = "chaingate",
    ):
        self.environment = environment
        self.log_dir = log_dir
        self.level = level
        self.max_size = max_size
        self.backup_count = backup_count
        self.logger_name = logger_name

    def resolve_level(self) -> int:
        if self.level:
            level = logging.getLevelName(self.level.upper())
            if isinstance(level, int):
                return level
        # Named deployment environments get verbose logs, anything else INFO
        if self.environment in DEBUG_ENVIRONMENTS:
            return logging.DEBUG
        return logging.INFO

    def setup_logging(self) -> logging.Logger:
        level = self.resolve_level()
        logger = logging.getLogger(self.logger_name)
        logger.setLevel(level)

        # Replace handlers from an earlier call
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            log_file = os.path.join(
                self.log_dir,
                f'chaingate_{datetime.now().strftime("%Y%m%d")}.log'
            )
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=self.max_size,
                backupCount=self.backup_count
            )
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            file_handler.setLevel(logging.DEBUG)
            logger.addHandler(file_handler)

        return logger
