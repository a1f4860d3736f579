import logging
import sys


class Logger:
    """Configures the root logger once and hands out named loggers."""

    def __init__(self, log_format: str, log_level: str) -> None:
        self.log_format = log_format
        self.log_level = log_level.upper()

        logging.basicConfig(
            level=self.log_level,
            format=self.log_format,
            handlers=[logging.StreamHandler(sys.stdout)],
        )

    def get_logger(self, name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(self.log_level)
        return logger
