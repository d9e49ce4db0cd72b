import logging
import sys

import loguru

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

# Configure Loguru
logger = loguru.logger
logger.remove() # Remove default handlers
logger.add(
    sys.stderr,
    level="INFO", # Default until configure_logging() runs
    format=LOG_FORMAT,
    colorize=True,
)


class InterceptHandler(logging.Handler):
    """Forwards standard-library log records (e.g. telebot's) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller outside the logging module so loguru reports the right origin
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = "INFO", intercept: tuple = ("TeleBot",), intercept_level: int = logging.WARNING) -> None:
    """
    Re-applies the loguru sink at the requested level and routes the given
    stdlib loggers through it.

    Args:
        level: loguru level name for the application sink.
        intercept: Names of stdlib loggers to forward into loguru.
        intercept_level: Level set on the intercepted stdlib loggers.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, colorize=True)

    for name in intercept:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.setLevel(intercept_level)
        std_logger.propagate = False
