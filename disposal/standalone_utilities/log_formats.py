"""Colorized console loggers, one handler per named logger."""
import logging
from os import environ

LEVEL_COLORS = {
    logging.DEBUG: '\033[90m',
    logging.INFO: '\033[34m',
    logging.WARNING: '\033[33m',
    logging.ERROR: '\033[31m',
    logging.CRITICAL: '\033[1;31m',
}
RESET = '\033[0m'
LOG_LEVEL_VARIABLE = 'DISPOSAL_LOG_LEVEL'


class ColorizedFormatter(logging.Formatter):
    def __init__(self):
        super().__init__(fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s', datefmt='%H:%M:%S')

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno, '')
        return color + message + RESET


def get_default_level() -> int:
    name = environ.get(LOG_LEVEL_VARIABLE, 'INFO').upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f'Unknown log level in {LOG_LEVEL_VARIABLE}: {name}')
    return level


def colorized_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not any(isinstance(h.formatter, ColorizedFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(ColorizedFormatter())
        logger.addHandler(handler)
    logger.setLevel(get_default_level())
    return logger


def set_package_level(level: int) -> None:
    """Sets the level on every logger already created under this package."""
    for name in list(logging.root.manager.loggerDict):
        if name == 'disposal' or name.startswith('disposal.'):
            logging.getLogger(name).setLevel(level)
