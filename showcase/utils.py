from pathlib import Path
import logging
from typing import Optional

from .log_level import LogLevel

CHANGE = 25  # Between INFO (20) and WARNING (30)

logging.addLevelName(CHANGE, 'CHANGE')

# Add convenience method
def change(self, message, *args, **kwargs):
    if self.isEnabledFor(CHANGE):
        self.log(CHANGE, message, *args, **kwargs)


logging.Logger.change = change

def setup_logging(log_dir: Optional[Path], log_level: LogLevel) -> logging.Logger:
    """Configure the ``showcase`` logger that every module logs through.

    Args:
        log_dir: Directory where the log file will be stored, None for console only
        log_level: LogLevel enum specifying logging verbosity

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("showcase")

    # Clear any existing handlers
    logger.handlers = []
    logger.propagate = False

    level_map = {
        LogLevel.NONE: logging.CRITICAL + 1,
        LogLevel.ERRORS_ONLY: logging.ERROR,
        LogLevel.CHANGES: CHANGE,
        LogLevel.VERBOSE: logging.INFO,
        LogLevel.DEBUG: logging.DEBUG
    }

    if log_level != LogLevel.NONE:
        if log_dir:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_dir / "showcase.log")
            file_handler.setFormatter(
                logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            )
            logger.addHandler(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            logging.Formatter('%(levelname)s - %(message)s'))
        logger.addHandler(console_handler)

    logger.setLevel(level_map.get(log_level, logging.INFO))
    return logger

def has_text(value: Optional[str]) -> bool:
    """True when an incoming string should overwrite a stored one."""
    return value is not None and value.strip() != ""

def has_number(value) -> bool:
    """True when an incoming number should overwrite a stored one.

    Zero doubles as "not supplied", so a stored value can never be reset to 0
    through an update.
    """
    return value is not None and value != 0
