from .utils import setup_logging, CHANGE  # registers Logger.change
from .config import Settings, settings
from .log_level import LogLevel

__all__ = [
    'setup_logging',
    'CHANGE',
    'Settings',
    'settings',
    'LogLevel'
]
