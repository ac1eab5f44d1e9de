from enum import Enum

class LogLevel(str, Enum):
    """Log level settings for application"""
    NONE = "none"           # No logging
    ERRORS_ONLY = "errors"  # Only log errors
    CHANGES = "changes"     # Creates, updates and deletes
    VERBOSE = "verbose"     # Changes + informational messages
    DEBUG = "debug"         # All logging including queries
