"""
Logger Service Constants

Local constants for the logger service to avoid hardcoded values
and provide centralized configuration for logger-specific settings.
"""

# ====================================================================
# CONSOLE SINK CONSTANTS
# ====================================================================

CONSOLE_FORMAT = (
    "<dim>[{time:YYYY-MM-DD HH:mm:ss}]</dim> "
    "<level>{level: <8}</level> "
    "<cyan>{extra[source]}:{extra[logger_name]}</cyan> "
    "{message} <dim>{extra[context]}</dim>"
)

# ====================================================================
# FILE SINK CONSTANTS
# ====================================================================

LOG_FILE_NAME = "ubergallery.log"
LOG_FILE_ROTATION = "10 MB"
LOG_FILE_RETENTION = "14 days"
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{extra[source]}:{extra[logger_name]} | {message} | {extra[context]}"
)
