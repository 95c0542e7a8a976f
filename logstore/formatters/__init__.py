"""
Log formatters module

Turns log entries into the text blocks stored in the log file.
"""

from logstore.formatters.base_formatter import BaseFormatter
from logstore.formatters.block_formatter import BlockFormatter, LOG_DELIMITER

__all__ = [
    "BaseFormatter",
    "BlockFormatter",
    "LOG_DELIMITER",
]
