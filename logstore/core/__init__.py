"""
Core module for the log store

This module contains the fundamental classes:
- Logger: Log file facade (append, clear, read, filter)
- LogEntry: Parsed log entry data structure
- LoggerConfig: Configuration management
- LoggerError: Error raised by every failing operation
"""

from logstore.core.logger import Logger
from logstore.core.log_entry import LogEntry, get_date_time
from logstore.core.logger_config import LoggerConfig
from logstore.core.errors import LoggerError

__all__ = ["Logger", "LogEntry", "LoggerConfig", "LoggerError", "get_date_time"]
