"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Log Store - A minimal append-only text log file manager
"""

import logging

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from logstore.core.logger import Logger
from logstore.core.log_entry import LogEntry, get_date_time
from logstore.core.logger_config import LoggerConfig
from logstore.core.errors import LoggerError

from logstore import filters
from logstore import formatters
from logstore import parsers

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Logger",
    "LogEntry",
    "LoggerConfig",
    "LoggerError",
    "get_date_time",
    "filters",
    "formatters",
    "parsers",
]
