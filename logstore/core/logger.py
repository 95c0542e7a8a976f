"""
Main Logger class - Append-only log file manager
"""

from __future__ import annotations
from typing import Any, List, Optional
import logging

from logstore.core.errors import LoggerError
from logstore.core.log_entry import LogEntry, get_date_time
from logstore.core.logger_config import LoggerConfig
from logstore.filters.date_filter import DateFilter
from logstore.formatters.block_formatter import BlockFormatter
from logstore.parsers.block_parser import BlockParser
from logstore.writers.file_storage import FileStorage

logger = logging.getLogger(__name__)


class Logger:
    """
    A simple logger for storing timestamped messages in a log file.

    Each message is stamped with the current UTC time and appended as a
    block of the form::

        <-- LOG -->
        [YYYY-MM-DD hh:mm:ss] message

    The file is created on the first log() call. Nothing is cached: every
    read goes back to the file.

    Example:
        logger = Logger("/path/to/log/file.log")
        logger.log("This is a simple log message")

        logger.get_logs()
        # [LogEntry(date='2024-10-12 12:34:56', message='This is a simple log message')]

        logger.get_messages()
        # ['This is a simple log message']

        logger.get_from("2024-10-12 00:00:00")
        # ['This is a simple log message']

        logger.clear()

    Note:
        No locking is done. Concurrent log() calls on the same path, from
        threads or processes, race at the OS level and may interleave or
        lose blocks. Callers that need ordering must serialize the calls.

    Raises:
        LoggerError: If any file operation fails or an argument is invalid
    """

    def __init__(self, path: Any, config: Optional[LoggerConfig] = None):
        """
        Create a logger instance.

        Args:
            path: The path to the log file
            config: Encoding settings (default: LoggerConfig.default())

        Raises:
            LoggerError: If path is not a string
        """
        if not isinstance(path, str):
            raise LoggerError(f"Invalid path: {path}")

        self._path = path
        self._config = config or LoggerConfig.default()
        self._storage = FileStorage(self._config)
        self._formatter = BlockFormatter()

    @property
    def path(self) -> str:
        """The path of the log file."""
        return self._path

    def get_path(self) -> str:
        """Return the path of the log file."""
        return self._path

    def log(self, message: Any) -> None:
        """
        Log a message to the log file.

        Args:
            message: The message to be logged. Must be a string.

        Raises:
            LoggerError: If the message is not a string or the append fails
        """
        if not isinstance(message, str):
            raise LoggerError(f"Invalid log message: {message}")

        entry = LogEntry(date=get_date_time(), message=message)
        try:
            self._storage.append_text(self._path, self._formatter.format(entry))
        except (OSError, UnicodeEncodeError) as e:
            raise LoggerError(str(e)) from e

        logger.debug("Appended log entry dated %s to %s", entry.date, self._path)

    def clear(self) -> None:
        """
        Clear all log messages in the log file.

        Raises:
            LoggerError: If the file write fails
        """
        try:
            self._storage.write_text(self._path, "")
        except OSError as e:
            raise LoggerError(str(e)) from e

        logger.debug("Cleared log file %s", self._path)

    def get_logs(self) -> List[LogEntry]:
        """
        Retrieve all log entries.

        Returns:
            Log entries in file order

        Raises:
            LoggerError: If the log file cannot be read (including when missing)
        """
        try:
            content = self._storage.read_text(self._path)
        except (OSError, UnicodeDecodeError) as e:
            raise LoggerError(str(e)) from e

        parser = BlockParser()
        entries = parser.parse(content)
        if parser.dropped:
            logger.debug(
                "Skipped %d malformed block(s) in %s", parser.dropped, self._path
            )
        return entries

    def get_messages(self) -> List[str]:
        """
        Retrieve all log messages.

        Returns:
            Messages in file order

        Raises:
            LoggerError: If the log file cannot be read
        """
        return [entry.message for entry in self.get_logs()]

    def get_from(self, date: Any) -> List[str]:
        """
        Retrieve log messages logged strictly after a date.

        Args:
            date: UTC date, 'YYYY-MM-DD hh:mm:ss'

        Returns:
            Messages in file order

        Raises:
            LoggerError: If date is invalid or the log file cannot be read
        """
        date_filter = DateFilter(date)
        return [entry.message for entry in date_filter.apply(self.get_logs())]

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(path='{self._path}')"
