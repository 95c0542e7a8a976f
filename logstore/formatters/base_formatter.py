"""
Formatter interface for log file blocks
"""

from abc import ABC, abstractmethod
from logstore.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """Turns a LogEntry into the text appended to the log file."""

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Render an entry for storage.

        Args:
            entry: Entry holding the UTC date and message

        Returns:
            Text to append, including any delimiter and trailing newlines
        """
        pass

    def __call__(self, entry: LogEntry) -> str:
        """Shortcut for format()."""
        return self.format(entry)
