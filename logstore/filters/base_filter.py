"""
Base filter interface
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

from logstore.core.log_entry import LogEntry


class BaseFilter(ABC):
    """
    Abstract base class for log filters.

    Filters determine whether a parsed log entry is kept or discarded.
    """

    @abstractmethod
    def should_log(self, entry: LogEntry) -> bool:
        """
        Determine if a log entry should be kept.

        Args:
            entry: The log entry to filter

        Returns:
            True if the entry should be kept, False otherwise
        """
        pass

    def apply(self, entries: Iterable[LogEntry]) -> List[LogEntry]:
        """Keep matching entries, preserving order."""
        return [entry for entry in entries if self.should_log(entry)]

    def __call__(self, entry: LogEntry) -> bool:
        """Allow filters to be callable."""
        return self.should_log(entry)
