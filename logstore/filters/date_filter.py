"""
Date filter

Keeps entries logged strictly after a threshold date
"""

import re
from typing import Any, Pattern

from logstore.core.errors import LoggerError
from logstore.core.log_entry import LogEntry, parse_date_time
from logstore.filters.base_filter import BaseFilter

DATE_PATTERN: Pattern = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", re.ASCII)


class DateFilter(BaseFilter):
    """
    Filter log entries by date.

    Dates are compared as UTC instants. An entry dated exactly at the
    threshold is excluded.
    """

    def __init__(self, date: Any):
        """
        Initialize date filter.

        Args:
            date: Threshold date, 'YYYY-MM-DD hh:mm:ss' (UTC)

        Raises:
            LoggerError: If date is not a string or has the wrong format

        Example:
            # Entries logged after midnight, 12 Oct 2024
            filter = DateFilter("2024-10-12 00:00:00")
        """
        if not isinstance(date, str):
            raise LoggerError(f"Invalid date: {date}")

        if not DATE_PATTERN.fullmatch(date):
            raise LoggerError("Invalid date! Expected: YYYY-MM-DD hh:mm:ss")

        self.date = date
        self._threshold = parse_date_time(date)

    def should_log(self, entry: LogEntry) -> bool:
        """
        Check if entry is strictly after the threshold.

        Args:
            entry: Log entry to check

        Returns:
            True if entry date is later than the threshold
        """
        # Dates that are not real calendar instants never compare as later
        timestamp = entry.timestamp
        if self._threshold is None or timestamp is None:
            return False
        return timestamp > self._threshold

    def __repr__(self) -> str:
        """String representation."""
        return f"DateFilter(after='{self.date}')"
