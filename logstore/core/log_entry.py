"""
Log entry data structure

One parsed block of the log file: a UTC timestamp and its message.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Dict, Any

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_date_time() -> str:
    """
    Get the current UTC date and time.

    Returns:
        Date and time string, 'YYYY-MM-DD hh:mm:ss' (truncated to seconds)
    """
    return datetime.now(timezone.utc).strftime(DATE_FORMAT)


def parse_date_time(value: str) -> Optional[datetime]:
    """
    Interpret a 'YYYY-MM-DD hh:mm:ss' string as a UTC instant.

    Args:
        value: Date string

    Returns:
        Aware datetime, or None if the string is not a real calendar instant
    """
    try:
        return datetime.strptime(value, DATE_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        return None


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    Entries only exist as values returned from reads; the file is the
    single source of truth.
    """

    date: str
    message: str

    @property
    def timestamp(self) -> Optional[datetime]:
        """Entry date as an aware UTC datetime (None if not a valid date)."""
        return parse_date_time(self.date)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {"date": self.date, "message": self.message}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        """
        Create log entry from dictionary.

        Args:
            data: Dictionary with 'date' and 'message' keys

        Returns:
            New LogEntry instance
        """
        return cls(date=data["date"], message=data["message"])

    def __str__(self) -> str:
        """String representation."""
        return f"[{self.date}] {self.message}"
