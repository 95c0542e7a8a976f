"""
Block formatter

Renders an entry as the delimited block appended to the log file:

    <-- LOG -->
    [YYYY-MM-DD hh:mm:ss] message
    <blank line>
"""

from logstore.core.log_entry import LogEntry
from logstore.formatters.base_formatter import BaseFormatter

LOG_DELIMITER = "<-- LOG -->"


class BlockFormatter(BaseFormatter):
    """Format log entries as delimited file blocks."""

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as a block.

        Args:
            entry: Log entry to format

        Returns:
            Block text, terminated by a blank line
        """
        return f"{LOG_DELIMITER}\n{entry}\n\n"

    def __repr__(self) -> str:
        """String representation."""
        return f"BlockFormatter(delimiter='{LOG_DELIMITER}')"
