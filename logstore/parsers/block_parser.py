"""
Block parser

Inverse of BlockFormatter. Parsing is tolerant: indentation and blank
lines around blocks are ignored, and any segment without a bracketed
timestamp is dropped instead of failing the whole read.
"""

import re
from typing import List, Optional, Pattern

from logstore.core.log_entry import LogEntry
from logstore.formatters.block_formatter import LOG_DELIMITER

TIMESTAMP_PATTERN: Pattern = re.compile(
    r"\[(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\]", re.ASCII
)


class BlockParser:
    """Parse delimited log file text into LogEntry objects."""

    def __init__(self, delimiter: str = LOG_DELIMITER):
        """
        Initialize block parser.

        Args:
            delimiter: Literal line separating blocks
        """
        self.delimiter = delimiter
        self.dropped = 0

    def parse_segment(self, segment: str) -> Optional[LogEntry]:
        """
        Parse a single block.

        Args:
            segment: Text between two delimiters

        Returns:
            LogEntry, or None if the segment has no bracketed timestamp
        """
        match = TIMESTAMP_PATTERN.search(segment)
        if match is None:
            return None

        message = segment[:match.start()] + segment[match.end():]
        return LogEntry(date=match.group(1), message=message.strip())

    def parse(self, content: str) -> List[LogEntry]:
        """
        Parse log file content.

        Args:
            content: Whole log file text

        Returns:
            Entries in file order
        """
        entries = []
        self.dropped = 0

        for segment in content.split(self.delimiter):
            if not segment.strip():
                continue

            entry = self.parse_segment(segment)
            if entry is None:
                self.dropped += 1
                continue
            entries.append(entry)

        return entries

    def __repr__(self) -> str:
        """String representation."""
        return f"BlockParser(delimiter='{self.delimiter}')"
