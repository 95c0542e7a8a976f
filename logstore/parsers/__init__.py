"""
Log parsers module

Reads log file text back into entries.
"""

from logstore.parsers.block_parser import BlockParser, TIMESTAMP_PATTERN

__all__ = ["BlockParser", "TIMESTAMP_PATTERN"]
