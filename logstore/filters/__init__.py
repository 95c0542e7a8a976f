"""
Log filters module

Provides filters for selecting parsed log entries.
"""

from logstore.filters.base_filter import BaseFilter
from logstore.filters.date_filter import DateFilter, DATE_PATTERN

__all__ = [
    "BaseFilter",
    "DateFilter",
    "DATE_PATTERN",
]
