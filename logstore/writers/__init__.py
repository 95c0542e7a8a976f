"""Writers module - Durable storage for the log file"""

from logstore.writers.file_storage import FileStorage

__all__ = ["FileStorage"]
