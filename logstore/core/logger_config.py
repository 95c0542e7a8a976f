"""
Logger configuration management
"""

import codecs
from dataclasses import dataclass


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Controls how the log file text is encoded and decoded.
    """

    # Encoding settings
    encoding: str = "utf-8"
    errors: str = "replace"

    def __post_init__(self):
        """Validate configuration after initialization."""
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e
        try:
            codecs.lookup_error(self.errors)
        except LookupError as e:
            raise ValueError(f"Unknown error handler: {self.errors}") from e

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def strict_config(cls) -> "LoggerConfig":
        """Create configuration that fails on undecodable or unencodable text."""
        return cls(errors="strict")
