"""File storage"""

from typing import Optional

from logstore.core.logger_config import LoggerConfig


class FileStorage:
    """
    Read, append and overwrite whole text files.

    Every call opens and closes the file, so no handle outlives an
    operation. OSError is raised unchanged; directories are never created.
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        """
        Initialize file storage.

        Args:
            config: Encoding settings (default: LoggerConfig.default())
        """
        self.config = config or LoggerConfig.default()

    def _open(self, path: str, mode: str):
        """Open file with configured encoding."""
        # newline="" keeps the on-disk block layout identical on every platform
        return open(
            path,
            mode,
            encoding=self.config.encoding,
            errors=self.config.errors,
            newline="",
        )

    def read_text(self, path: str) -> str:
        """Read whole file as text."""
        with self._open(path, "r") as f:
            return f.read()

    def append_text(self, path: str, text: str) -> None:
        """Append text, creating the file if absent."""
        with self._open(path, "a") as f:
            f.write(text)

    def write_text(self, path: str, text: str) -> None:
        """Replace file content, creating the file if absent."""
        with self._open(path, "w") as f:
            f.write(text)
