"""Line-oriented text file storage."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

_logger = logging.getLogger(__name__)


@dataclass
class TextFileStore:
    """Reads and rewrites whole text files under a data directory.

    I/O failures are logged and swallowed: reads return no lines and writes
    leave the file as it was.
    """

    data_dir: Path

    def read_lines(self, filename: str) -> list[str]:
        """Return the non-blank lines of a file, or nothing if it is missing."""
        path = self.data_dir / filename
        if not path.exists():
            return []
        try:
            with path.open(encoding="utf-8") as handle:
                return [line.rstrip("\r\n") for line in handle if line.strip()]
        except OSError:
            _logger.exception("Failed to read %s", path)
            return []

    def write_lines(self, filename: str, lines: Iterable[str]) -> bool:
        """Replace a file with the given lines and return True on success."""
        if not self._ensure_data_dir():
            return False
        path = self.data_dir / filename
        try:
            with path.open("w", encoding="utf-8") as handle:
                for line in lines:
                    handle.write(line)
                    handle.write("\n")
        except OSError:
            _logger.exception("Failed to write %s", path)
            return False
        return True

    def _ensure_data_dir(self) -> bool:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            _logger.exception("Failed to create data directory %s", self.data_dir)
            return False
        return True
