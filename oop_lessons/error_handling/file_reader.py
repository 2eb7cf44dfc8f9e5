"""
File reader - I/O errors belong to the caller.

FileReader does not catch anything: a missing file is the caller's problem,
and main() shows how the caller reports it. The `with` block closes the file
on every path, including errors.
"""

from pathlib import Path
from typing import Iterator

import structlog

from oop_lessons.config import get_settings

logger = structlog.get_logger(__name__)


class FileReader:
    """Reads a text file from a fixed path."""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else get_settings().data_file

    def read_first_line(self) -> str:
        """
        Return the first line without its trailing newline.

        Bytes that are not valid UTF-8 (a Latin-1 file, say) become U+FFFD
        instead of failing the read.

        Raises:
            OSError: file is missing or unreadable
        """
        with open(self.path, encoding="utf-8", errors="replace") as f:
            return f.readline().rstrip("\r\n")

    def read_lines(self) -> Iterator[str]:
        """Yield the file line by line, newlines stripped."""
        with open(self.path, encoding="utf-8", errors="replace") as f:
            for line in f:
                yield line.rstrip("\r\n")


def main(path: Path | str | None = None) -> None:
    reader = FileReader(path)
    try:
        line = reader.read_first_line()
        print(f"Line read: {line}")
    except OSError as e:
        logger.warning("file_read_failed", path=str(reader.path), error=str(e))
        print(f"Error reading file: {e}")
