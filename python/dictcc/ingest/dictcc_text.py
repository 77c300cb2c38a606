"""dict.cc text export ingestor.

Format:
    # comment
    Haus {n}::house
    etw. tun::to do sth.

One pair per line, German first. The first "::" splits the line.
"""

from pathlib import Path
from typing import Iterator

from ..schema import Direction
from .base import Ingestor, IngestResult

SEPARATOR = "::"


class DictccTextIngestor(Ingestor):
    """Ingestor for "german::english" text files."""

    def __init__(
        self,
        encoding: str = "utf-8",
        comment_char: str = "#",
        separator: str = SEPARATOR,
    ):
        super().__init__(encoding)
        self.comment_char = comment_char
        self.separator = separator

    def parse(self, filepath: Path) -> Iterator[tuple[str, str, int]]:
        """Parse a dict.cc text file.

        Args:
            filepath: Path to text file.

        Yields:
            Tuples of (german, english, line_number).
        """
        with open(filepath, "r", encoding=self.encoding) as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()

                # Skip empty lines and comments
                if not line or line.startswith(self.comment_char):
                    continue

                if self.separator not in line:
                    self.report_error(
                        f"{filepath}:{line_num}: missing {self.separator!r}, skipped"
                    )
                    continue

                german, english = line.split(self.separator, 1)
                yield german, english, line_num


def ingest(
    filepath: Path | str,
    direction: Direction,
    encoding: str = "utf-8",
) -> IngestResult:
    """Convenience function to ingest a dict.cc text file.

    Args:
        filepath: Path to text file.
        direction: Direction to build.
        encoding: File encoding.

    Returns:
        IngestResult with entries.
    """
    return DictccTextIngestor(encoding=encoding).ingest(filepath, direction)
