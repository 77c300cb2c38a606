"""Base ingestor interface for bilingual phrase lists.

All ingestors inherit from Ingestor and implement parse(). The ingest()
method handles headword extraction and grouping for one Direction.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator
import logging

from ..errors import SourceFileError
from ..headword import extract_headword
from ..schema import DictEntry, Direction

logger = logging.getLogger(__name__)


@dataclass
class IngestResult:
    """Result of ingesting a phrase list for one direction."""

    entries: dict[str, DictEntry]
    source_path: str
    direction: Direction
    total_raw: int = 0          # Phrase pairs read from source
    total_indexed: int = 0      # Pairs appended to an entry
    total_skipped: int = 0      # Pairs without a headword
    errors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.direction.label}: "
            f"{len(self.entries)} entries, "
            f"{self.total_indexed}/{self.total_raw} indexed, "
            f"{len(self.errors)} errors)"
        )


class Ingestor(ABC):
    """Base class for phrase list ingestors.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (german, english, line_number)
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self._errors: list[str] = []

    @abstractmethod
    def parse(self, filepath: Path) -> Iterator[tuple[str, str, int]]:
        """Parse source file and yield (german, english, line_number) tuples.

        Malformed records should be passed to report_error() and skipped.
        """
        pass

    def report_error(self, message: str) -> None:
        """Record a malformed record of the current ingest."""
        logger.warning(message)
        self._errors.append(message)

    def check_readable(self, filepath: Path | str) -> Path:
        """Fail early if the source cannot be opened.

        Raises:
            SourceFileError: If filepath is missing or unreadable.
        """
        filepath = Path(filepath)
        try:
            with open(filepath, "r", encoding=self.encoding) as f:
                f.read(1)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceFileError(filepath, str(e)) from e
        return filepath

    def ingest(self, filepath: Path | str, direction: Direction) -> IngestResult:
        """Group all phrases of a source file under their headwords.

        Args:
            filepath: Path to source file.
            direction: Which side of each pair is the phrase.

        Returns:
            IngestResult with entries and statistics.

        Raises:
            SourceFileError: If the file cannot be read.
        """
        filepath = self.check_readable(filepath)
        logger.info("Reading dict file (%s)", direction.value)

        entries: dict[str, DictEntry] = {}
        total_raw = 0
        indexed = 0
        skipped = 0
        self._errors = []

        try:
            for german, english, _line_num in self.parse(filepath):
                total_raw += 1
                phrase, translation = direction.split(german, english)

                headword = extract_headword(phrase)
                if headword is None:
                    skipped += 1
                    continue

                if headword not in entries:
                    entries[headword] = DictEntry(headword=headword)
                entries[headword].append(phrase, translation)
                indexed += 1
        except (OSError, UnicodeDecodeError) as e:
            raise SourceFileError(filepath, str(e)) from e

        logger.info("Built dict with %d entries", len(entries))

        return IngestResult(
            entries=entries,
            source_path=str(filepath.resolve()),
            direction=direction,
            total_raw=total_raw,
            total_indexed=indexed,
            total_skipped=skipped,
            errors=list(self._errors),
        )
