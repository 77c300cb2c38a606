"""Dictionary builder for the direction stores.

Output structure:
    ~/.dictcc/
    ├── dict_de   (German headword -> entry)
    └── dict_en   (English headword -> entry)

Both directions are read and grouped before any store file is touched, so
an unreadable source leaves the previous dictionary intact.
"""

from dataclasses import dataclass, field
from pathlib import Path
import logging

from ..codec import encode_entry
from ..ingest import get_ingestor
from ..ingest.base import Ingestor, IngestResult
from ..schema import Direction
from ..store import EntryStore

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """Statistics from a build operation."""

    lines_read: int = 0
    by_direction: dict[str, int] = field(default_factory=dict)  # label -> entries
    skipped: dict[str, int] = field(default_factory=dict)       # label -> no headword
    errors: list[str] = field(default_factory=list)
    files_written: list[str] = field(default_factory=list)

    @property
    def total_entries(self) -> int:
        return sum(self.by_direction.values())


class DictionaryBuilder:
    """Builds the direction stores of a dictionary directory."""

    def __init__(
        self,
        dict_dir: Path | str,
        ingestor: Ingestor | str = "dictcc",
        progress_interval: int = 1000,
    ):
        """Initialize builder.

        Args:
            dict_dir: Dictionary directory, created if absent.
            ingestor: Source parser, or the name of a registered one.
            progress_interval: Log progress every N stored records.
        """
        self.dict_dir = Path(dict_dir).expanduser()
        if isinstance(ingestor, str):
            ingestor = get_ingestor(ingestor)
        self.ingestor = ingestor
        self.progress_interval = progress_interval

    def read(self, source: Path | str) -> list[IngestResult]:
        """Ingest source once per direction, in store order."""
        return [self.ingestor.ingest(source, direction) for direction in Direction]

    def write(self, result: IngestResult) -> EntryStore:
        """Encode and write one direction's entries, replacing the old store."""
        store = EntryStore(self.dict_dir, result.direction)
        records = {
            headword: encode_entry(entry)
            for headword, entry in result.entries.items()
        }
        store.write(records, progress_interval=self.progress_interval)
        logger.info("Database building done (%s)", result.direction.label)
        return store

    def build(self, source: Path | str) -> BuildStats:
        """Rebuild both stores from a phrase list.

        Args:
            source: Path to phrase list.

        Returns:
            BuildStats with counts and file paths.

        Raises:
            SourceFileError: If source cannot be read. No store is modified.
        """
        results = self.read(source)

        self.dict_dir.mkdir(parents=True, exist_ok=True)

        stats = BuildStats(lines_read=results[0].total_raw)
        for result in results:
            store = self.write(result)
            label = result.direction.label
            stats.by_direction[label] = len(result.entries)
            stats.skipped[label] = result.total_skipped
            stats.files_written.extend(str(p) for p in store.files())

        # Malformed lines are the same for both passes
        stats.errors = list(results[0].errors)
        return stats
