"""On-disk key-value store for serialized entries.

One EntryStore per Direction, both living in the dictionary directory.
Backed by the standard dbm interface, whichever implementation the
interpreter provides. Keys and values are UTF-8 encoded.

A store is rebuilt as a whole: write() deletes the old files and writes
every record again. No locking is done; the import assumes it is the only
process touching the directory.
"""

import dbm
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Mapping, Optional

from .errors import MissingStoreError
from .schema import Direction

logger = logging.getLogger(__name__)

# Files the various dbm implementations create for a store named "x"
STORE_SUFFIXES = ("", ".db", ".dat", ".dir", ".bak")


class EntryStore:
    """Headword -> serialized entry store for one direction."""

    def __init__(self, dict_dir: Path | str, direction: Direction):
        self.dict_dir = Path(dict_dir).expanduser()
        self.direction = direction
        self.path = self.dict_dir / direction.store_name

    def __repr__(self) -> str:
        return f"EntryStore({self.direction.label} at {self.path})"

    def exists(self) -> bool:
        """Check if the store has been written."""
        return dbm.whichdb(str(self.path)) is not None

    def files(self) -> list[Path]:
        """Existing files belonging to this store."""
        candidates = [Path(f"{self.path}{suffix}") for suffix in STORE_SUFFIXES]
        return [p for p in candidates if p.is_file()]

    def delete(self) -> list[Path]:
        """Delete all files of this store.

        Returns:
            Paths that were deleted.
        """
        deleted = []
        for path in self.files():
            logger.info("Going to delete old database %s", path)
            path.unlink()
            deleted.append(path)
        return deleted

    @contextmanager
    def _open_reader(self):
        if not self.exists():
            raise MissingStoreError(self.path)
        with dbm.open(str(self.path), "r") as db:
            yield db

    def write(
        self,
        records: Mapping[str, str],
        progress_interval: int = 1000,
    ) -> int:
        """Replace the store contents with records.

        Args:
            records: headword -> serialized entry.
            progress_interval: Log progress every N records (0 disables).

        Returns:
            Number of records written.
        """
        self.dict_dir.mkdir(parents=True, exist_ok=True)
        self.delete()

        total = len(records)
        logger.info("Writing DBM database file %s", self.path)
        written = 0
        with dbm.open(str(self.path), "n", 0o644) as db:
            for key, value in records.items():
                db[key.encode("utf-8")] = value.encode("utf-8")
                written += 1
                if progress_interval and written % progress_interval == 0:
                    logger.info("Stored %d / %d values", written, total)
        return written

    def get(self, key: str) -> Optional[str]:
        """Get the serialized entry for a headword, None if absent."""
        with self._open_reader() as db:
            value = db.get(key.encode("utf-8"))
        if value is None:
            return None
        return value.decode("utf-8")

    def keys(self) -> Iterator[str]:
        """Iterate all headwords."""
        with self._open_reader() as db:
            for key in db.keys():
                yield key.decode("utf-8")

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate (headword, serialized entry) pairs."""
        with self._open_reader() as db:
            for key in db.keys():
                yield key.decode("utf-8"), db[key].decode("utf-8")

    def items_where(self, match: Callable[[str], bool]) -> Iterator[tuple[str, str]]:
        """Iterate (headword, serialized entry) pairs whose headword matches.

        Only the values of matching headwords are read.
        """
        with self._open_reader() as db:
            for key in db.keys():
                headword = key.decode("utf-8")
                if match(headword):
                    yield headword, db[key].decode("utf-8")

    def values(self) -> Iterator[str]:
        """Iterate serialized entries."""
        for _, value in self.items():
            yield value

    def count(self) -> int:
        """Number of headwords in the store."""
        with self._open_reader() as db:
            return len(db)


def open_stores(dict_dir: Path | str) -> list[EntryStore]:
    """Stores of a dictionary directory, in query order (DE-EN, EN-DE)."""
    return [EntryStore(dict_dir, direction) for direction in Direction]
