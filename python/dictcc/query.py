"""Query evaluation over the direction stores.

Three lookup modes:
    - exact:     headword lookup, O(1) per store
    - pattern:   regular expression over all headwords, O(n)
    - full-text: regular expression over the rendered entries, O(n*m)

Results of each store are written under the store's section label,
DE-EN first. Queries never modify a store.
"""

import re
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, TextIO

from .codec import format_entry
from .errors import InvalidPatternError, MissingStoreError
from .schema import Direction, OutputFormat
from .store import EntryStore, open_stores


class QueryMode(Enum):
    """Lookup strategy."""

    EXACT = "exact"
    PATTERN = "pattern"
    FULLTEXT = "fulltext"


# Sigils selecting a mode on a raw query string
SIGILS = {
    ":r:": QueryMode.PATTERN,
    ":f:": QueryMode.FULLTEXT,
}


@dataclass(frozen=True)
class Query:
    mode: QueryMode
    text: str

    @classmethod
    def exact(cls, text: str) -> "Query":
        return cls(QueryMode.EXACT, text)

    @classmethod
    def pattern(cls, text: str) -> "Query":
        return cls(QueryMode.PATTERN, text)

    @classmethod
    def fulltext(cls, text: str) -> "Query":
        return cls(QueryMode.FULLTEXT, text)


def parse_query(raw: str) -> Query:
    """Turn a raw query string into a Query.

    ":r:<pattern>" is a pattern query, ":f:<pattern>" a full-text query,
    anything else an exact lookup. The sigil is case-insensitive.
    """
    lowered = raw.lower()
    for sigil, mode in SIGILS.items():
        if lowered.startswith(sigil):
            return Query(mode, raw[len(sigil):])
    return Query(QueryMode.EXACT, raw)


def compile_pattern(text: str) -> re.Pattern:
    """Compile a lowercased query pattern.

    Raises:
        InvalidPatternError: If text is not a valid regular expression.
    """
    try:
        return re.compile(text.lower())
    except re.error as e:
        raise InvalidPatternError(f"Invalid pattern {text!r}: {e}") from e


def split_lines(rendered: str) -> list[str]:
    """Split rendered text on line feeds only, keeping line ends."""
    return [line for line in re.split(r"(?<=\n)", rendered) if line]


def is_indented(line: str) -> bool:
    """Translation lines (and blank lines) start with whitespace."""
    return line[:1].isspace()


def fulltext_lines(rendered: str, pattern: re.Pattern) -> Iterator[str]:
    """Yield the lines of a rendered entry that a full-text query prints.

    A heading line resets the match state and is printed if it matches.
    Indented lines are only considered while their heading (or a previous
    translation) matched; then they are printed, and printed once more if
    they match the pattern themselves.
    """
    matched = False
    for line in split_lines(rendered):
        if is_indented(line):
            if not matched:
                continue
            yield line
        else:
            matched = False
        if pattern.search(line.lower()):
            yield line
            matched = True


class QueryEngine:
    """Answers queries against a dictionary directory."""

    def __init__(
        self,
        dict_dir: Path | str,
        output_format: OutputFormat = OutputFormat.NORMAL,
        out: TextIO | None = None,
    ):
        """Initialize engine.

        Args:
            dict_dir: Dictionary directory holding both stores.
            output_format: Rendering style for entries.
            out: Output stream (default: sys.stdout at query time).

        Raises:
            MissingStoreError: If dict_dir does not exist.
        """
        self.dict_dir = Path(dict_dir).expanduser()
        if not self.dict_dir.is_dir():
            raise MissingStoreError(self.dict_dir)
        self.output_format = output_format
        self._out = out
        self.stores = open_stores(self.dict_dir)

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.out.write(text)

    def _sections(self) -> Iterator[EntryStore]:
        """Yield each store after writing its section label."""
        for store in self.stores:
            if store.direction is Direction.DE_EN:
                self._write(store.direction.label + "\n")
            else:
                self._write("\n" + store.direction.label + "\n")
            yield store

    def render(self, serialized: str) -> str:
        return format_entry(serialized, self.output_format)

    def query(self, query: Query) -> None:
        """Dispatch a query to its lookup mode."""
        if query.mode is QueryMode.PATTERN:
            self.query_regexp(query.text)
        elif query.mode is QueryMode.FULLTEXT:
            self.query_fulltext_regexp(query.text)
        else:
            self.query_simple(query.text)

    def query_simple(self, text: str) -> None:
        """Exact headword lookup."""
        key = text.lower()
        for store in self._sections():
            value = store.get(key)
            if value is not None:
                self._write(self.render(value))

    def query_regexp(self, text: str) -> None:
        """Print every entry whose headword matches the pattern."""
        pattern = compile_pattern(text)
        for store in self._sections():
            for _, value in store.items_where(pattern.search):
                self._write(self.render(value))

    def query_fulltext_regexp(self, text: str) -> None:
        """Print matching phrase headings and translations of every entry."""
        pattern = compile_pattern(text)
        for store in self._sections():
            for value in store.values():
                for line in fulltext_lines(self.render(value), pattern):
                    self._write(line)

    def store_sizes(self) -> dict[Direction, int]:
        """Number of headwords per direction."""
        return {store.direction: store.count() for store in self.stores}

    def entry_count(self) -> int:
        """Total number of headwords over both stores."""
        return sum(self.store_sizes().values())
