"""Phrase list ingestion module.

Provides ingestors for bilingual phrase list formats, selected by name:
- "dictcc": dict.cc "german::english" text exports

Usage:
    from dictcc.ingest import dictcc_text
    from dictcc.schema import Direction

    result = dictcc_text.ingest("path/to/dictcc.txt", Direction.DE_EN)
"""

from ..errors import ConfigError
from .base import Ingestor, IngestResult
from . import dictcc_text

INGESTORS: dict[str, type[Ingestor]] = {
    "dictcc": dictcc_text.DictccTextIngestor,
}


def get_ingestor(name: str) -> Ingestor:
    """Create the ingestor configured under name.

    Raises:
        ConfigError: If no ingestor has that name.
    """
    ingestor_cls = INGESTORS.get(name.strip().lower())
    if ingestor_cls is None:
        raise ConfigError(f"Unknown source format: {name}. Available: {sorted(INGESTORS)}")
    return ingestor_cls()


__all__ = [
    "Ingestor",
    "IngestResult",
    "dictcc_text",
    "get_ingestor",
    "INGESTORS",
]
