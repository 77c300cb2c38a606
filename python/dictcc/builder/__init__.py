"""Dictionary builder module.

Builds the two direction stores of a dictionary directory from a
phrase list. Every build is a full rebuild.
"""

from .dictionary import BuildStats, DictionaryBuilder

__all__ = [
    "BuildStats",
    "DictionaryBuilder",
]
