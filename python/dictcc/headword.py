"""Headword extraction for dictcc.

dict.cc phrases are noisy: articles, grammatical annotations in brackets,
whole idioms. Each phrase is indexed under a single word, the longest one
left after dropping bracketed annotations. This is a heuristic and picks
the "wrong" word for some idioms.

Examples:
    "Haus {n}"            → "haus"
    "to go (coll.)"       → "go"
    "(only) [brackets]"   → None
"""

import re
from typing import Optional

# (...), {...} and [...] up to the first closing bracket of the same kind
ANNOTATION_PATTERN = re.compile(r"\([^)]*\)|\{[^}]*\}|\[[^\]]*\]")

# Everything but letters (umlauts and ß included), digits, "_", whitespace, "-"
NON_WORD_PATTERN = re.compile(r"[^üäöß\w\s-]")


def strip_annotations(phrase: str) -> str:
    """Remove bracketed annotations, trim and lowercase.

    Args:
        phrase: Raw phrase.

    Returns:
        Cleaned phrase, possibly empty.
    """
    return ANNOTATION_PATTERN.sub("", phrase).strip().lower()


def tokenize(cleaned: str) -> list[str]:
    """Drop punctuation and split a cleaned phrase into words."""
    return NON_WORD_PATTERN.sub("", cleaned).split()


def extract_headword(phrase: str) -> Optional[str]:
    """Extract the word a phrase is indexed under.

    The longest token wins; on a tie the earliest one does.

    Args:
        phrase: Raw phrase.

    Returns:
        Lowercase headword, or None if nothing indexable remains.
    """
    cleaned = strip_annotations(phrase)
    if not cleaned:
        return None

    tokens = tokenize(cleaned)
    if not tokens:
        return None

    # sorted() is stable, so equal lengths keep their original order
    return sorted(tokens, key=len, reverse=True)[0]
