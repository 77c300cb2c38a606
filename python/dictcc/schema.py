"""Entry schema and data structures for dictcc.

Core concept:
    - A DictEntry groups every phrase that reduced to the same headword
    - Each phrase keeps its translations in encounter order
    - One store per Direction holds headword -> serialized DictEntry

Example:
    "Haus::house" and "Haus::home" (DE-EN)
    → DictEntry {"Haus": ["house", "home"]} stored under "haus"
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class Direction(Enum):
    """Translation direction, i.e. which language is the lookup key."""

    DE_EN = "de"
    EN_DE = "en"

    @property
    def store_name(self) -> str:
        """File name of the store for this direction."""
        return f"dict_{self.value}"

    @property
    def label(self) -> str:
        """Section heading printed before this direction's results."""
        if self is Direction.DE_EN:
            return "{DE-EN}"
        return "{EN-DE}"

    def split(self, german: str, english: str) -> tuple[str, str]:
        """Order a (german, english) pair as (phrase, translation)."""
        if self is Direction.DE_EN:
            return german, english
        return english, german


class OutputFormat(Enum):
    """Rendering style for decoded entries."""

    NORMAL = "normal"
    COMPACT = "compact"

    @classmethod
    def from_name(cls, name: str) -> "OutputFormat":
        """Get OutputFormat from its config/CLI name."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown output format: {name}. "
                f"Available: {[f.value for f in cls]}"
            ) from None


@dataclass
class DictEntry:
    """All translations of all phrases sharing one headword."""

    headword: str
    groups: dict[str, list[str]] = field(default_factory=dict)  # phrase -> translations

    def append(self, phrase: str, translation: str) -> None:
        """Add a translation for phrase, creating the phrase group if new."""
        phrase = phrase.strip()
        translation = translation.strip()
        if phrase in self.groups:
            self.groups[phrase].append(translation)
        else:
            self.groups[phrase] = [translation]

    def phrases(self) -> list[str]:
        """Phrases in encounter order."""
        return list(self.groups)

    def translations(self, phrase: str) -> list[str]:
        """Translations of phrase, empty if unknown."""
        return list(self.groups.get(phrase, []))

    def count(self) -> int:
        """Number of (phrase, translation) pairs."""
        return sum(len(t) for t in self.groups.values())

    def __iter__(self) -> Iterator[tuple[str, list[str]]]:
        return iter(self.groups.items())

    def __len__(self) -> int:
        return len(self.groups)
