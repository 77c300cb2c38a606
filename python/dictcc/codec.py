"""Entry codec: DictEntry <-> serialized store value.

Format:
    entry        := group ("#<>#" group)*
    group        := phrase "=<>" translations
    translations := translation (":<>:" translation)*

Groups are written shortest phrase first, so the first group listed is the
closest match for the headword. The delimiters are not escaped: a phrase or
translation containing one of them cannot be stored faithfully.
"""

from .errors import FormatError
from .schema import DictEntry, OutputFormat

GROUP_SEP = "#<>#"
PHRASE_SEP = "=<>"
TRANSLATION_SEP = ":<>:"

INDENT = "    "


def encode_entry(entry: DictEntry) -> str:
    """Serialize a DictEntry.

    Args:
        entry: Entry to serialize.

    Returns:
        Serialized entry, groups ordered by ascending phrase length.
    """
    # Stable sort: equal lengths keep encounter order
    groups = sorted(entry.groups.items(), key=lambda item: len(item[0]))
    return GROUP_SEP.join(
        phrase + PHRASE_SEP + TRANSLATION_SEP.join(translations)
        for phrase, translations in groups
    )


def parse_entry(serialized: str) -> list[tuple[str, list[str]]]:
    """Split a serialized entry into (phrase, translations) groups.

    A trailing newline and a trailing group separator are accepted.

    Args:
        serialized: Store value.

    Returns:
        Groups in stored order.

    Raises:
        FormatError: If the value is empty or a group has no phrase separator.
    """
    body = serialized.rstrip("\r\n")
    if body.endswith(GROUP_SEP):
        body = body[: -len(GROUP_SEP)]
    if not body:
        raise FormatError("Empty serialized entry")

    groups = []
    for part in body.split(GROUP_SEP):
        if PHRASE_SEP not in part:
            raise FormatError(f"Missing {PHRASE_SEP!r} in group: {part!r}")
        phrase, translations = part.split(PHRASE_SEP, 1)
        groups.append((phrase, translations.split(TRANSLATION_SEP)))
    return groups


def decode_entry(serialized: str, headword: str = "") -> DictEntry:
    """Rebuild a DictEntry from its serialized form."""
    entry = DictEntry(headword=headword)
    for phrase, translations in parse_entry(serialized):
        entry.groups.setdefault(phrase, []).extend(translations)
    return entry


def format_entry(
    serialized: str,
    output_format: OutputFormat = OutputFormat.NORMAL,
) -> str:
    """Render a serialized entry for display.

    normal:
        Haus:
            - house
            - home

    compact:
        - Haus: house / home

    Args:
        serialized: Store value.
        output_format: Rendering style.

    Returns:
        Rendered text, newline terminated.
    """
    groups = parse_entry(serialized)

    if output_format is OutputFormat.COMPACT:
        return "\n".join(
            f"- {phrase}: " + " / ".join(translations) + "\n"
            for phrase, translations in groups
        )

    lines = []
    for phrase, translations in groups:
        lines.append(f"{phrase}:\n")
        for translation in translations:
            lines.append(f"{INDENT}- {translation}\n")
    return "".join(lines)
