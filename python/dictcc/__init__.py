"""dictcc - Offline German/English dictionary built from dict.cc phrase lists.

Imports a bilingual phrase list into two on-disk key-value stores (one per
translation direction) and answers lookups against them.

Core concepts:
    - Every phrase is indexed under a single headword (its longest word)
    - All phrases sharing a headword are grouped into one DictEntry
    - Entries are stored as delimiter-encoded strings, shortest phrase first

Example:
    "Haus (n)::house" → headword "haus" in the DE-EN store,
                        headword "house" in the EN-DE store

Usage:
    from dictcc.builder import DictionaryBuilder
    from dictcc.query import QueryEngine, parse_query
    from dictcc.schema import OutputFormat

    # Import (full rebuild)
    builder = DictionaryBuilder(dict_dir="~/.dictcc")
    stats = builder.build("dictcc_export.txt")

    # Query
    engine = QueryEngine(dict_dir="~/.dictcc", output_format=OutputFormat.COMPACT)
    engine.query(parse_query(":r:^hau"))
"""

__version__ = "0.1.0"
