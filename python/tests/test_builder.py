"""Tests for the builder module."""

import pytest

from dictcc.builder import BuildStats, DictionaryBuilder
from dictcc.codec import parse_entry
from dictcc.errors import ConfigError, SourceFileError
from dictcc.ingest import Ingestor
from dictcc.ingest.dictcc_text import DictccTextIngestor
from dictcc.schema import Direction
from dictcc.store import EntryStore


class TabIngestor(Ingestor):
    """Reads "german<TAB>english" lines."""

    def parse(self, filepath):
        with open(filepath, encoding=self.encoding) as f:
            for line_num, line in enumerate(f, start=1):
                german, english = line.rstrip("\n").split("\t")
                yield german, english, line_num


class TestDictionaryBuilder:
    """Tests for DictionaryBuilder."""

    def test_build_stats(self, dict_dir, sample_dictcc_file):
        stats = DictionaryBuilder(dict_dir).build(sample_dictcc_file)

        assert isinstance(stats, BuildStats)
        assert stats.lines_read == 8
        assert stats.by_direction == {"{DE-EN}": 6, "{EN-DE}": 6}
        assert stats.skipped == {"{DE-EN}": 1, "{EN-DE}": 1}
        assert stats.total_entries == 12
        assert stats.errors == []
        assert stats.files_written

    def test_build_creates_stores(self, built_dict_dir):
        for direction in Direction:
            assert EntryStore(built_dict_dir, direction).exists()

    def test_store_values(self, built_dict_dir):
        de = EntryStore(built_dict_dir, Direction.DE_EN)
        en = EntryStore(built_dict_dir, Direction.EN_DE)

        assert de.get("haus") == "Haus {n}=<>house:<>:home"
        assert en.get("home") == "home=<>Haus {n}#<>#to go home=<>nach Hause gehen"

    def test_shortest_phrase_first(self, dict_dir, tmp_path):
        source = tmp_path / "order.txt"
        source.write_text(
            "nach Hause::homewards\nHause::home\n", encoding="utf-8"
        )
        DictionaryBuilder(dict_dir).build(source)

        groups = parse_entry(EntryStore(dict_dir, Direction.DE_EN).get("hause"))
        assert [phrase for phrase, _ in groups] == ["Hause", "nach Hause"]

    def test_no_headword_not_indexed(self, built_dict_dir):
        de = EntryStore(built_dict_dir, Direction.DE_EN)
        assert all("Klammern" not in value for value in de.values())

    def test_rebuild_replaces_contents(self, built_dict_dir, tmp_path):
        source = tmp_path / "new.txt"
        source.write_text("Maus {f}::mouse\n", encoding="utf-8")

        DictionaryBuilder(built_dict_dir).build(source)

        de = EntryStore(built_dict_dir, Direction.DE_EN)
        assert de.get("haus") is None
        assert de.get("maus") == "Maus {f}=<>mouse"
        assert de.count() == 1

    def test_missing_source_leaves_stores(self, built_dict_dir, tmp_path):
        with pytest.raises(SourceFileError):
            DictionaryBuilder(built_dict_dir).build(tmp_path / "missing.txt")

        assert EntryStore(built_dict_dir, Direction.DE_EN).get("haus") is not None

    def test_missing_source_creates_nothing(self, dict_dir, tmp_path):
        with pytest.raises(SourceFileError):
            DictionaryBuilder(dict_dir).build(tmp_path / "missing.txt")

        assert not dict_dir.exists()

    def test_malformed_lines_counted(self, dict_dir, tmp_path):
        source = tmp_path / "bad.txt"
        source.write_text("Haus::house\nbroken\n", encoding="utf-8")

        stats = DictionaryBuilder(dict_dir).build(source)
        assert len(stats.errors) == 1
        assert stats.by_direction["{DE-EN}"] == 1

    def test_progress_logging(self, dict_dir, sample_dictcc_file, caplog):
        with caplog.at_level("INFO", logger="dictcc"):
            DictionaryBuilder(dict_dir, progress_interval=2).build(sample_dictcc_file)

        assert "Stored 2 / 6 values" in caplog.text
        assert "Built dict with 6 entries" in caplog.text


class TestIngestorSelection:
    """Tests for choosing the source format."""

    def test_default_is_dictcc(self, dict_dir):
        assert isinstance(DictionaryBuilder(dict_dir).ingestor, DictccTextIngestor)

    def test_by_name(self, dict_dir):
        builder = DictionaryBuilder(dict_dir, ingestor="dictcc")
        assert isinstance(builder.ingestor, DictccTextIngestor)

    def test_unknown_name(self, dict_dir):
        with pytest.raises(ConfigError):
            DictionaryBuilder(dict_dir, ingestor="tsv")

    def test_custom_ingestor(self, dict_dir, tmp_path):
        source = tmp_path / "dict.tsv"
        source.write_text("Haus\thouse\nMaus\tmouse\n", encoding="utf-8")

        stats = DictionaryBuilder(dict_dir, ingestor=TabIngestor()).build(source)

        assert stats.by_direction == {"{DE-EN}": 2, "{EN-DE}": 2}
        assert EntryStore(dict_dir, Direction.EN_DE).get("mouse") == "mouse=<>Maus"
