"""Tests for the config module."""

import json

import pytest

from dictcc import config as cfg
from dictcc.errors import ConfigError
from dictcc.schema import OutputFormat


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test without a cached config, in an empty cwd and home."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setattr(cfg, "_config", None)
    yield


class TestConfig:
    """Tests for config loading."""

    def test_fallback_defaults(self):
        assert cfg.load() == {"defaults": cfg.FALLBACK_DEFAULTS}
        assert cfg.default_output_format() is OutputFormat.NORMAL
        assert cfg.default_progress_interval() == 1000

    def test_default_dict_dir_expanded(self, tmp_path):
        assert cfg.default_dict_dir() == tmp_path / "home" / ".dictcc"

    def test_load_from_cwd(self, tmp_path):
        (tmp_path / "dictcc.json").write_text(
            json.dumps({"defaults": {"output_format": "compact", "dict_dir": "/srv/dict"}})
        )
        assert cfg.default_output_format() is OutputFormat.COMPACT
        assert str(cfg.default_dict_dir()) == "/srv/dict"
        assert cfg.get_default("missing", 42) == 42

    def test_load_from_home(self, tmp_path):
        home = tmp_path / "home"
        home.mkdir()
        (home / ".dictcc.json").write_text(json.dumps({"defaults": {"progress_interval": 5}}))
        assert cfg.default_progress_interval() == 5

    def test_invalid_json_falls_back(self, tmp_path):
        (tmp_path / "dictcc.json").write_text("{not json")
        assert cfg.load() == {"defaults": cfg.FALLBACK_DEFAULTS}

    def test_cached(self, tmp_path):
        first = cfg.load()
        (tmp_path / "dictcc.json").write_text(json.dumps({"defaults": {}}))
        assert cfg.load() is first
        assert cfg.load(reload=True) == {"defaults": {}}

    def test_source_format_default(self):
        assert cfg.default_source_format() == "dictcc"

    def test_unknown_output_format(self, tmp_path):
        (tmp_path / "dictcc.json").write_text(
            json.dumps({"defaults": {"output_format": "fancy"}})
        )
        with pytest.raises(ConfigError, match="Unknown output format"):
            cfg.default_output_format()
