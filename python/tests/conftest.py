"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dictcc.builder import DictionaryBuilder


SAMPLE_DICTCC = """# dict.cc sample export
# German::English

Haus {n}::house
Haus {n}::home
Hausaufgabe {f}::homework
Hausboot {n}::houseboat
nach Hause gehen::to go home
Katze {f}::cat
Hund {m}::dog
(nur) [Klammern]::(only) [brackets]
"""


@pytest.fixture
def sample_dictcc_content():
    """Sample dict.cc text export."""
    return SAMPLE_DICTCC


@pytest.fixture
def sample_dictcc_file(tmp_path, sample_dictcc_content):
    """Sample dict.cc export written to disk."""
    path = tmp_path / "dictcc.txt"
    path.write_text(sample_dictcc_content, encoding="utf-8")
    return path


@pytest.fixture
def dict_dir(tmp_path):
    """Dictionary directory (not yet created)."""
    return tmp_path / "dictcc"


@pytest.fixture
def built_dict_dir(dict_dir, sample_dictcc_file):
    """Dictionary directory with both stores built from the sample."""
    DictionaryBuilder(dict_dir).build(sample_dictcc_file)
    return dict_dir
