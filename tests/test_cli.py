# tests/test_cli.py
"""Tests for the banglaphonetic command line."""

import json

import pytest

from banglaphonetic import cli
from banglaphonetic.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    # keep a stray .env or environment out of the cached settings
    monkeypatch.chdir(tmp_path)
    for name in ["MAX_BUFFER_LENGTH", "STANDALONE_VOWELS", "LOG_LEVEL"]:
        monkeypatch.delenv("BANGLAPHONETIC_" + name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_translit(capsys):
    cli.main(["translit", "bangla", "kh"])
    assert capsys.readouterr().out == "বাংলা খ\n"


def test_trace(capsys):
    cli.main(["trace", "kkh"])
    steps = json.loads(capsys.readouterr().out)

    assert steps == [
        {"key": "k", "delete": 0, "insert": "ক"},
        {"key": "k", "delete": 0, "insert": "ক"},
        {"key": "h", "delete": 2, "insert": "ক্ষ"},
    ]


def test_lexicon(capsys):
    cli.main(["lexicon"])
    table = json.loads(capsys.readouterr().out)

    assert table["kh"] == "খ"
    assert table["N"] == "ঙ"


def test_no_command_prints_help(capsys):
    cli.main([])
    assert "usage" in capsys.readouterr().out
