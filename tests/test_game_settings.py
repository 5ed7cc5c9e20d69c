import json
import logging

import pytest

from wordle_round.config.app_config import Config
from wordle_round.config.game_settings import (
    WORD_LIST, get_word_statistics, load_word_list, validate_word_list_integrity
)
from wordle_round.services.dictionary import WordDictionary
from wordle_round.utils.game_logger import GameLogger


def test_bundled_word_list_is_valid():
    assert validate_word_list_integrity(WORD_LIST)
    assert "crane" in WORD_LIST
    assert "lucky" in WORD_LIST


def test_load_word_list_lowercases(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["CRANE", " Lucky "]), encoding="utf-8")
    assert load_word_list(str(path)) == ["crane", "lucky"]


@pytest.mark.parametrize("content", [
    "not json",
    json.dumps({"words": ["crane"]}),
    json.dumps([]),
    json.dumps(["crane", "cranes"]),
    json.dumps(["crane", "cr4ne"]),
    json.dumps(["crane", "CRANE"]),
])
def test_load_word_list_rejects_bad_files(tmp_path, content):
    path = tmp_path / "words.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_word_list(str(path))


def test_load_word_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(str(tmp_path / "missing.json"))


def test_word_statistics():
    stats = get_word_statistics(["crane", "eerie"])
    assert stats["total_words"] == 2
    assert stats["avg_vowel_count"] == 3.0
    assert stats["letter_frequency"]["e"] == 4
    assert stats["most_common_letters"][0] == ("e", 4)
    assert get_word_statistics([]) == {"error": "Word list is empty"}


def test_word_dictionary():
    dictionary = WordDictionary(["Crane", "lucky"])
    assert "crane" in dictionary
    assert "Crane" not in dictionary
    assert "plant" not in dictionary
    assert len(dictionary) == 2
    assert list(dictionary) == ["crane", "lucky"]
    assert dictionary.words == ["crane", "lucky"]

    with pytest.raises(ValueError):
        WordDictionary([])
    with pytest.raises(ValueError):
        WordDictionary(["crane", "crane"])


def test_word_list_path_overrides_bundled_words(tmp_path, monkeypatch):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps(["fjord", "GHOST"]), encoding="utf-8")

    monkeypatch.setattr(Config, "WORD_LIST_PATH", str(path))
    assert load_word_list() == ["fjord", "ghost"]

    monkeypatch.setattr(Config, "WORD_LIST_PATH", None)
    assert load_word_list() == WORD_LIST


def test_unknown_log_level_falls_back_to_info():
    assert GameLogger._resolve_level("verbose") == logging.INFO
    assert GameLogger._resolve_level(" debug ") == logging.DEBUG
    assert GameLogger._resolve_level(logging.WARNING) == logging.WARNING
