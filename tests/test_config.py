import json
import logging

import pytest

from passlens.config import (
    DEFAULTS,
    build_analyzer,
    config_path,
    load_config,
    load_wordlist,
    parse_setting,
    save_config,
)
from passlens.evaluator import DEFAULT_GUESSES_PER_SECOND

def test_missing_config_gives_defaults(tmp_path):
    assert load_config(str(tmp_path / "nope.json")) == DEFAULTS

def test_malformed_config_falls_back(tmp_path, caplog):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="passlens.config"):
        assert load_config(str(p)) == DEFAULTS
    assert "Ignoring unreadable config" in caplog.text

def test_config_merges_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"guesses_per_second": 10.0}), encoding="utf-8")
    cfg = load_config(str(p))
    assert cfg["guesses_per_second"] == 10.0
    assert cfg["extra_common_words"] == []

def test_save_creates_directory(tmp_path):
    p = tmp_path / "sub" / "config.json"
    save_config({"guesses_per_second": 5.0}, str(p))
    assert json.loads(p.read_text(encoding="utf-8")) == {"guesses_per_second": 5.0}

def test_config_path_override(monkeypatch, tmp_path):
    monkeypatch.setenv("PASSLENS_CONFIG", str(tmp_path / "x.json"))
    assert config_path() == str(tmp_path / "x.json")

def test_load_wordlist(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("# weak ones\nHunter2\n\n  tr0ub4dor  \n", encoding="utf-8")
    assert load_wordlist(str(p)) == ["hunter2", "tr0ub4dor"]

def test_parse_setting():
    assert parse_setting("guesses_per_second", "1e10") == 1e10
    assert parse_setting("extra_common_words", "Foo, bar,,") == ["foo", "bar"]
    assert parse_setting("wordlist_path", "none") is None
    assert parse_setting("wordlist_path", "/tmp/w.txt") == "/tmp/w.txt"
    with pytest.raises(KeyError):
        parse_setting("colour", "red")
    with pytest.raises(ValueError):
        parse_setting("guesses_per_second", "-3")
    with pytest.raises(ValueError):
        parse_setting("guesses_per_second", "fast")

def test_build_analyzer(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("hunter2\n", encoding="utf-8")
    cfg = dict(DEFAULTS, extra_common_words=["Zebra"], wordlist_path=str(p), guesses_per_second=42)
    analyzer = build_analyzer(cfg)
    assert analyzer.guesses_per_second == 42.0
    assert {"zebra", "hunter2", "password"} <= analyzer.common_words
    assert analyzer.analyze("xxHunter2").contains_common_substring

def test_build_analyzer_defaults():
    analyzer = build_analyzer(DEFAULTS.copy())
    assert analyzer.guesses_per_second == DEFAULT_GUESSES_PER_SECOND

def test_build_analyzer_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_analyzer(dict(DEFAULTS, wordlist_path=str(tmp_path / "missing.txt")))
    with pytest.raises(ValueError):
        build_analyzer(dict(DEFAULTS, guesses_per_second=0))

@pytest.mark.parametrize("overrides", [
    {"extra_common_words": 5},
    {"extra_common_words": ["ok", 7]},
    {"extra_common_words": {"a": 1}},
    {"wordlist_path": True},
    {"wordlist_path": 3},
])
def test_build_analyzer_rejects_wrong_types(overrides):
    with pytest.raises(ValueError):
        build_analyzer(dict(DEFAULTS, **overrides))

def test_build_analyzer_accepts_comma_string():
    analyzer = build_analyzer(dict(DEFAULTS, extra_common_words="Zebra, hunter"))
    assert {"zebra", "hunter"} <= analyzer.common_words
