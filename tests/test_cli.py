import json

import pytest

from passlens import cli
from passlens.config import load_config

@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    path = tmp_path / "config.json"
    monkeypatch.setenv("PASSLENS_CONFIG", str(path))
    return path

def test_analyze_json(capsys):
    assert cli.main(["analyze", "password", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["category"] == "Very Weak"
    assert payload["patterns"]["common_substring"] is True

def test_analyze_rich_output(capsys):
    assert cli.main(["analyze", "password"]) == 0
    out = capsys.readouterr().out
    assert "Very Weak" in out
    assert "Suggestions" in out
    assert "Remove common words" in out

def test_analyze_prompts_when_password_omitted(monkeypatch, capsys):
    monkeypatch.setattr(cli, "getpass", lambda prompt: "Tr33s&Skies_2025!long")
    assert cli.main(["analyze", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["password_length"] == 21

def test_interrupted_prompt(monkeypatch, capsys):
    def boom(prompt):
        raise KeyboardInterrupt
    monkeypatch.setattr(cli, "getpass", boom)
    assert cli.main(["analyze"]) == cli.EXIT_INTERRUPTED
    assert "Aborted" in capsys.readouterr().out

def test_rate_flag(capsys):
    assert cli.main(["analyze", "Zq8!", "--json", "--rate", "1"]) == 0
    slow = json.loads(capsys.readouterr().out)
    assert cli.main(["analyze", "Zq8!", "--json"]) == 0
    fast = json.loads(capsys.readouterr().out)
    assert slow["crack_time_seconds"] > fast["crack_time_seconds"]

def test_bad_configuration(tmp_path, capsys):
    assert cli.main(["analyze", "x", "--rate", "0"]) == cli.EXIT_USAGE
    missing = str(tmp_path / "missing.txt")
    assert cli.main(["analyze", "x", "--wordlist", missing]) == cli.EXIT_USAGE
    assert "Invalid configuration" in capsys.readouterr().out

@pytest.mark.parametrize("settings", [
    {"extra_common_words": 5},
    {"wordlist_path": True},
])
def test_wrongly_typed_settings_file(isolated_config, capsys, settings):
    isolated_config.write_text(json.dumps(settings), encoding="utf-8")
    assert cli.main(["analyze", "x", "--json"]) == cli.EXIT_USAGE
    assert "Invalid configuration" in capsys.readouterr().out

def test_wordlist_flag(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("hunter\n", encoding="utf-8")
    assert cli.main(["analyze", "Hunter2", "--json", "--wordlist", str(words)]) == 0
    assert json.loads(capsys.readouterr().out)["patterns"]["common_substring"] is True

def test_config_set_and_show(isolated_config, capsys):
    assert cli.main(["config", "set", "guesses_per_second", "1e10"]) == 0
    assert load_config(str(isolated_config))["guesses_per_second"] == 1e10
    assert cli.main(["config", "show"]) == 0
    assert "guesses_per_second" in capsys.readouterr().out

def test_config_set_rejects_bad_input(isolated_config):
    assert cli.main(["config", "set", "colour", "red"]) == cli.EXIT_USAGE
    assert cli.main(["config", "set", "guesses_per_second", "fast"]) == cli.EXIT_USAGE
    assert not isolated_config.exists()
