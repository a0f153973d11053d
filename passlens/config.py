# passlens/config.py
"""
Settings persistence for PassLens.
Settings saved as JSON in %APPDATA%/PassLens/config.json (Windows) or ~/.passlens/config.json (fallback).
PASSLENS_CONFIG overrides the location.
"""

import os
import json
import logging
from typing import Dict, Any, List, Optional

from .detector import COMMON_PASSWORDS
from .evaluator import DEFAULT_GUESSES_PER_SECOND, PasswordAnalyzer

log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "guesses_per_second": DEFAULT_GUESSES_PER_SECOND,
    "extra_common_words": [],
    "wordlist_path": None  # optional file with one weak password per line
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "PassLens")
    return os.path.join(os.path.expanduser("~"), ".passlens")

def config_path() -> str:
    override = os.getenv("PASSLENS_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out

def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    return p

def load_wordlist(path: str) -> List[str]:
    """Read one entry per line, skipping blanks and '#' comments."""
    words = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith("#"):
                words.append(word.lower())
    return words

def parse_setting(key: str, value: str) -> Any:
    """Convert a command-line value for `key`; raises KeyError or ValueError."""
    if key not in DEFAULTS:
        raise KeyError(key)
    if key == "guesses_per_second":
        rate = float(value)
        if not rate > 0 or rate == float("inf"):
            raise ValueError("guesses_per_second must be a positive number")
        return rate
    if key == "extra_common_words":
        return [w.strip().lower() for w in value.split(",") if w.strip()]
    # wordlist_path
    return None if value.lower() in ("", "none") else value

def build_analyzer(cfg: Dict[str, Any]) -> PasswordAnalyzer:
    """
    Analyzer for the given settings: built-in table plus extra words and the
    optional word-list file. Raises ValueError on a bad rate or a setting
    of the wrong type, and FileNotFoundError on a missing word-list.
    """
    words = set(COMMON_PASSWORDS)
    extra = cfg.get("extra_common_words") or []
    if isinstance(extra, str):
        extra = extra.split(",")
    if not isinstance(extra, list) or not all(isinstance(w, str) for w in extra):
        raise ValueError(f"extra_common_words must be a list of strings or a comma-separated string, got {extra!r}")
    words.update(extra)
    wordlist = cfg.get("wordlist_path")
    if wordlist is not None and not isinstance(wordlist, str):
        raise ValueError(f"wordlist_path must be a path string, got {wordlist!r}")
    if wordlist:
        words.update(load_wordlist(wordlist))
    rate = cfg.get("guesses_per_second", DEFAULT_GUESSES_PER_SECOND)
    return PasswordAnalyzer(words, rate)
