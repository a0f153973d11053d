"""
passlens.detector

Feature detection for a candidate password:
- character_classes(password): ASCII lower/upper/digit, symbol and whitespace presence
- has_repeat_run / has_sequential_run: repeated or consecutive characters
- looks_like_date / looks_like_email: date-shaped and email-shaped substrings
- contains_common_substring: case-insensitive containment of a known weak password
- detect_features(password): all of the above in one Features value

Letters and digits are classified ASCII-only; any other non-whitespace
character (including non-ASCII letters such as 'é') counts as a symbol.
All scans are linear in the length of the password.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator

# small built-in table of weak passwords, matched as substrings
COMMON_PASSWORDS = frozenset({
    "password", "123456", "123456789", "qwerty", "letmein", "111111", "admin",
    "welcome", "iloveyou", "monkey", "dragon", "football", "baseball",
    "abc123", "1q2w3e4r", "secret",
})

LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
DIGITS = frozenset("0123456789")
LETTERS = LOWER | UPPER

EMAIL_LOCAL_CHARS = LETTERS | DIGITS | frozenset("._%+-")
EMAIL_DOMAIN_CHARS = LETTERS | DIGITS | frozenset(".-")

DATE_SEPARATORS = ("", "-", "/", " ")

MIN_REPEAT = 3
MIN_SEQUENCE = 3


@dataclass(frozen=True)
class Features:
    length: int
    has_lower: bool
    has_upper: bool
    has_digit: bool
    has_symbol: bool
    has_whitespace: bool
    has_repeat_run: bool
    has_sequential_run: bool
    looks_like_date: bool
    looks_like_email: bool
    contains_common_substring: bool


def character_classes(password: str) -> Dict[str, bool]:
    classes = {"lower": False, "upper": False, "digit": False, "symbol": False, "whitespace": False}
    for c in password:
        if c in LOWER:
            classes["lower"] = True
        elif c in UPPER:
            classes["upper"] = True
        elif c in DIGITS:
            classes["digit"] = True
        elif c.isspace():
            classes["whitespace"] = True
        else:
            classes["symbol"] = True
    return classes


def has_repeat_run(password: str, min_run: int = MIN_REPEAT) -> bool:
    """True if any character appears min_run or more times in a row."""
    run = 1
    for prev, cur in zip(password, password[1:]):
        run = run + 1 if cur == prev else 1
        if run >= min_run:
            return True
    return False


def has_sequential_run(password: str, min_run: int = MIN_SEQUENCE) -> bool:
    """
    Detect ascending or descending runs of consecutive code points
    ('abc', '123', 'cba', '321') of length >= min_run.

    Ascending and descending counters are kept separately; a step in one
    direction grows its own counter and sets the other back to 1.
    """
    if len(password) < min_run:
        return False
    inc_run = dec_run = 1
    for prev, cur in zip(password, password[1:]):
        step = ord(cur) - ord(prev)
        if step == 1:
            inc_run += 1
            dec_run = 1
        elif step == -1:
            dec_run += 1
            inc_run = 1
        else:
            inc_run = dec_run = 1
        if inc_run >= min_run or dec_run >= min_run:
            return True
    return False


def _is_digits(s: str) -> bool:
    return bool(s) and all(c in DIGITS for c in s)


def _year_at(s: str, i: int) -> bool:
    return s[i:i + 2] in ("19", "20") and len(s[i + 2:i + 4]) == 2 and _is_digits(s[i + 2:i + 4])


def _month_token(token: str) -> bool:
    # "1".."9", "01".."12"
    if not _is_digits(token):
        return False
    if len(token) == 1:
        return token != "0"
    return 1 <= int(token) <= 12


def _day_token(token: str) -> bool:
    # "1".."9", "01".."31"
    if not _is_digits(token):
        return False
    if len(token) == 1:
        return token != "0"
    return 1 <= int(token) <= 31


def _tokens_at(s: str, i: int, sep: str, first, second) -> Iterator[int]:
    """
    Yield the end index of every `first sep second` match starting at i,
    trying one and two digit widths for both tokens.
    """
    for w1 in (1, 2):
        head = s[i:i + w1]
        if len(head) != w1 or not first(head):
            continue
        j = i + w1
        if s[j:j + len(sep)] != sep:
            continue
        j += len(sep)
        for w2 in (1, 2):
            tail = s[j:j + w2]
            if len(tail) == w2 and second(tail):
                yield j + w2


def _year_first_at(s: str, i: int) -> bool:
    # YYYY s MM s DD
    if not _year_at(s, i):
        return False
    j = i + 4
    for sep in DATE_SEPARATORS:
        if s[j:j + len(sep)] != sep:
            continue
        if next(_tokens_at(s, j + len(sep), sep, _month_token, _day_token), None) is not None:
            return True
    return False


def _day_first_at(s: str, i: int) -> bool:
    # DD s MM s YYYY
    for sep in DATE_SEPARATORS:
        for end in _tokens_at(s, i, sep, _day_token, _month_token):
            if s[end:end + len(sep)] == sep and _year_at(s, end + len(sep)):
                return True
    return False


def looks_like_date(password: str) -> bool:
    """
    Detect YYYY-MM-DD or DD-MM-YYYY shaped substrings with years 1900-2099.
    Month and day may drop their leading zero; the separator is '-', '/',
    a single space or nothing, and the same one is used twice.
    """
    for i in range(len(password)):
        if password[i] not in DIGITS:
            continue
        if _year_first_at(password, i) or _day_first_at(password, i):
            return True
    return False


def looks_like_email(password: str) -> bool:
    """Detect a local@domain.tld shaped substring (tld of 2+ ASCII letters)."""
    n = len(password)
    for at, c in enumerate(password):
        if c != "@" or at == 0 or password[at - 1] not in EMAIL_LOCAL_CHARS:
            continue
        # walk the domain run; '@' is not a domain char so runs never overlap
        end = at + 1
        while end < n and password[end] in EMAIL_DOMAIN_CHARS:
            end += 1
        for dot in range(at + 2, end - 2):
            if password[dot] == "." and password[dot + 1] in LETTERS and password[dot + 2] in LETTERS:
                return True
    return False


def contains_common_substring(password: str, common_words: Iterable[str] = COMMON_PASSWORDS) -> bool:
    lower = password.lower()
    return any(word in lower for word in common_words)


def detect_features(password: str, common_words: Iterable[str] = COMMON_PASSWORDS) -> Features:
    classes = character_classes(password)
    return Features(
        length=len(password),
        has_lower=classes["lower"],
        has_upper=classes["upper"],
        has_digit=classes["digit"],
        has_symbol=classes["symbol"],
        has_whitespace=classes["whitespace"],
        has_repeat_run=has_repeat_run(password),
        has_sequential_run=has_sequential_run(password),
        looks_like_date=looks_like_date(password),
        looks_like_email=looks_like_email(password),
        contains_common_substring=contains_common_substring(password, common_words),
    )
