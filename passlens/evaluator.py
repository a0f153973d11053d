"""
passlens.evaluator

Password strength evaluator:
- pool_size(features): character pool implied by the classes present
- estimate_entropy(length, pool): length * log2(pool) bits
- total_penalty(features): bits removed for guessable structure and short length
- map_category(bits): strength bucket for the adjusted entropy
- estimate_crack_seconds / humanize_duration: expected time at a fixed guess rate
- PasswordAnalyzer / analyze(password): the full Report
"""

import logging
import math
from typing import FrozenSet, Iterable, Optional

from .detector import COMMON_PASSWORDS, Features, detect_features
from .report import Category, Report
from .suggestions import build_suggestions

log = logging.getLogger(__name__)

DEFAULT_GUESSES_PER_SECOND = 1e9

# pool contribution per character class
LOWER_POOL = 26
UPPER_POOL = 26
DIGIT_POOL = 10
SYMBOL_POOL = 33  # approx printable ASCII symbols
WHITESPACE_POOL = 1
MIN_POOL = 10

# bits removed per detected weakness
COMMON_WORD_PENALTY = 14.0
EMAIL_PENALTY = 10.0
DATE_PENALTY = 8.0
SEQUENCE_PENALTY = 6.0
REPEAT_PENALTY = 4.0
SHORT_LENGTH = 12
SHORT_PENALTY_PER_CHAR = 1.0

# (upper bound on adjusted bits, category); anything above the last is Excellent
CATEGORY_THRESHOLDS = (
    (28.0, Category.VERY_WEAK),
    (36.0, Category.WEAK),
    (60.0, Category.MODERATE),
    (80.0, Category.STRONG),
)

MINUTE = 60
HOUR = 3600
DAY = 86400
MONTH = DAY * 30
YEAR = DAY * 365


def pool_size(features: Features) -> int:
    pool = 0
    if features.has_lower:
        pool += LOWER_POOL
    if features.has_upper:
        pool += UPPER_POOL
    if features.has_digit:
        pool += DIGIT_POOL
    if features.has_symbol:
        pool += SYMBOL_POOL
    if features.has_whitespace:
        pool += WHITESPACE_POOL
    # minimal diversity safeguard
    return max(pool, MIN_POOL)


def estimate_entropy(length: int, pool: int) -> float:
    if length <= 0:
        return 0.0
    return length * math.log2(pool)


def total_penalty(features: Features) -> float:
    """Sum of every applicable penalty; terms stack and are not capped."""
    penalty = 0.0
    if features.contains_common_substring:
        penalty += COMMON_WORD_PENALTY
    if features.looks_like_email:
        penalty += EMAIL_PENALTY
    if features.looks_like_date:
        penalty += DATE_PENALTY
    if features.has_sequential_run:
        penalty += SEQUENCE_PENALTY
    if features.has_repeat_run:
        penalty += REPEAT_PENALTY
    if features.length < SHORT_LENGTH:
        penalty += (SHORT_LENGTH - features.length) * SHORT_PENALTY_PER_CHAR
    return penalty


def map_category(bits: float) -> Category:
    for upper, category in CATEGORY_THRESHOLDS:
        if bits < upper:
            return category
    return Category.EXCELLENT


def estimate_crack_seconds(entropy_bits: float, guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND) -> float:
    """
    Expected seconds to find the password: on average half the space,
    2 ** (bits - 1) guesses. Returns inf when that does not fit in a float.
    """
    exponent = max(0.0, entropy_bits - 1)
    try:
        expected_guesses = math.pow(2.0, exponent)
    except OverflowError:
        return math.inf
    return expected_guesses / guesses_per_second


def humanize_duration(seconds: float) -> str:
    if seconds < 1:
        return "< 1 second"
    if seconds < MINUTE:
        # half rounds up, seconds is positive here
        return f"{int(seconds + 0.5)} seconds"
    if seconds < HOUR:
        return f"{seconds / MINUTE:.1f} minutes"
    if seconds < DAY:
        return f"{seconds / HOUR:.1f} hours"
    if seconds < MONTH:
        return f"{seconds / DAY:.1f} days"
    if seconds < YEAR:
        return f"{seconds / MONTH:.1f} months"
    return "> 100 years"


def _check_rate(guesses_per_second: float) -> float:
    if isinstance(guesses_per_second, bool):
        raise ValueError(f"guesses_per_second must be a number, got {guesses_per_second!r}")
    try:
        rate = float(guesses_per_second)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValueError(f"guesses_per_second must be a number, got {guesses_per_second!r}") from e
    if not math.isfinite(rate) or rate <= 0:
        raise ValueError(f"guesses_per_second must be a positive finite number, got {guesses_per_second!r}")
    return rate


def _word_table(common_words: Iterable[str]) -> FrozenSet[str]:
    # a bare string would otherwise become a table of single letters
    if isinstance(common_words, str):
        raise TypeError("common_words must be a collection of strings, not a single string")
    words = set()
    for w in common_words:
        if not isinstance(w, str):
            raise TypeError(f"common_words entries must be strings, got {w!r}")
        if w.strip():
            words.add(w.strip().lower())
    return frozenset(words)


class PasswordAnalyzer:
    """
    Analysis engine with its tables fixed at construction.

    common_words is matched case-insensitively as substrings; entries are
    lower-cased and blank ones dropped. guesses_per_second sets the attacker
    model used for the crack time.
    """

    def __init__(
        self,
        common_words: Iterable[str] = COMMON_PASSWORDS,
        guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND,
    ):
        self.common_words = _word_table(common_words)
        self.guesses_per_second = _check_rate(guesses_per_second)

    def __repr__(self):
        return f"PasswordAnalyzer(words={len(self.common_words)}, guesses_per_second={self.guesses_per_second:g})"

    def analyze(self, password: str) -> Report:
        features = detect_features(password, self.common_words)

        pool = pool_size(features)
        raw = estimate_entropy(features.length, pool)
        penalty = total_penalty(features)
        adjusted = max(0.0, raw - penalty)
        category = map_category(adjusted)
        seconds = estimate_crack_seconds(adjusted, self.guesses_per_second)

        log.debug(
            "analyzed length=%d pool=%d raw=%.1f penalty=%.1f adjusted=%.1f category=%s",
            features.length, pool, raw, penalty, adjusted, category.value,
        )

        return Report(
            password_length=features.length,
            has_lower=features.has_lower,
            has_upper=features.has_upper,
            has_digit=features.has_digit,
            has_symbol=features.has_symbol,
            has_whitespace=features.has_whitespace,
            has_repeat_run=features.has_repeat_run,
            has_sequential_run=features.has_sequential_run,
            looks_like_date=features.looks_like_date,
            looks_like_email=features.looks_like_email,
            contains_common_substring=features.contains_common_substring,
            pool_size=pool,
            entropy_bits_raw=raw,
            penalty_bits=penalty,
            entropy_bits_adjusted=adjusted,
            category=category,
            crack_time_seconds=seconds,
            crack_time_estimate=humanize_duration(seconds),
            suggestions=build_suggestions(features),
        )


_default_analyzer = PasswordAnalyzer()


def analyze(
    password: str,
    guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND,
    common_words: Optional[Iterable[str]] = None,
) -> Report:
    """
    Analyze a password and return its Report.

    With no overrides the shared built-in analyzer is used; otherwise a
    one-off analyzer is built from the given rate and word table.
    """
    if common_words is None and guesses_per_second == DEFAULT_GUESSES_PER_SECOND:
        return _default_analyzer.analyze(password)
    words = COMMON_PASSWORDS if common_words is None else common_words
    return PasswordAnalyzer(words, guesses_per_second).analyze(password)
