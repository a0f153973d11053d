"""
passlens.report

The analysis result:
- Category: strength buckets, ordered weakest to strongest
- Report: immutable snapshot produced by the evaluator
- report_rows(report): (label, value) pairs in display order, shared by renderers
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple


class Category(str, Enum):
    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"
    EXCELLENT = "Excellent"

    @property
    def rank(self) -> int:
        return list(Category).index(self)


@dataclass(frozen=True)
class Report:
    password_length: int
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
    pool_size: int
    entropy_bits_raw: float
    penalty_bits: float
    entropy_bits_adjusted: float
    category: Category
    crack_time_seconds: float
    crack_time_estimate: str
    suggestions: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe payload for non-interactive callers."""
        seconds = self.crack_time_seconds
        return {
            "password_length": self.password_length,
            "classes": {
                "lower": self.has_lower,
                "upper": self.has_upper,
                "digit": self.has_digit,
                "symbol": self.has_symbol,
                "whitespace": self.has_whitespace,
            },
            "patterns": {
                "repeat_run": self.has_repeat_run,
                "sequential_run": self.has_sequential_run,
                "date_like": self.looks_like_date,
                "email_like": self.looks_like_email,
                "common_substring": self.contains_common_substring,
            },
            "pool_size": self.pool_size,
            "entropy_bits_raw": self.entropy_bits_raw,
            "penalty_bits": self.penalty_bits,
            "entropy_bits_adjusted": self.entropy_bits_adjusted,
            "category": self.category.value,
            "crack_time_seconds": seconds if math.isfinite(seconds) else None,
            "crack_time_estimate": self.crack_time_estimate,
            "suggestions": list(self.suggestions),
        }


# display order shared by every renderer
ROW_LABELS = (
    "Length",
    "Classes",
    "Patterns",
    "Entropy (raw)",
    "Entropy (adjusted)",
    "Strength",
    "Crack time",
)


def _flags(pairs: List[Tuple[str, bool]]) -> str:
    return ", ".join(f"{name}={'yes' if value else 'no'}" for name, value in pairs)


def report_rows(report: Report) -> List[Tuple[str, str]]:
    """
    Rows every renderer shows, in order: length, classes, patterns,
    both entropy values, strength and crack time. Suggestions are listed
    separately by the caller.
    """
    classes = _flags([
        ("lower", report.has_lower),
        ("upper", report.has_upper),
        ("digit", report.has_digit),
        ("symbol", report.has_symbol),
        ("whitespace", report.has_whitespace),
    ])
    patterns = _flags([
        ("repeat>=3", report.has_repeat_run),
        ("sequential", report.has_sequential_run),
        ("date", report.looks_like_date),
        ("email", report.looks_like_email),
        ("common word", report.contains_common_substring),
    ])
    values = (
        str(report.password_length),
        classes,
        patterns,
        f"{report.entropy_bits_raw:.1f} bits",
        f"{report.entropy_bits_adjusted:.1f} bits",
        report.category.value,
        report.crack_time_estimate,
    )
    return list(zip(ROW_LABELS, values))
