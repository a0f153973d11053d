"""
passlens.suggestions

Turn detected features into concrete, ordered improvement tips.
"""

from typing import List, Tuple

from .detector import Features

RECOMMENDED_LENGTH = 16

LENGTHEN = "Increase length to 16+ characters (or a 4+ word passphrase)."
ADD_LOWER = "Add lowercase letters."
ADD_UPPER = "Add uppercase letters."
ADD_DIGITS = "Include digits."
ADD_SYMBOLS = "Include symbols (e.g., !@#)."
AVOID_REPEATS = "Avoid repeating the same character 3+ times."
AVOID_SEQUENCES = "Avoid sequences like 'abc' or '123' (use non-adjacent characters)."
REMOVE_COMMON = "Remove common words or predictable chunks (e.g., 'password')."
AVOID_EMAIL = "Do not reuse email-like strings in passwords."
AVOID_DATES = "Avoid dates/birthdays."
LOOKS_SOLID = "Looks solid. Consider a longer passphrase for even more safety."

# closing advice shown after every report
GENERAL_TIPS = "Avoid using real names, emails, or dates. Consider a passphrase (4+ random words) with symbols."


def build_suggestions(features: Features) -> Tuple[str, ...]:
    """
    Checks run in a fixed order so the same features always give the same
    list. Never empty: with nothing to fix, a single affirmative tip.
    """
    tips: List[str] = []
    if features.length < RECOMMENDED_LENGTH:
        tips.append(LENGTHEN)
    if not features.has_lower:
        tips.append(ADD_LOWER)
    if not features.has_upper:
        tips.append(ADD_UPPER)
    if not features.has_digit:
        tips.append(ADD_DIGITS)
    if not features.has_symbol:
        tips.append(ADD_SYMBOLS)
    if features.has_repeat_run:
        tips.append(AVOID_REPEATS)
    if features.has_sequential_run:
        tips.append(AVOID_SEQUENCES)
    if features.contains_common_substring:
        tips.append(REMOVE_COMMON)
    if features.looks_like_email:
        tips.append(AVOID_EMAIL)
    if features.looks_like_date:
        tips.append(AVOID_DATES)
    if not tips:
        tips.append(LOOKS_SOLID)
    return tuple(tips)
