from passlens.detector import detect_features
from passlens.suggestions import (
    ADD_DIGITS,
    ADD_LOWER,
    ADD_SYMBOLS,
    ADD_UPPER,
    AVOID_DATES,
    AVOID_EMAIL,
    AVOID_REPEATS,
    AVOID_SEQUENCES,
    LENGTHEN,
    LOOKS_SOLID,
    REMOVE_COMMON,
    build_suggestions,
)

def test_empty_password_suggestions():
    tips = build_suggestions(detect_features(""))
    assert tips == (LENGTHEN, ADD_LOWER, ADD_UPPER, ADD_DIGITS, ADD_SYMBOLS)

def test_suggestions_follow_fixed_order():
    tips = build_suggestions(detect_features("password111abc"))
    assert tips == (LENGTHEN, ADD_UPPER, ADD_SYMBOLS, AVOID_REPEATS, AVOID_SEQUENCES, REMOVE_COMMON)

def test_email_and_date_suggestions():
    tips = build_suggestions(detect_features("Zz!john.doe@example.com 2025-07-04"))
    assert tips[-2:] == (AVOID_EMAIL, AVOID_DATES)

def test_strong_password_gets_affirmation():
    tips = build_suggestions(detect_features("Tr33s&Skies_2025!long"))
    assert tips == (LOOKS_SOLID,)
