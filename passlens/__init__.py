"""PassLens: explainable password strength analysis."""

from .evaluator import DEFAULT_GUESSES_PER_SECOND, PasswordAnalyzer, analyze
from .report import Category, Report

__all__ = ["analyze", "PasswordAnalyzer", "Report", "Category", "DEFAULT_GUESSES_PER_SECOND"]
__version__ = "0.1.0"
