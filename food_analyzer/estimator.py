"""Keyword-based calorie estimation from a free-text food label."""

import re
from typing import NamedTuple

from food_analyzer.calorie_table import CALORIE_TABLE, DEFAULT_CALORIES

# Confidence for a keyword hit vs. the default guess
MATCHED_CONFIDENCE = 0.85
DEFAULT_CONFIDENCE = 0.5

_PUNCTUATION_RE = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")


class CalorieEstimate(NamedTuple):
    calories: int
    confidence: float


def normalize_label(label: str) -> str:
    return _PUNCTUATION_RE.sub("", (label or "").lower())


def estimate_calories(
    label: str,
    matched_confidence: float = MATCHED_CONFIDENCE,
    default_confidence: float = DEFAULT_CONFIDENCE,
) -> CalorieEstimate:
    """
    Return kcal per 100g for the first table keyword found in the label.

    Falls back to DEFAULT_CALORIES with the lower confidence when no
    keyword matches (including an empty label).
    """
    normalized = normalize_label(label)

    for keyword, calories in CALORIE_TABLE.items():
        if keyword in normalized:
            return CalorieEstimate(calories, matched_confidence)

    return CalorieEstimate(DEFAULT_CALORIES, default_confidence)
