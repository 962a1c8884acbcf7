"""
Symptom match scoring.

Weighted partial-credit matching of user symptom phrases against one
condition's symptom text:

  - whole phrase found:         +2 match, +2 weight
  - only some long words found: +0.5 per word, +1 weight
  - nothing found:              +0 match, +2 weight

A miss weighs as much as a full match, so the score drops with every
unmatched symptom.
"""

from __future__ import annotations

import math
from typing import Sequence

MAX_CONFIDENCE = 95
MIN_WORD_LENGTH = 3  # exclusive

FULL_MATCH_CREDIT = 2.0
FULL_MATCH_WEIGHT = 2
WORD_MATCH_CREDIT = 0.5
PARTIAL_MATCH_WEIGHT = 1
MISS_WEIGHT = 2


def score(user_symptoms: Sequence[str], condition_symptom_text: str) -> int:
    """
    Score how well user symptoms match a condition's symptom text.

    Returns:
        Integer confidence in [0, 95]; never 100, by policy
    """
    condition_text = condition_symptom_text.lower()
    match_count = 0.0
    total_weight = 0

    for symptom in user_symptoms:
        symptom_lower = symptom.lower()

        if symptom_lower in condition_text:
            match_count += FULL_MATCH_CREDIT
            total_weight += FULL_MATCH_WEIGHT
            continue

        word_matches = sum(
            1 for word in symptom_lower.split(" ")
            if len(word) > MIN_WORD_LENGTH and word in condition_text
        )
        if word_matches > 0:
            match_count += word_matches * WORD_MATCH_CREDIT
            total_weight += PARTIAL_MATCH_WEIGHT
        else:
            total_weight += MISS_WEIGHT

    if total_weight == 0:
        return 0

    percentage = min(MAX_CONFIDENCE, (match_count / total_weight) * 100)
    # Halves round up
    return max(0, min(MAX_CONFIDENCE, math.floor(percentage + 0.5)))
