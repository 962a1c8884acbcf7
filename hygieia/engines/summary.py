"""
Summary extraction from condition prose.

Reduces a block of loosely structured text to a handful of short bullet
items. Two phases, tried in order:

  1. Bold bullets: lines like ``* **Item**: detail`` yield ``Item``.
  2. Sentences: if phase 1 came up short, the text is split into sentences
     and the short ones fill the remaining slots.

Both phases are heuristics over free text, so neither is guaranteed to find
anything; an empty list is a valid answer.
"""

from __future__ import annotations

import re

BOLD_BULLET = re.compile(r"(?:^|\n)\s*[*•-]\s+\*\*([^*]+)\*\*")
SENTENCE_BREAK = re.compile(r"[.!?]\s+")
_CLAUSE_BREAK = re.compile(r"[:;.].*$", re.DOTALL)
RISK_FACTORS_HEADING = "Risk Factors"

MIN_ITEM_LENGTH = 5  # exclusive
MAX_ITEM_LENGTH = 150  # exclusive


def _fits(item: str) -> bool:
    return MIN_ITEM_LENGTH < len(item) < MAX_ITEM_LENGTH


def extract_bold_bullets(text: str, count: int = 5) -> list[str]:
    """Phase 1: the bolded lead phrase of each bullet line."""
    items: list[str] = []
    if count <= 0:
        return items
    for match in BOLD_BULLET.finditer(text):
        item = _CLAUSE_BREAK.sub("", match.group(1).strip()).strip()
        if _fits(item):
            items.append(item)
        if len(items) >= count:
            break
    return items


def extract_sentences(text: str, count: int = 5, exclude: list[str] | None = None) -> list[str]:
    """Phase 2: short sentences with bold markers removed."""
    seen = list(exclude or [])
    items: list[str] = []
    if count <= 0:
        return items
    for sentence in SENTENCE_BREAK.split(text):
        clean = sentence.replace("**", "").strip()
        if _fits(clean) and clean not in seen:
            items.append(clean)
            seen.append(clean)
        if len(items) >= count:
            break
    return items


def extract_summary(text: str, count: int = 5) -> list[str]:
    """
    Extract up to ``count`` short summary items from a prose block.

    Args:
        text: Condition prose (may contain markdown-ish bullets and bold)
        count: Maximum number of items to return

    Returns:
        Ordered list of trimmed items, each 6-149 characters long
    """
    if not text or count <= 0:
        return []

    items = extract_bold_bullets(text, count)
    if len(items) < count:
        items += extract_sentences(text, count - len(items), exclude=items)
    return items[:count]


def split_risk_factors(text: str) -> str:
    """
    Section after the first "Risk Factors" heading, up to any second one.

    The heading match is case-sensitive, so prose such as "genetic risk
    factors" is not mistaken for it. Falls back to the whole text.
    """
    parts = text.split(RISK_FACTORS_HEADING)
    if len(parts) > 1 and parts[1]:
        return parts[1]
    return text
