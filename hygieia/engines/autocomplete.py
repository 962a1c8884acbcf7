"""
Autocomplete over symptom phrases and condition names.
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from hygieia.engines.vocabulary import SymptomVocabulary, get_vocabulary
from hygieia.kb import get_knowledge_base
from hygieia.models import ConditionRecord, KnowledgeBase

MIN_QUERY_LENGTH = 2
MAX_SUGGESTIONS = 10
MAX_CONDITION_SUGGESTIONS = 8

T = TypeVar("T")


def rank_matches(
    query: str,
    candidates: Iterable[T],
    limit: int,
    key: Callable[[T], str] = str,
) -> list[T]:
    """
    Case-insensitive substring filter, prefix matches first.

    Within each group candidates keep their incoming order. ``key`` gives
    the text matched for each candidate.
    """
    term = query.strip().lower()
    if len(term) < MIN_QUERY_LENGTH:
        return []

    starts_with = []
    contains = []
    for candidate in candidates:
        lowered = key(candidate).lower()
        if lowered.startswith(term):
            starts_with.append(candidate)
        elif term in lowered:
            contains.append(candidate)

    return (starts_with + contains)[:limit]


def suggest(
    partial: str,
    vocabulary: SymptomVocabulary | None = None,
    limit: int = MAX_SUGGESTIONS,
) -> list[str]:
    """Suggest symptom phrases for a partially typed symptom."""
    if not partial:
        return []
    if vocabulary is None:
        vocabulary = get_vocabulary()
    return rank_matches(partial, vocabulary.symptoms, min(limit, MAX_SUGGESTIONS))


def match_conditions(
    partial: str,
    knowledge_base: KnowledgeBase | None = None,
    limit: int = MAX_CONDITION_SUGGESTIONS,
) -> list[ConditionRecord]:
    """Condition records whose names match a partially typed search."""
    if not partial:
        return []
    if knowledge_base is None:
        knowledge_base = get_knowledge_base()
    return rank_matches(partial, knowledge_base, limit, key=lambda c: c.name)


def suggest_conditions(
    partial: str,
    knowledge_base: KnowledgeBase | None = None,
    limit: int = MAX_CONDITION_SUGGESTIONS,
) -> list[str]:
    """Suggest condition names for a partially typed condition search."""
    return [c.name for c in match_conditions(partial, knowledge_base, limit)]
