"""
Matching engines: vocabulary, autocomplete, summaries, scoring and ranking.
"""

from .vocabulary import SymptomVocabulary, get_vocabulary, reset_vocabulary
from .autocomplete import match_conditions, suggest, suggest_conditions
from .summary import extract_summary, extract_bold_bullets, extract_sentences, split_risk_factors
from .scoring import score, MAX_CONFIDENCE
from .analyzer import (
    SymptomAnalyzer,
    analyze,
    extract_symptoms,
    generate_follow_up_questions,
    get_analyzer,
)

__all__ = [
    "SymptomVocabulary",
    "get_vocabulary",
    "reset_vocabulary",
    "suggest",
    "suggest_conditions",
    "match_conditions",
    "extract_summary",
    "extract_bold_bullets",
    "extract_sentences",
    "split_risk_factors",
    "score",
    "MAX_CONFIDENCE",
    "SymptomAnalyzer",
    "analyze",
    "extract_symptoms",
    "generate_follow_up_questions",
    "get_analyzer",
]
