"""
Symptom vocabulary extraction.

Harvests candidate symptom phrases from every condition's symptom prose and
merges them with a curated list of common complaints. The result backs
autocomplete. Extraction is a best-effort heuristic over free text: the
curated list guarantees baseline recall when a condition's prose style slips
past the patterns.
"""

from __future__ import annotations

import re

from hygieia.kb import get_knowledge_base
from hygieia.models import KnowledgeBase

# Applied in order over the same lower-cased text
EXTRACTION_PATTERNS = [
    re.compile(r"\*\s+\*\*([^*]+)\*\*"),  # * **phrase**
    re.compile(r"\d+\.\s+\*\*([^*]+)\*\*"),  # 1. **phrase**
    re.compile(r"(?:^|\n)\s*[-•]\s*([^\n]+)"),  # - phrase / • phrase
]

_PARENTHETICAL = re.compile(r"\([^)]*\)")
_TRAILING_CLAUSE = re.compile(r"[:;,.].*$", re.DOTALL)

MIN_PHRASE_LENGTH = 3  # exclusive
MAX_PHRASE_LENGTH = 100  # exclusive

COMMON_SYMPTOMS = [
    "headache", "fever", "fatigue", "nausea", "vomiting", "diarrhea",
    "cough", "sore throat", "runny nose", "chest pain", "shortness of breath",
    "dizziness", "abdominal pain", "back pain", "muscle pain", "joint pain",
    "rash", "itching", "swelling", "numbness", "tingling", "weakness",
    "blurred vision", "ear pain", "difficulty swallowing", "loss of appetite",
    "weight loss", "weight gain", "insomnia", "anxiety", "depression",
    "confusion", "memory loss", "difficulty concentrating", "night sweats",
    "chills", "rapid heartbeat", "irregular heartbeat", "high blood pressure",
    "low blood pressure", "painful urination", "frequent urination",
    "blood in urine", "constipation", "bloating", "heartburn", "acid reflux",
]


def clean_phrase(phrase: str) -> str:
    """Strip parenthetical asides and cut at the first clause break."""
    phrase = _PARENTHETICAL.sub("", phrase.strip())
    return _TRAILING_CLAUSE.sub("", phrase).strip()


def extract_phrases(symptom_text: str) -> list[str]:
    """Pull candidate symptom phrases out of one condition's symptom prose."""
    text = symptom_text.lower()
    phrases = []
    for pattern in EXTRACTION_PATTERNS:
        for match in pattern.finditer(text):
            phrase = clean_phrase(match.group(1))
            if MIN_PHRASE_LENGTH < len(phrase) < MAX_PHRASE_LENGTH:
                phrases.append(phrase)
    return phrases


class SymptomVocabulary:
    """
    Sorted, deduplicated symptom phrases for a knowledge base.

    Computed on first access and kept for the lifetime of the instance. The
    knowledge base is immutable, so a snapshot taken at first use never goes
    stale in practice; two callers racing on first access just compute the
    same list twice.
    """

    def __init__(self, knowledge_base: KnowledgeBase, extra_symptoms: list[str] | None = None):
        self.knowledge_base = knowledge_base
        self.extra_symptoms = COMMON_SYMPTOMS if extra_symptoms is None else extra_symptoms
        self._symptoms: list[str] | None = None

    @property
    def symptoms(self) -> list[str]:
        if self._symptoms is None:
            self._symptoms = self._build()
        return self._symptoms

    def _build(self) -> list[str]:
        found = set()
        for condition in self.knowledge_base:
            found.update(extract_phrases(condition.symptoms))
        found.update(self.extra_symptoms)
        return sorted(found)

    def __len__(self) -> int:
        return len(self.symptoms)

    def __iter__(self):
        return iter(self.symptoms)

    def __contains__(self, phrase: str) -> bool:
        return phrase in self.symptoms


# Default vocabulary over the process-wide knowledge base
_vocabulary: SymptomVocabulary | None = None


def get_vocabulary() -> SymptomVocabulary:
    """Get the default vocabulary, built over the current knowledge base."""
    global _vocabulary
    kb = get_knowledge_base()
    if _vocabulary is None or _vocabulary.knowledge_base is not kb:
        _vocabulary = SymptomVocabulary(kb)
    return _vocabulary


def reset_vocabulary() -> None:
    """Drop the default vocabulary so the next access rebuilds it."""
    global _vocabulary
    _vocabulary = None
