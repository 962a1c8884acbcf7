"""
Symptom analyzer.

Ranks every condition in the knowledge base against a user's symptom list and
packages the winners as AnalysisResults, with prose summaries and a standing
"when to see a doctor" notice attached. Also produces the rule-based
follow-up questions the UI asks after a first pass.
"""

from __future__ import annotations

import logging
import re

from hygieia.config import get_config
from hygieia.engines.autocomplete import suggest
from hygieia.engines.scoring import score
from hygieia.engines.summary import extract_summary, split_risk_factors
from hygieia.engines.vocabulary import SymptomVocabulary, get_vocabulary
from hygieia.errors import EmptyInputError
from hygieia.kb import get_knowledge_base
from hygieia.models import (
    AnalysisResult,
    ConditionRecord,
    FollowUpQuestion,
    KnowledgeBase,
    QuestionType,
)

logger = logging.getLogger(__name__)

SUMMARY_ITEMS = 4
MAX_FOLLOW_UP_QUESTIONS = 3
MAX_EXTRACTED_SYMPTOMS = 10

_INPUT_SPLIT = re.compile(r"[,;]")
_FREE_TEXT_SPLIT = re.compile(r"[,;.!?]|\sand\s|\swith\s")

WHEN_TO_SEE_DOCTOR = (
    "Consult a healthcare provider if: symptoms persist or worsen, you experience severe pain, "
    "you have difficulty breathing, you notice unusual swelling or bleeding, or if you are concerned "
    "about your symptoms. Seek immediate medical attention for severe or life-threatening symptoms."
)

TREATMENT_PREFIX = "Consult your doctor for proper diagnosis and treatment. "
HOME_REMEDIES_PREFIX = "While consulting a doctor is important, these approaches may help: "
EXERCISES_PREFIX = "After consulting your healthcare provider, consider these activities: "

PARTIAL_OVERLAP_REASONING = "This condition has symptoms that partially overlap with your description."

DURATION_QUESTION = FollowUpQuestion(
    question="How long have you been experiencing these symptoms?",
    type=QuestionType.MULTIPLE_CHOICE,
    options=["Less than 24 hours", "1-3 days", "4-7 days", "More than a week", "More than a month"],
)
SEVERITY_QUESTION = FollowUpQuestion(
    question="How would you rate the severity of your symptoms?",
    type=QuestionType.MULTIPLE_CHOICE,
    options=[
        "Mild (barely noticeable)",
        "Moderate (uncomfortable but manageable)",
        "Severe (significantly affecting daily activities)",
    ],
)
FEVER_QUESTION = FollowUpQuestion(
    question="Have you experienced a fever?",
    type=QuestionType.YES_NO,
)


def parse_symptom_list(text: str) -> list[str]:
    """Split comma/semicolon separated symptoms, dropping blanks."""
    return [s.strip() for s in _INPUT_SPLIT.split(text or "") if s.strip()]


def extract_symptoms(free_text: str) -> list[str]:
    """
    Break natural-language input into candidate symptom phrases.

    Splits on punctuation and on the connectives "and"/"with"; pieces of two
    characters or fewer are dropped and at most 10 are returned.
    """
    pieces = (p.strip() for p in _FREE_TEXT_SPLIT.split(free_text or ""))
    return [p for p in pieces if len(p) > 2][:MAX_EXTRACTED_SYMPTOMS]


def build_reasoning(matching_symptoms: list[str]) -> str:
    if not matching_symptoms:
        return PARTIAL_OVERLAP_REASONING
    return (
        f"This condition matches {len(matching_symptoms)} of your symptoms: "
        f"{', '.join(matching_symptoms)}."
    )


class SymptomAnalyzer:
    """
    Local symptom-to-condition matcher.

    The knowledge base and vocabulary are injectable; by default the
    process-wide instances are used.
    """

    def __init__(
        self,
        knowledge_base: KnowledgeBase | None = None,
        vocabulary: SymptomVocabulary | None = None,
        max_results: int | None = None,
        min_confidence: int | None = None,
    ):
        config = get_config()
        if knowledge_base is None:
            knowledge_base = get_knowledge_base()
            if vocabulary is None:
                vocabulary = get_vocabulary()
        self.knowledge_base = knowledge_base
        self._vocabulary = vocabulary
        self.max_results = max_results if max_results is not None else config.max_results
        self.min_confidence = min_confidence if min_confidence is not None else config.min_confidence

    @property
    def vocabulary(self) -> SymptomVocabulary:
        # Built lazily for an injected knowledge base
        if self._vocabulary is None:
            self._vocabulary = SymptomVocabulary(self.knowledge_base)
        return self._vocabulary

    def analyze(
        self,
        symptoms_text: str,
        previous_answers: dict[str, str] | None = None,
    ) -> list[AnalysisResult]:
        """
        Rank conditions against a comma/semicolon separated symptom list.

        Args:
            symptoms_text: e.g. "headache, nausea; light sensitivity"
            previous_answers: Follow-up answers, forwarded onto each result.
                They are not used for scoring.

        Returns:
            At most ``max_results`` results, highest confidence first

        Raises:
            EmptyInputError: if no symptom phrases remain after splitting
        """
        symptom_list = parse_symptom_list(symptoms_text)
        if not symptom_list:
            raise EmptyInputError()

        answers = dict(previous_answers or {})
        results = []
        for condition in self.knowledge_base:
            confidence = score(symptom_list, condition.symptoms)
            if confidence > self.min_confidence:
                results.append(self._build_result(condition, confidence, symptom_list, answers))

        # sort() is stable, so ties keep knowledge-base order
        results.sort(key=lambda r: r.confidence, reverse=True)

        logger.debug(
            "Analyzed %d symptoms against %d conditions: %d above threshold",
            len(symptom_list), len(self.knowledge_base), len(results),
        )
        return results[:self.max_results]

    def _build_result(
        self,
        condition: ConditionRecord,
        confidence: int,
        symptom_list: list[str],
        answers: dict[str, str],
    ) -> AnalysisResult:
        condition_text = condition.symptoms.lower()
        matching = [s for s in symptom_list if s.lower() in condition_text]
        causes = condition.causes_and_risk_factors

        return AnalysisResult(
            condition_name=condition.name,
            confidence=confidence,
            matching_symptoms=matching,
            reasoning=build_reasoning(matching),
            overview=condition.overview,
            symptoms=condition.symptoms,
            causes=causes,
            causes_summary=extract_summary(causes, SUMMARY_ITEMS),
            risk_factors_summary=extract_summary(split_risk_factors(causes), SUMMARY_ITEMS),
            diagnosis=condition.diagnosis,
            treatment=TREATMENT_PREFIX + condition.treatment,
            home_remedies=HOME_REMEDIES_PREFIX + condition.home_remedies,
            home_remedies_summary=extract_summary(condition.home_remedies, SUMMARY_ITEMS),
            exercises=EXERCISES_PREFIX + condition.exercises,
            exercises_summary=extract_summary(condition.exercises, SUMMARY_ITEMS),
            when_to_see_doctor=WHEN_TO_SEE_DOCTOR,
            previous_answers=answers,
        )

    def generate_follow_up_questions(self, results: list[AnalysisResult]) -> list[FollowUpQuestion]:
        """
        Fixed-template questions for refining an analysis.

        Duration and severity are always asked when there is at least one
        result; the fever question only when the top result mentions fever.
        """
        if not results:
            return []

        questions = [DURATION_QUESTION.model_copy(deep=True), SEVERITY_QUESTION.model_copy(deep=True)]

        top = results[0]
        if "fever" in top.condition_name.lower() or "fever" in top.symptoms.lower():
            questions.append(FEVER_QUESTION.model_copy(deep=True))

        return questions[:MAX_FOLLOW_UP_QUESTIONS]

    def suggest(self, partial: str) -> list[str]:
        """Autocomplete symptom phrases."""
        return suggest(partial, self.vocabulary)

    def lookup_condition(self, name: str) -> ConditionRecord | None:
        """
        Find a condition by name.

        Exact (case-insensitive) names win; otherwise the first condition
        whose name contains the query.
        """
        query = (name or "").strip().lower()
        if not query:
            return None
        exact = self.knowledge_base.get(query)
        if exact is not None:
            return exact
        for condition in self.knowledge_base:
            if query in condition.name.lower():
                return condition
        return None


# Default analyzer over the process-wide knowledge base
_analyzer: SymptomAnalyzer | None = None


def get_analyzer() -> SymptomAnalyzer:
    """Get the default analyzer, rebuilt if the knowledge base was replaced."""
    global _analyzer
    if _analyzer is None or _analyzer.knowledge_base is not get_knowledge_base():
        _analyzer = SymptomAnalyzer()
    return _analyzer


def analyze(symptoms_text: str, previous_answers: dict[str, str] | None = None) -> list[AnalysisResult]:
    return get_analyzer().analyze(symptoms_text, previous_answers)


def generate_follow_up_questions(results: list[AnalysisResult]) -> list[FollowUpQuestion]:
    return get_analyzer().generate_follow_up_questions(results)
