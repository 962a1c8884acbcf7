"""
Result models produced by the symptom analyzer.

These are created per query and handed straight to the caller. They serialize
with camelCase keys so UI callers get the shape they already render.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple_choice"
    YES_NO = "yes_no"
    TEXT = "text"


class AnalysisResult(BaseModel):
    """One ranked candidate condition for a symptom query."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    condition_name: str
    confidence: int = Field(ge=0, le=95, description="Heuristic lexical overlap, not a probability")
    matching_symptoms: list[str] = Field(default_factory=list)
    reasoning: str

    # Pass-through prose
    overview: str = ""
    symptoms: str = ""
    causes: str = ""
    diagnosis: str = ""
    treatment: str = ""
    home_remedies: str = ""
    exercises: str = ""

    # Derived summaries
    causes_summary: list[str] = Field(default_factory=list)
    risk_factors_summary: list[str] = Field(default_factory=list)
    home_remedies_summary: list[str] = Field(default_factory=list)
    exercises_summary: list[str] = Field(default_factory=list)

    when_to_see_doctor: str = ""

    # Follow-up answers forwarded for display context; they do not affect scoring
    previous_answers: dict[str, str] = Field(default_factory=dict)


class FollowUpQuestion(BaseModel):
    """A rule-based question used to refine an analysis."""

    question: str
    type: QuestionType
    options: list[str] | None = None
