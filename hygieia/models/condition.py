"""
Condition records and the in-memory knowledge base.

Each record is one disease/disorder entry made of free-text prose blocks.
The prose is semi-structured at best (bold markers, bullets, numbered lists),
so nothing here tries to parse it; that is the engines' job.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ConditionRecord(BaseModel):
    """A single condition entry from the knowledge base."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(
        min_length=1,
        validation_alias=AliasChoices("name", "condition_name", "conditionName"),
    )
    overview: str = ""
    symptoms: str = ""
    causes_and_risk_factors: str = Field(
        default="",
        validation_alias=AliasChoices(
            "causes_and_risk_factors", "causesAndRiskFactors", "causes"
        ),
    )
    diagnosis: str = ""
    treatment: str = ""
    home_remedies: str = Field(
        default="",
        validation_alias=AliasChoices(
            "home_remedies", "home_remedies_and_lifestyle", "homeRemedies"
        ),
    )
    exercises: str = ""

    # Display metadata
    category: str | None = None
    image_url: str | None = Field(
        default=None, validation_alias=AliasChoices("image_url", "imageUrl")
    )
    image_attribution: str | None = Field(
        default=None,
        validation_alias=AliasChoices("image_attribution", "imageAttribution"),
    )


class KnowledgeBase:
    """
    Ordered, read-only collection of condition records.

    Order only matters for stable iteration (ties in ranking keep it).
    """

    def __init__(self, conditions: Iterable[ConditionRecord], source: str | None = None):
        self._conditions: tuple[ConditionRecord, ...] = tuple(conditions)
        self._by_name = {c.name.lower(): c for c in self._conditions}
        self.source = source

    @property
    def conditions(self) -> tuple[ConditionRecord, ...]:
        return self._conditions

    def __iter__(self) -> Iterator[ConditionRecord]:
        return iter(self._conditions)

    def __len__(self) -> int:
        return len(self._conditions)

    def __repr__(self) -> str:
        return f"KnowledgeBase({len(self)} conditions, source={self.source!r})"

    def names(self) -> list[str]:
        """Condition names in knowledge-base order."""
        return [c.name for c in self._conditions]

    def get(self, name: str) -> ConditionRecord | None:
        """Case-insensitive exact lookup by condition name."""
        return self._by_name.get(name.strip().lower())
