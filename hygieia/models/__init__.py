"""
Data models for Hygieia.
"""

from hygieia.models.condition import ConditionRecord, KnowledgeBase
from hygieia.models.analysis import AnalysisResult, FollowUpQuestion, QuestionType

__all__ = [
    "ConditionRecord",
    "KnowledgeBase",
    "AnalysisResult",
    "FollowUpQuestion",
    "QuestionType",
]
