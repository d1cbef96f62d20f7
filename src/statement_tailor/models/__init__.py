"""Data models for the document comparison engine."""

from statement_tailor.models.analysis import (
    AnalysisResult,
    ExperienceCategory,
    ExperienceEntry,
    ExperienceSummary,
    MatchOutcome,
    MatchRecord,
    Priority,
    RequirementItem,
    strip_priority,
)
from statement_tailor.models.vocabulary import DomainVocabulary

__all__ = [
    "AnalysisResult",
    "DomainVocabulary",
    "ExperienceCategory",
    "ExperienceEntry",
    "ExperienceSummary",
    "MatchOutcome",
    "MatchRecord",
    "Priority",
    "RequirementItem",
    "strip_priority",
]
