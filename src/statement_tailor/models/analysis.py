"""Pydantic models for the document comparison result."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

PRIORITY_PREFIX = re.compile(r"^\[(Essential|Desirable)\]\s*")


class Priority(str, Enum):
    ESSENTIAL = "Essential"
    DESIRABLE = "Desirable"


class ExperienceCategory(str, Enum):
    CLINICAL = "Clinical"
    ADMINISTRATIVE = "Administrative"
    NON_CLINICAL = "NonClinical"


def strip_priority(text: str) -> str:
    """Remove a leading ``[Essential]``/``[Desirable]`` tag."""
    return PRIORITY_PREFIX.sub("", text, count=1)


class RequirementItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str  # tagged, e.g. "[Essential] NMC registration"
    priority: Priority = Priority.ESSENTIAL

    @property
    def label(self) -> str:
        return strip_priority(self.text)


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: str
    category: ExperienceCategory


class ExperienceSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    entries: list[ExperienceEntry] = Field(default_factory=list)
    years_of_experience: int = Field(default=0, ge=0)

    def by_category(self, category: ExperienceCategory) -> list[str]:
        return [e.summary for e in self.entries if e.category == category]

    @property
    def clinical(self) -> list[str]:
        return self.by_category(ExperienceCategory.CLINICAL)

    @property
    def non_clinical(self) -> list[str]:
        return self.by_category(ExperienceCategory.NON_CLINICAL)

    @property
    def administrative(self) -> list[str]:
        return self.by_category(ExperienceCategory.ADMINISTRATIVE)


class MatchRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    requirement: RequirementItem
    evidence: str
    matched_keywords: list[str]


class MatchOutcome(BaseModel):
    """Matcher output: every input requirement lands in exactly one list."""

    model_config = ConfigDict(frozen=True)

    matched: list[MatchRecord] = Field(default_factory=list)
    missing: list[RequirementItem] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills: list[str]
    experience: ExperienceSummary
    value_tags: list[str]
    education: list[str] = Field(default_factory=list)
    requirements: list[RequirementItem]
    matched_requirements: list[MatchRecord]
    missing_requirements: list[RequirementItem]
    recommended_highlights: list[str]
