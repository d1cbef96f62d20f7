"""Domain vocabulary: every keyword list the text heuristics rely on.

The defaults follow public-sector healthcare recruitment conventions
(person specifications with essential/desirable criteria, organisational
values, clinical vs. administrative roles). Other domains override fields
through the ``vocabulary:`` section of config.yaml.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

MONTH_PATTERN = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?"


class DomainVocabulary(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Value tagging
    value_label: str = "NHS values"
    value_phrases: list[str] = Field(default_factory=lambda: [
        "respect and dignity",
        "commitment to quality of care",
        "compassion",
        "improving lives",
        "working together for patients",
        "everyone counts",
        "patient-centered care",
        "patient-centred care",
        "person-centred care",
        "integrity",
        "equality",
        "diversity",
        "inclusion",
        "transparency",
        "accountability",
    ])
    default_values: list[str] = Field(default_factory=lambda: [
        "respect and dignity",
        "commitment to quality of care",
        "compassion",
        "improving lives",
        "working together for patients",
    ])

    # Requirement sections of a posting
    person_spec_headings: list[str] = Field(default_factory=lambda: [
        "person specification",
        "personal specification",
        "person spec",
    ])
    essential_headings: list[str] = Field(default_factory=lambda: [
        "essential criteria",
        "essential",
        "mandatory",
    ])
    desirable_headings: list[str] = Field(default_factory=lambda: [
        "desirable criteria",
        "desirable",
        "preferred",
    ])
    requirement_headings: list[str] = Field(default_factory=lambda: [
        "essential",
        "requirements",
        "qualifications",
        "experience required",
    ])
    closing_headings: list[str] = Field(default_factory=lambda: [
        "about us",
        "about the role",
        "responsibilities",
        "duties",
    ])
    obligation_phrases: list[str] = Field(default_factory=lambda: [
        "must have",
        "required",
        "essential",
        "you will have",
        "you should have",
        "you must have",
    ])
    soft_obligation_phrases: list[str] = Field(default_factory=lambda: [
        "desirable",
        "preferred",
        "advantageous",
        "beneficial",
    ])

    # Skills
    skill_indicators: list[str] = Field(default_factory=lambda: [
        "skill",
        "ability",
        "proficient",
        "experienced in",
        "trained in",
        "responsible for",
        "expert in",
        "knowledge of",
        "competent in",
        "familiar with",
        "capable of",
        "qualified in",
        "specializing in",
        "specialising in",
        "certified in",
        "practiced in",
    ])
    skills_headers: list[str] = Field(default_factory=lambda: [
        "skills",
        "abilities",
        "competencies",
        "expertise",
        "qualifications",
    ])

    # Work history
    experience_headers: list[str] = Field(default_factory=lambda: [
        "experience",
        "employment",
        "work history",
        "work experience",
        "professional experience",
        "relevant experience",
        "career",
        "professional background",
    ])
    section_terminators: list[str] = Field(default_factory=lambda: [
        "education",
        "qualifications",
        "skills",
        "training",
        "references",
        "interests",
        "hobbies",
        "certifications",
        "memberships",
    ])
    clinical_keywords: list[str] = Field(default_factory=lambda: [
        "nurse", "doctor", "medical", "patient", "clinical", "care", "health",
        "hospital", "treatment", "diagnostic", "therapy", "ward", "nhs",
        "healthcare", "surgery", "clinic", "physician", "rehabilitation",
        "emergency", "maternity", "midwife", "pharmacist", "radiographer",
    ])
    administrative_keywords: list[str] = Field(default_factory=lambda: [
        "admin", "administrative", "office", "clerk", "secretary", "coordinator",
        "supervisor", "manager", "assistant", "receptionist", "scheduling",
        "documentation", "paperwork", "filing", "records", "reception",
    ])
    work_keywords: list[str] = Field(default_factory=lambda: [
        "experience", "work", "job", "position", "role",
    ])

    # Education
    education_headers: list[str] = Field(default_factory=lambda: [
        "education",
        "qualifications",
        "academic",
        "educational background",
        "academic qualifications",
        "academic background",
        "degrees",
    ])
    education_terminators: list[str] = Field(default_factory=lambda: [
        "experience",
        "employment",
        "work history",
        "career",
        "skills",
        "references",
        "interests",
        "hobbies",
    ])
    degree_keywords: list[str] = Field(default_factory=lambda: [
        "degree", "bachelor", "master", "phd", "diploma", "certificate",
        "graduation", "msc", "bsc", "ba", "ma", "md", "mbbs", "nursing",
        "nmc", "registered", "qualification", "certified", "license",
    ])

    # Matching
    stopwords: list[str] = Field(default_factory=lambda: [
        "with", "this", "that", "have", "from", "were", "what", "when", "where",
        "which", "their", "there", "these", "those", "will", "should", "could",
        "would", "able",
    ])

    @field_validator("default_values")
    @classmethod
    def _default_values_not_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("default_values must name at least one value")
        return v
