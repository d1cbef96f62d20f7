"""Extraction, matching and orchestration stages."""

from statement_tailor.pipeline.education_extractor import extract_education
from statement_tailor.pipeline.experience_segmenter import (
    ExperienceSegmenter,
    categorize,
    estimate_tenure,
    segment_experience,
)
from statement_tailor.pipeline.orchestrator import AnalysisOrchestrator, analyze
from statement_tailor.pipeline.requirement_extractor import (
    RequirementExtractor,
    extract_requirements,
)
from statement_tailor.pipeline.requirement_matcher import RequirementMatcher, match_requirements
from statement_tailor.pipeline.skill_extractor import extract_skills
from statement_tailor.pipeline.value_tagger import tag_values

__all__ = [
    "AnalysisOrchestrator",
    "ExperienceSegmenter",
    "RequirementExtractor",
    "RequirementMatcher",
    "analyze",
    "categorize",
    "estimate_tenure",
    "extract_education",
    "extract_requirements",
    "extract_skills",
    "match_requirements",
    "segment_experience",
    "tag_values",
]
