"""Analysis orchestrator - runs every extraction stage over the two documents."""

from __future__ import annotations

import logging
from collections.abc import Callable

from statement_tailor.config import AppConfig
from statement_tailor.errors import InvalidInputError
from statement_tailor.models.analysis import (
    AnalysisResult,
    ExperienceSummary,
    MatchRecord,
)
from statement_tailor.pipeline.education_extractor import extract_education
from statement_tailor.pipeline.experience_segmenter import segment_experience
from statement_tailor.pipeline.requirement_extractor import extract_requirements
from statement_tailor.pipeline.requirement_matcher import RequirementMatcher
from statement_tailor.pipeline.skill_extractor import extract_skills
from statement_tailor.pipeline.value_tagger import tag_values

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int], None]


class ProgressReporter:
    """Forwards checkpoints to a callback, never going backwards.

    ``finish`` emits the 100% checkpoint; it only fires once per run.
    """

    def __init__(self, callback: ProgressCallback | None = None):
        self.callback = callback
        self.percent = 0
        self.finished = False

    def report(self, stage: str, percent: int) -> None:
        if self.finished:
            return
        self.percent = max(self.percent, min(percent, 99))
        if self.callback:
            self.callback(stage, self.percent)

    def finish(self, stage: str) -> None:
        if self.finished:
            return
        self.finished = True
        self.percent = 100
        if self.callback:
            self.callback(stage, 100)


def recommend_highlights(
    matched: list[MatchRecord],
    value_tags: list[str],
    experience: ExperienceSummary,
    value_label: str = "NHS values",
) -> list[str]:
    """Short suggestions for what the statement should emphasise."""
    highlights: list[str] = []
    if value_tags:
        highlights.append(f"Show how you fit with {value_label} like {', '.join(value_tags[:2])}")
    for record in matched[:2]:
        highlights.append(f"Give examples of your {record.requirement.label}")
    if experience.clinical:
        highlights.append("Mention your clinical achievements with numbers if you can")
    if experience.non_clinical:
        highlights.append("Explain how your non-clinical experience helps in this job")
    if experience.administrative:
        highlights.append("Show how your admin skills help deliver healthcare")
    highlights.append("Include times when you solved problems well")
    return highlights


class AnalysisOrchestrator:
    """Compares a candidate profile with a job posting, deterministically."""

    def __init__(self, config: AppConfig | None = None):
        self.config = config or AppConfig()
        self.vocab = self.config.vocabulary
        self.matcher = RequirementMatcher(self.vocab, self.config.matching)

    def run(
        self,
        profile_text: str,
        posting_text: str,
        addenda_text: str = "",
        *,
        on_progress: ProgressCallback | None = None,
        current_year: int | None = None,
    ) -> AnalysisResult:
        """Run the full comparison.

        Args:
            profile_text: Candidate profile (CV) as plain text.
            posting_text: Job posting as plain text.
            addenda_text: Extra experience supplied by the applicant.
            on_progress: Optional callback(stage_label, percent) invoked at
                fixed checkpoints; percent never decreases and 100 is
                reported exactly once, on success or failure.
            current_year: Year used for open-ended "present" ranges.

        Raises:
            InvalidInputError: If any text argument is not a string, or the
                callback is not callable. Raised before any progress event.
        """
        for name, value in (
            ("profile_text", profile_text),
            ("posting_text", posting_text),
            ("addenda_text", addenda_text),
        ):
            if not isinstance(value, str):
                raise InvalidInputError(f"{name} must be a string, got {type(value).__name__}")
        if on_progress is not None and not callable(on_progress):
            raise InvalidInputError("on_progress must be callable")

        progress = ProgressReporter(on_progress)
        succeeded = False
        try:
            result = self._run(profile_text, posting_text, addenda_text, progress, current_year)
            succeeded = True
            return result
        except Exception:
            logger.error("Analysis failed", exc_info=True)
            raise
        finally:
            progress.finish("Analysis complete" if succeeded else "Analysis failed")

    def _run(
        self,
        profile_text: str,
        posting_text: str,
        addenda_text: str,
        progress: ProgressReporter,
        current_year: int | None,
    ) -> AnalysisResult:
        extraction = self.config.extraction
        logger.info(
            "Analyzing profile (%d chars) against posting (%d chars)",
            len(profile_text), len(posting_text),
        )

        progress.report("Initializing analysis", 5)
        value_tags = tag_values(posting_text, self.vocab)

        progress.report("Extracting requirements", 15)
        requirements = extract_requirements(
            posting_text, self.vocab, max_length=extraction.max_requirement_length,
        )
        if not requirements:
            logger.info("Posting yielded no requirements")

        progress.report("Extracting skills", 25)
        skills = extract_skills(profile_text, self.vocab, max_skills=extraction.max_skills)
        education = extract_education(profile_text, self.vocab)

        progress.report("Analyzing experience", 45)
        experience = segment_experience(
            profile_text,
            self.vocab,
            current_year=current_year,
            max_summary_length=extraction.max_summary_length,
        )

        progress.report("Matching requirements", 70)
        outcome = self.matcher.match(requirements, profile_text, addenda_text)

        progress.report("Generating highlights", 90)
        highlights = recommend_highlights(
            outcome.matched, value_tags, experience, self.vocab.value_label,
        )

        logger.info(
            "Analysis finished: %d matched, %d missing",
            len(outcome.matched), len(outcome.missing),
        )
        return AnalysisResult(
            skills=skills,
            experience=experience,
            value_tags=value_tags,
            education=education,
            requirements=requirements,
            matched_requirements=outcome.matched,
            missing_requirements=outcome.missing,
            recommended_highlights=highlights,
        )


def analyze(
    profile_text: str,
    posting_text: str,
    addenda_text: str = "",
    *,
    on_progress: ProgressCallback | None = None,
    config: AppConfig | None = None,
    current_year: int | None = None,
) -> AnalysisResult:
    """Compare a candidate profile with a job posting."""
    return AnalysisOrchestrator(config).run(
        profile_text,
        posting_text,
        addenda_text,
        on_progress=on_progress,
        current_year=current_year,
    )
