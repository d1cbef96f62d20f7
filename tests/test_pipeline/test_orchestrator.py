"""Tests for the analysis orchestrator."""

from unittest.mock import patch

import pytest

from statement_tailor import InvalidInputError, analyze
from statement_tailor.config import AppConfig, ExtractionConfig
from statement_tailor.models.analysis import ExperienceCategory, Priority
from statement_tailor.pipeline.orchestrator import AnalysisOrchestrator, ProgressReporter


@pytest.fixture
def events():
    return []


@pytest.fixture
def record(events):
    def _record(stage: str, percent: int) -> None:
        events.append((stage, percent))
    return _record


class TestProgressReporter:
    def test_never_goes_backwards(self, events, record):
        reporter = ProgressReporter(record)
        reporter.report("a", 50)
        reporter.report("b", 20)
        assert events == [("a", 50), ("b", 50)]

    def test_report_stays_below_100(self, events, record):
        reporter = ProgressReporter(record)
        reporter.report("a", 150)
        assert events == [("a", 99)]

    def test_finish_fires_once(self, events, record):
        reporter = ProgressReporter(record)
        reporter.finish("done")
        reporter.finish("done again")
        reporter.report("late", 40)
        assert events == [("done", 100)]

    def test_without_callback(self):
        reporter = ProgressReporter()
        reporter.report("a", 10)
        reporter.finish("done")
        assert reporter.percent == 100


class TestAnalyze:
    def test_full_analysis(self, sample_profile_text, sample_posting_text, current_year):
        result = analyze(sample_profile_text, sample_posting_text, current_year=current_year)

        assert result.value_tags == ["respect and dignity", "compassion", "everyone counts"]
        assert [(r.label, r.priority) for r in result.requirements] == [
            ("NMC registration as an Adult Nurse", Priority.ESSENTIAL),
            ("Experience with medication administration", Priority.ESSENTIAL),
            ("Excellent communication skills with patients and families", Priority.ESSENTIAL),
            ("Leadership course or mentorship qualification", Priority.DESIRABLE),
            ("Experience of electronic records systems", Priority.DESIRABLE),
        ]
        assert len(result.matched_requirements) == 3
        assert [r.label for r in result.missing_requirements] == [
            "Leadership course or mentorship qualification",
            "Experience of electronic records systems",
        ]
        assert [e.category for e in result.experience.entries] == [ExperienceCategory.CLINICAL] * 2
        assert result.experience.years_of_experience == 11
        assert result.education == ["2014 - 2017 BSc Adult Nursing, University of Leeds"]
        assert "Wound Care" in result.skills
        assert result.recommended_highlights == [
            "Show how you fit with NHS values like respect and dignity, compassion",
            "Give examples of your NMC registration as an Adult Nurse",
            "Give examples of your Experience with medication administration",
            "Mention your clinical achievements with numbers if you can",
            "Include times when you solved problems well",
        ]

    def test_idempotent(self, sample_profile_text, sample_posting_text, current_year):
        first = analyze(sample_profile_text, sample_posting_text, "Extra notes", current_year=current_year)
        second = analyze(sample_profile_text, sample_posting_text, "Extra notes", current_year=current_year)
        assert first.model_dump_json() == second.model_dump_json()

    def test_empty_documents(self):
        result = analyze("", "")
        assert result.requirements == []
        assert result.matched_requirements == []
        assert result.missing_requirements == []
        assert result.skills == []
        assert result.experience.years_of_experience == 0
        assert result.value_tags == [
            "respect and dignity",
            "commitment to quality of care",
            "compassion",
            "improving lives",
            "working together for patients",
        ]
        assert result.recommended_highlights == [
            "Show how you fit with NHS values like respect and dignity, commitment to quality of care",
            "Include times when you solved problems well",
        ]

    def test_administrative_highlight(self):
        profile = "Experience\n2019 - 2023 Medical Secretary at the practice office, typing and filing\n"
        result = analyze(profile, "", current_year=2025)
        assert result.experience.administrative
        assert "Show how your admin skills help deliver healthcare" in result.recommended_highlights

    def test_config_limits_skills(self, sample_profile_text, sample_posting_text):
        config = AppConfig(extraction=ExtractionConfig(max_skills=2))
        result = AnalysisOrchestrator(config).run(sample_profile_text, sample_posting_text)
        assert len(result.skills) == 2


class TestProgress:
    def test_checkpoints_on_success(self, sample_profile_text, sample_posting_text, events, record):
        analyze(sample_profile_text, sample_posting_text, on_progress=record)
        assert events == [
            ("Initializing analysis", 5),
            ("Extracting requirements", 15),
            ("Extracting skills", 25),
            ("Analyzing experience", 45),
            ("Matching requirements", 70),
            ("Generating highlights", 90),
            ("Analysis complete", 100),
        ]

    def test_failure_still_reports_100_once(self, sample_profile_text, sample_posting_text, events, record):
        with patch(
            "statement_tailor.pipeline.orchestrator.segment_experience",
            side_effect=RuntimeError("boom"),
        ):
            with pytest.raises(RuntimeError, match="boom"):
                analyze(sample_profile_text, sample_posting_text, on_progress=record)

        percents = [p for _, p in events]
        assert percents == sorted(percents)
        assert percents.count(100) == 1
        assert events[-1] == ("Analysis failed", 100)

    def test_callback_error_propagates(self, sample_profile_text, sample_posting_text):
        seen = []

        def flaky(stage, percent):
            seen.append(percent)
            if percent == 25:
                raise ValueError("listener broke")

        with pytest.raises(ValueError, match="listener broke"):
            analyze(sample_profile_text, sample_posting_text, on_progress=flaky)
        assert seen == [5, 15, 25, 100]

    def test_original_error_logged_when_callback_fails_on_finish(
        self, sample_profile_text, sample_posting_text, caplog
    ):
        def fails_on_finish(stage, percent):
            if percent == 100:
                raise ValueError("listener broke")

        with patch(
            "statement_tailor.pipeline.orchestrator.segment_experience",
            side_effect=RuntimeError("boom"),
        ):
            with caplog.at_level("ERROR", logger="statement_tailor.pipeline.orchestrator"):
                with pytest.raises(ValueError, match="listener broke"):
                    analyze(sample_profile_text, sample_posting_text, on_progress=fails_on_finish)

        record = next(r for r in caplog.records if r.getMessage() == "Analysis failed")
        assert isinstance(record.exc_info[1], RuntimeError)


class TestInvalidInput:
    @pytest.mark.parametrize(
        "args",
        [
            (None, "posting"),
            ("profile", 42),
            ("profile", "posting", ["addenda"]),
        ],
    )
    def test_non_string_rejected_before_progress(self, args, events, record):
        with pytest.raises(InvalidInputError):
            analyze(*args, on_progress=record)
        assert events == []

    def test_is_a_type_error(self):
        with pytest.raises(TypeError):
            analyze(b"profile", "posting")

    def test_non_callable_progress(self):
        with pytest.raises(InvalidInputError, match="callable"):
            analyze("profile", "posting", on_progress="not a function")
