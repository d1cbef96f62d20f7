"""Tests for requirement matching."""

import pytest

from statement_tailor.config import MatchingConfig
from statement_tailor.models.analysis import Priority, RequirementItem
from statement_tailor.pipeline.requirement_matcher import (
    RequirementMatcher,
    TextIndex,
    combine_profile,
    match_requirements,
)

MEDICATION = RequirementItem(text="[Essential] Experience with medication administration")
DRIVING = RequirementItem(text="[Desirable] Full UK driving licence", priority=Priority.DESIRABLE)
PROFILE = "Administered medication safely to 20 patients daily."


class TestTextIndex:
    def test_substring(self):
        assert TextIndex("Led the Ward Team").contains("ward")

    def test_stem_variants(self):
        index = TextIndex("Administered medication safely")
        assert index.contains("administration")

    def test_distant_stems_do_not_match(self):
        assert not TextIndex("experimental data").contains("experience")

    def test_short_stems_do_not_match(self):
        assert not TextIndex("art classes").contains("artistic")


class TestKeywords:
    def test_prefix_stopwords_and_short_words_removed(self):
        matcher = RequirementMatcher()
        assert matcher.keywords(MEDICATION) == ["experience", "medication", "administration"]

    def test_deduplicated_in_order(self):
        req = RequirementItem(text="[Essential] Care planning and care delivery planning")
        assert RequirementMatcher().keywords(req) == ["care", "planning", "delivery"]


class TestMatch:
    def test_stemmed_keywords_match_with_evidence(self):
        outcome = match_requirements([MEDICATION], PROFILE)
        assert outcome.missing == []
        record = outcome.matched[0]
        assert record.requirement == MEDICATION
        assert record.matched_keywords == ["medication", "administration"]
        assert record.evidence == "Administered medication safely to 20 patients daily"

    def test_no_overlap_is_missing(self):
        outcome = match_requirements([DRIVING], PROFILE)
        assert outcome.matched == []
        assert outcome.missing == [DRIVING]

    def test_every_requirement_classified_once(self, sample_posting_text, sample_profile_text):
        from statement_tailor.pipeline.requirement_extractor import extract_requirements

        requirements = extract_requirements(sample_posting_text)
        outcome = match_requirements(requirements, sample_profile_text)
        matched = [m.requirement for m in outcome.matched]
        assert len(matched) + len(outcome.missing) == len(requirements)
        assert set(matched).isdisjoint(outcome.missing)
        assert [r.label for r in matched] == [
            "NMC registration as an Adult Nurse",
            "Experience with medication administration",
            "Excellent communication skills with patients and families",
        ]
        assert [r.label for r in outcome.missing] == [
            "Leadership course or mentorship qualification",
            "Experience of electronic records systems",
        ]
        assert [m.evidence for m in outcome.matched] == [
            "Registered Nurse",
            "Administered medication safely to 20 patients daily",
            "Strong communication skills with patients and their families",
        ]

    def test_addenda_count_as_profile_text(self, sample_profile_text):
        req = RequirementItem(text="[Desirable] Experience of electronic records systems", priority=Priority.DESIRABLE)
        assert match_requirements([req], sample_profile_text).missing == [req]

        outcome = match_requirements(
            [req], sample_profile_text, "I used electronic records daily at County Hospital."
        )
        assert outcome.matched[0].evidence == "I used electronic records daily at County Hospital"

    def test_hit_ratio_threshold(self):
        strict = MatchingConfig(min_hit_ratio=1.0)
        assert match_requirements([MEDICATION], PROFILE, config=strict).missing == [MEDICATION]

    def test_min_hits_threshold(self):
        lenient = MatchingConfig(min_keyword_hits=1)
        req = RequirementItem(text="[Essential] Knowledge of medication")
        assert match_requirements([req], PROFILE).missing == [req]
        assert match_requirements([req], PROFILE, config=lenient).matched[0].matched_keywords == [
            "medication"
        ]

    def test_unrelated_word_sharing_a_stem_prefix_is_missing(self):
        req = RequirementItem(text="[Essential] Experience in general practice")
        outcome = match_requirements([req], "Generated experimental data in a university laboratory.")
        assert outcome.missing == [req]

    def test_evidence_truncated(self):
        profile = "Medication administration " + "and careful checking of doses " * 10
        outcome = match_requirements([MEDICATION], profile)
        assert len(outcome.matched[0].evidence) <= 100
        assert outcome.matched[0].evidence.endswith("...")

    def test_evidence_falls_back_to_keyword_list(self):
        matcher = RequirementMatcher()
        assert matcher._evidence(["medication", "administration"], []) == (
            "Matches keywords: medication, administration"
        )

    def test_empty_inputs(self):
        assert match_requirements([], PROFILE).matched == []
        assert match_requirements([MEDICATION], "").missing == [MEDICATION]


class TestCombineProfile:
    @pytest.mark.parametrize("addenda", ["", "   \n"])
    def test_blank_addenda_ignored(self, addenda):
        assert combine_profile("CV text", addenda) == "CV text"

    def test_addenda_appended(self):
        assert combine_profile("CV text", "More") == "CV text\n\nMore"
