"""Requirement extraction: prioritized requirement statements from a posting.

Postings are read line by line. A person specification heading (or, when a
posting has none, a looser "Requirements"/"Essential" heading) opens the
requirements section; "Essential"/"Desirable" sub-headings switch the
priority; an "About us"/"Responsibilities" style heading closes it. List
items inside the section become requirements. When that finds nothing, the
whole posting is scanned for sentences with obligation language.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from statement_tailor.models.analysis import Priority, RequirementItem
from statement_tailor.models.vocabulary import DomainVocabulary
from statement_tailor.pipeline.text_utils import (
    contains_any,
    is_bullet,
    phrase_pattern,
    split_sentences,
    strip_bullet,
    truncate,
)

logger = logging.getLogger(__name__)

MIN_REQUIREMENT_LENGTH = 10
MIN_FALLBACK_SENTENCE_LENGTH = 20
MAX_HEADING_LENGTH = 50

# "Clinical Skills: ...", "Knowledge and Experience: ..."
LABEL_RE = re.compile(r"^[A-Z][A-Za-z\s]+:|^[A-Z][\w\s]+\s+[A-Z][\w\s]+:")
DECORATION = "#*_ \t"
SUBHEADING_SUFFIX = r"(?:\s+(?:criteria|requirements|qualifications|skills|experience))?"


class SectionState(Enum):
    OUTSIDE = "outside"
    IN_SPEC = "in_spec"


def _subheading(line: str, phrases: list[str]) -> tuple[bool, str]:
    """Match an Essential/Desirable style sub-heading.

    Returns (is_heading, inline_text). ``Essential: NMC registration`` is a
    heading carrying an inline requirement; ``Essential`` alone is a bare one.
    """
    m = re.match(
        rf"^(?:{phrase_pattern(phrases)}){SUBHEADING_SUFFIX}\b"
        r"\s*(?P<sep>[:\-–])?\s*(?P<rest>.*)$",
        line.strip(DECORATION),
        re.IGNORECASE,
    )
    if not m:
        return False, ""
    rest = m.group("rest").strip(DECORATION)
    if not rest:
        return True, ""
    if m.group("sep"):
        return True, rest
    return False, ""


def _is_list_item(line: str) -> bool:
    return is_bullet(line) or bool(LABEL_RE.match(line))


def _is_bare_label(line: str) -> bool:
    return bool(LABEL_RE.match(line)) and line.rstrip().endswith(":")


class RequirementExtractor:
    def __init__(
        self,
        vocabulary: DomainVocabulary | None = None,
        *,
        max_length: int = 100,
    ):
        self.vocab = vocabulary or DomainVocabulary()
        self.max_length = max_length
        self._person_spec_re = re.compile(
            phrase_pattern(self.vocab.person_spec_headings), re.IGNORECASE
        )
        self._loose_re = re.compile(
            rf"(?:{phrase_pattern(self.vocab.requirement_headings)})\b", re.IGNORECASE
        )
        self._closing_re = re.compile(
            phrase_pattern(self.vocab.closing_headings), re.IGNORECASE
        )

    def extract(self, posting_text: str) -> list[RequirementItem]:
        lines = [line.strip() for line in posting_text.splitlines()]
        requirements = self._scan_sections(lines)
        if not requirements:
            logger.info("No structured requirements found; scanning for obligation language")
            requirements = self._scan_obligations(posting_text)
        logger.debug("Extracted %d requirements", len(requirements))
        return requirements

    def _is_person_spec_heading(self, line: str) -> bool:
        return (
            not is_bullet(line)
            and len(line) < MAX_HEADING_LENGTH
            and bool(self._person_spec_re.search(line))
        )

    def _is_loose_heading(self, line: str) -> bool:
        stripped = line.strip(DECORATION)
        return (
            not is_bullet(line)
            and len(stripped) < MAX_HEADING_LENGTH
            and bool(self._loose_re.match(stripped))
        )

    def _is_closing_heading(self, line: str) -> bool:
        return (
            not is_bullet(line)
            and len(line) < MAX_HEADING_LENGTH
            and bool(self._closing_re.search(line))
        )

    def _scan_sections(self, lines: list[str]) -> list[RequirementItem]:
        has_person_spec = any(self._is_person_spec_heading(line) for line in lines)
        state = SectionState.OUTSIDE
        priority = Priority.ESSENTIAL
        found: list[RequirementItem] = []

        for line in lines:
            if not line:
                continue

            if self._is_person_spec_heading(line):
                state = SectionState.IN_SPEC
                priority = Priority.ESSENTIAL
                continue

            if state is SectionState.IN_SPEC:
                heading, inline = _subheading(line, self.vocab.essential_headings)
                if heading:
                    priority = Priority.ESSENTIAL
                    if inline:
                        self._capture(found, inline, priority)
                    continue
                heading, inline = _subheading(line, self.vocab.desirable_headings)
                if heading:
                    priority = Priority.DESIRABLE
                    if inline:
                        self._capture(found, inline, priority)
                    continue

            if not has_person_spec and self._is_loose_heading(line):
                if state is SectionState.OUTSIDE:
                    priority = Priority.ESSENTIAL
                state = SectionState.IN_SPEC
                heading, inline = _subheading(line, self.vocab.requirement_headings)
                if heading and inline:
                    self._capture(found, inline, priority)
                continue

            if state is SectionState.IN_SPEC and self._is_closing_heading(line):
                state = SectionState.OUTSIDE
                priority = Priority.ESSENTIAL
                continue

            if state is SectionState.IN_SPEC and _is_list_item(line) and not _is_bare_label(line):
                self._capture(found, strip_bullet(line), priority)

        return found

    def _capture(self, found: list[RequirementItem], text: str, priority: Priority) -> None:
        if len(text) <= MIN_REQUIREMENT_LENGTH:
            return
        found.append(self._make_item(text, priority))

    def _make_item(self, text: str, priority: Priority) -> RequirementItem:
        tagged = truncate(f"[{priority.value}] {text}", self.max_length)
        return RequirementItem(text=tagged, priority=priority)

    def _scan_obligations(self, posting_text: str) -> list[RequirementItem]:
        found: list[RequirementItem] = []
        for sentence in split_sentences(posting_text):
            if len(sentence) <= MIN_FALLBACK_SENTENCE_LENGTH:
                continue
            if contains_any(sentence, self.vocab.obligation_phrases):
                found.append(self._make_item(strip_bullet(sentence), Priority.ESSENTIAL))
            elif contains_any(sentence, self.vocab.soft_obligation_phrases):
                found.append(self._make_item(strip_bullet(sentence), Priority.DESIRABLE))
        return found


def extract_requirements(
    posting_text: str,
    vocabulary: DomainVocabulary | None = None,
    *,
    max_length: int = 100,
) -> list[RequirementItem]:
    """Extract tagged requirement statements from a job posting."""
    return RequirementExtractor(vocabulary, max_length=max_length).extract(posting_text)
