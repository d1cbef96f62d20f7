"""Work history segmentation, categorization and tenure estimation."""

from __future__ import annotations

import logging
import re
from datetime import date

from statement_tailor.models.analysis import ExperienceCategory, ExperienceEntry, ExperienceSummary
from statement_tailor.models.vocabulary import DomainVocabulary
from statement_tailor.pipeline.text_utils import (
    DATE_RANGE_LINE_RE,
    MONTH_RANGE_RE,
    YEAR_RANGE_RE,
    contains_any,
    count_keywords,
    has_date_range,
    is_bullet,
    is_heading,
    truncate,
)

logger = logging.getLogger(__name__)

MIN_ENTRY_LENGTH = 10
MIN_SUMMARY_LENGTH = 6
SUMMARY_SEARCH_LINES = 3
EARLIEST_YEAR = 1900
YEARS_PHRASE_RE = re.compile(r"(\d+)\+?\s*years?(?:\s+of)?\s+experience", re.IGNORECASE)
FOUR_DIGITS_RE = re.compile(r"\d{4}")


def categorize(text: str, vocabulary: DomainVocabulary | None = None) -> ExperienceCategory | None:
    """Classify one role description by keyword counts.

    Clinical wins only with strictly more hits than administrative; generic
    work vocabulary alone gives NonClinical; anything else is uncategorizable.
    """
    vocab = vocabulary or DomainVocabulary()
    clinical = count_keywords(text, vocab.clinical_keywords)
    administrative = count_keywords(text, vocab.administrative_keywords)
    if clinical > administrative and clinical > 0:
        return ExperienceCategory.CLINICAL
    if administrative > 0:
        return ExperienceCategory.ADMINISTRATIVE
    if contains_any(text, vocab.work_keywords):
        return ExperienceCategory.NON_CLINICAL
    return None


def _parse_year(token: str, current_year: int) -> int | None:
    if token.strip().lower() in ("present", "current"):
        return current_year
    m = FOUR_DIGITS_RE.search(token)
    if not m:
        return None
    year = int(m.group(0))
    if not EARLIEST_YEAR <= year <= current_year:
        return None
    return year


def _overlaps(span: tuple[int, int], others: list[tuple[int, int]]) -> bool:
    return any(span[0] < end and start < span[1] for start, end in others)


def estimate_tenure(profile_text: str, *, current_year: int | None = None) -> int:
    """Total years across every date range in the profile.

    Month-year ranges are read first; bare-year ranges that overlap one of
    them are not counted again. Invalid or inverted ranges are skipped. With
    no usable range, an explicit "N years experience" phrase is used instead.
    """
    year_now = current_year or date.today().year
    total = 0
    counted = 0

    matches = list(MONTH_RANGE_RE.finditer(profile_text))
    spans = [m.span() for m in matches]
    matches += [m for m in YEAR_RANGE_RE.finditer(profile_text) if not _overlaps(m.span(), spans)]
    for m in matches:
        start = _parse_year(m.group(1), year_now)
        end = _parse_year(m.group(2), year_now)
        if start is None or end is None or end < start:
            logger.debug("Skipping unusable date range %r", m.group(0))
            continue
        total += end - start
        counted += 1

    if counted == 0:
        phrase = YEARS_PHRASE_RE.search(profile_text)
        if phrase:
            return int(phrase.group(1))
    return max(total, 0)


def _is_date_only(line: str) -> bool:
    return has_date_range(line) and len(DATE_RANGE_LINE_RE.sub("", line).strip(" -–—,|()")) < 3


class ExperienceSegmenter:
    """Split a profile into categorized work-history entries."""

    def __init__(self, vocabulary: DomainVocabulary | None = None, *, max_summary_length: int = 100):
        self.vocab = vocabulary or DomainVocabulary()
        self.max_summary_length = max_summary_length
        self._terminators = {" ".join(t.lower().split()) for t in self.vocab.section_terminators}

    def segment(self, profile_text: str) -> list[ExperienceEntry]:
        lines = [line.rstrip() for line in profile_text.splitlines()]
        section = self._experience_section(lines)
        entries: list[ExperienceEntry] = []
        if section:
            entries = self._entries(section)
        if not entries:
            logger.debug("No entries from an experience section; scanning whole profile")
            entries = self._entries(lines)
        return entries

    def _experience_section(self, lines: list[str]) -> list[str]:
        """Lines under every experience heading, up to the next known section."""
        collected: list[str] = []
        inside = False
        previous = ""
        after_blank = False
        for line in lines:
            if not line.strip():
                after_blank = True
                if inside:
                    collected.append(line)
                continue
            if is_heading(line, self.vocab.experience_headers) and not has_date_range(line):
                inside = True
            elif inside and self._closes_section(line, previous, after_blank):
                inside = False
            elif inside:
                collected.append(line)
            previous = line
            after_blank = False
        return collected

    def _closes_section(self, line: str, previous: str, after_blank: bool) -> bool:
        """A terminator heading ends the section; a job title that happens to
        start with one ("Training Coordinator") does not.
        """
        if _is_date_only(previous) or not is_heading(line, self.vocab.section_terminators):
            return False
        bare = " ".join(line.strip().strip("#*_").rstrip(":").split()).lower()
        return after_blank or bare in self._terminators

    def _entries(self, lines: list[str]) -> list[ExperienceEntry]:
        blocks: list[list[str]] = []
        for line in lines:
            stripped = line.strip()
            if not stripped:
                continue
            if not is_bullet(stripped) and has_date_range(stripped):
                blocks.append([stripped])
            elif blocks:
                blocks[-1].append(stripped)

        entries: list[ExperienceEntry] = []
        for block in blocks:
            text = " ".join(block)
            if len(text) < MIN_ENTRY_LENGTH:
                continue
            category = categorize(text, self.vocab)
            if category is None:
                continue
            entries.append(ExperienceEntry(summary=self._summary(block), category=category))
        return entries

    def _summary(self, block: list[str]) -> str:
        """Title, employer and dates on one line."""
        head = block[0]
        if _is_date_only(head):
            # The date sits on its own line; borrow the title from below it.
            for line in block[1:SUMMARY_SEARCH_LINES]:
                if len(line) >= MIN_SUMMARY_LENGTH and not is_bullet(line):
                    head = f"{head} - {line}"
                    break
        return truncate(head, self.max_summary_length)


def segment_experience(
    profile_text: str,
    vocabulary: DomainVocabulary | None = None,
    *,
    current_year: int | None = None,
    max_summary_length: int = 100,
) -> ExperienceSummary:
    """Categorized entries plus a tenure estimate derived from all date ranges."""
    segmenter = ExperienceSegmenter(vocabulary, max_summary_length=max_summary_length)
    entries = segmenter.segment(profile_text)
    years = estimate_tenure(profile_text, current_year=current_year)
    logger.debug("Segmented %d experience entries, %d years", len(entries), years)
    return ExperienceSummary(entries=entries, years_of_experience=years)
