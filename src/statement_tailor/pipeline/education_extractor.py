"""Education and qualification lines from a candidate profile."""

from __future__ import annotations

import logging
import re

from statement_tailor.models.vocabulary import DomainVocabulary
from statement_tailor.pipeline.text_utils import is_heading, phrase_pattern, truncate

logger = logging.getLogger(__name__)

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
MIN_LINE_LENGTH = 10
MAX_FALLBACK_LINE_LENGTH = 100


def extract_education(
    profile_text: str,
    vocabulary: DomainVocabulary | None = None,
    *,
    max_length: int = 100,
) -> list[str]:
    """Lines that read like degrees or qualifications, in document order."""
    vocab = vocabulary or DomainVocabulary()
    degree_re = re.compile(rf"\b(?:{phrase_pattern(vocab.degree_keywords)})\b", re.IGNORECASE)
    lines = [line.strip() for line in profile_text.splitlines()]

    found: list[str] = []
    in_section = False
    for line in lines:
        if not line:
            continue
        if is_heading(line, vocab.education_headers):
            in_section = True
            continue
        if in_section and is_heading(line, vocab.education_terminators):
            in_section = False
            continue
        if in_section and len(line) > MIN_LINE_LENGTH:
            if YEAR_RE.search(line) or degree_re.search(line):
                found.append(line)

    if not found:
        logger.debug("No education section; scanning whole profile")
        for line in lines:
            if MIN_LINE_LENGTH < len(line) < MAX_FALLBACK_LINE_LENGTH:
                if degree_re.search(line) and YEAR_RE.search(line):
                    found.append(line)

    return [truncate(entry, max_length) for entry in dict.fromkeys(found)]
