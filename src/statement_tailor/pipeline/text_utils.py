"""Shared text helpers for the extraction stages."""

from __future__ import annotations

import re
from collections.abc import Iterable

from statement_tailor.models.vocabulary import MONTH_PATTERN

DASH = r"\s*[-–—]\s*"
OPEN_END = r"\b(?:present|current)\b"

# "Jan 2018 - Mar 2021", "March 2019 - present"
MONTH_RANGE_RE = re.compile(
    rf"\b({MONTH_PATTERN}\s+\d{{4}}){DASH}(\b{MONTH_PATTERN}\s+\d{{4}}|{OPEN_END})",
    re.IGNORECASE,
)
# "2018 - 2021", "2021 - present"
YEAR_RANGE_RE = re.compile(
    rf"\b((?:19|20)\d{{2}}){DASH}((?:19|20)\d{{2}}\b|{OPEN_END})",
    re.IGNORECASE,
)
# A line that carries a date range in any of the above shapes
DATE_RANGE_LINE_RE = re.compile(
    rf"(?:\b{MONTH_PATTERN}\s+)?\b(?:19|20)\d{{2}}{DASH}"
    rf"(?:(?:\b{MONTH_PATTERN}\s+)?\b(?:19|20)\d{{2}}\b|{OPEN_END})",
    re.IGNORECASE,
)
BULLET_RE = re.compile(r"^\s*(?:[•●◦▪*\-]|\d+[.)])\s*")
SENTENCE_SPLIT_RE = re.compile(r"[.!?\n]+")
MAX_HEADING_WORDS = 4


def truncate(text: str, limit: int = 100) -> str:
    """Cap text at ``limit`` characters, ending with an ellipsis when cut."""
    if len(text) <= limit:
        return text
    return text[: limit - 3].rstrip() + "..."


def phrase_pattern(phrases: Iterable[str]) -> str:
    """Build a regex alternation that tolerates any whitespace inside phrases."""
    parts = sorted(
        (r"\s+".join(re.escape(w) for w in p.split()) for p in phrases if p.strip()),
        key=len,
        reverse=True,
    )
    return "|".join(parts) if parts else r"(?!)"


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(p.lower() in lowered for p in phrases)


def count_keywords(text: str, keywords: Iterable[str]) -> int:
    """Number of distinct keywords occurring in text (case-insensitive)."""
    lowered = text.lower()
    return sum(1 for kw in set(k.lower() for k in keywords) if kw in lowered)


def is_bullet(line: str) -> bool:
    return bool(BULLET_RE.match(line))


def strip_bullet(line: str) -> str:
    return BULLET_RE.sub("", line, count=1).strip()


def split_sentences(text: str) -> list[str]:
    """Split on sentence punctuation and line breaks, dropping blanks."""
    return [s.strip() for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]


def split_paragraphs(text: str) -> list[str]:
    return [p for p in re.split(r"\n\s*\n", text) if p.strip()]


def has_date_range(line: str) -> bool:
    return bool(DATE_RANGE_LINE_RE.search(line))


def is_heading(line: str, phrases: Iterable[str], max_length: int = 50) -> bool:
    """True for a short line that starts with one of the heading phrases."""
    stripped = line.strip().strip("#*_").strip()
    if not stripped or len(stripped) >= max_length or is_bullet(stripped):
        return False
    if stripped.endswith(".") or len(stripped.split()) > MAX_HEADING_WORDS:
        return False
    return bool(re.match(rf"(?:{phrase_pattern(phrases)})\b", stripped, re.IGNORECASE))
