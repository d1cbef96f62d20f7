"""Skill extraction from a candidate profile."""

from __future__ import annotations

import logging
import re

from statement_tailor.models.vocabulary import DomainVocabulary
from statement_tailor.pipeline.text_utils import (
    contains_any,
    is_bullet,
    phrase_pattern,
    split_paragraphs,
    split_sentences,
    strip_bullet,
)

logger = logging.getLogger(__name__)

PUNCTUATION_RE = re.compile(r"[,.;:()]")
MIN_PAIR_LENGTH = 6
MIN_TRIPLE_LENGTH = 9
MIN_LISTED_SKILL_LENGTH = 4
HEADER_WINDOW = 50


def _phrases_from_sentence(sentence: str) -> list[str]:
    """Capitalized 2- and 3-word phrases from one sentence."""
    words = sentence.split()
    phrases: list[str] = []
    for i in range(len(words)):
        if i + 1 < len(words):
            pair = PUNCTUATION_RE.sub("", f"{words[i]} {words[i + 1]}").strip()
            if len(pair) >= MIN_PAIR_LENGTH and pair[0].isupper():
                phrases.append(pair)
        if i + 2 < len(words):
            triple = PUNCTUATION_RE.sub("", f"{words[i]} {words[i + 1]} {words[i + 2]}").strip()
            if len(triple) >= MIN_TRIPLE_LENGTH and triple[0].isupper():
                phrases.append(triple)
    return phrases


def _listed_skills(profile_text: str, vocab: DomainVocabulary) -> list[str]:
    """Bullet and numbered lines from paragraphs opening with a skills header."""
    header_re = re.compile(rf"\b(?:{phrase_pattern(vocab.skills_headers)})\b", re.IGNORECASE)
    skills: list[str] = []
    for paragraph in split_paragraphs(profile_text):
        if not header_re.search(paragraph.lstrip()[:HEADER_WINDOW]):
            continue
        for line in paragraph.splitlines():
            if not is_bullet(line):
                continue
            skill = strip_bullet(line)
            if len(skill) >= MIN_LISTED_SKILL_LENGTH:
                skills.append(skill)
    return skills


def extract_skills(
    profile_text: str,
    vocabulary: DomainVocabulary | None = None,
    *,
    max_skills: int = 15,
) -> list[str]:
    """Return up to ``max_skills`` distinct skill phrases, shortest first.

    Shorter phrases tend to be cleaner skill names than longer fragments, so
    the merged candidates are ordered by length before truncation.
    """
    vocab = vocabulary or DomainVocabulary()
    candidates: list[str] = []

    for sentence in split_sentences(profile_text):
        if contains_any(sentence, vocab.skill_indicators):
            candidates.extend(_phrases_from_sentence(strip_bullet(sentence)))

    candidates.extend(_listed_skills(profile_text, vocab))

    unique = list(dict.fromkeys(c.strip() for c in candidates if c.strip()))
    unique.sort(key=len)
    logger.debug("Found %d skill candidates, keeping %d", len(unique), min(len(unique), max_skills))
    return unique[:max_skills]
