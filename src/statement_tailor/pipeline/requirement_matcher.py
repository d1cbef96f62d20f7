"""Requirement matching: keyword overlap between requirements and the profile."""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from nltk.stem import PorterStemmer

from statement_tailor.config import MatchingConfig
from statement_tailor.models.analysis import MatchOutcome, MatchRecord, RequirementItem
from statement_tailor.models.vocabulary import DomainVocabulary
from statement_tailor.pipeline.text_utils import split_sentences, strip_bullet, truncate

logger = logging.getLogger(__name__)

WORD_RE = re.compile(r"[a-z0-9]+(?:['-][a-z0-9]+)*")
MIN_STEM_PREFIX = 5
MAX_STEM_GAP = 2

_stemmer = PorterStemmer()


@lru_cache(maxsize=4096)
def _stem(word: str) -> str:
    return _stemmer.stem(word)


def _stems_compatible(a: str, b: str) -> bool:
    """Stems agree when the shorter (at least MIN_STEM_PREFIX long) prefixes the
    longer and they differ by at most MAX_STEM_GAP characters.
    """
    shorter, longer = sorted((a, b), key=len)
    return (
        len(shorter) >= MIN_STEM_PREFIX
        and len(longer) - len(shorter) <= MAX_STEM_GAP
        and longer.startswith(shorter)
    )


class TextIndex:
    """Case-insensitive substring and stem lookup over one piece of text."""

    def __init__(self, text: str):
        self.lowered = text.lower()
        self.stems = {_stem(w) for w in WORD_RE.findall(self.lowered)}

    def contains(self, token: str) -> bool:
        if token in self.lowered:
            return True
        token_stem = _stem(token)
        return any(_stems_compatible(token_stem, s) for s in self.stems)


def combine_profile(profile_text: str, addenda_text: str = "") -> str:
    """Profile text with the applicant's free-text additions appended."""
    if addenda_text.strip():
        return f"{profile_text}\n\n{addenda_text}"
    return profile_text


class RequirementMatcher:
    def __init__(
        self,
        vocabulary: DomainVocabulary | None = None,
        config: MatchingConfig | None = None,
    ):
        self.vocab = vocabulary or DomainVocabulary()
        self.config = config or MatchingConfig()
        self._stopwords = {w.lower() for w in self.vocab.stopwords}

    def keywords(self, requirement: RequirementItem) -> list[str]:
        """Significant lowercase words of the requirement, prefix removed."""
        words = WORD_RE.findall(requirement.label.lower())
        kept = [
            w for w in words
            if len(w) >= self.config.min_token_length and w not in self._stopwords
        ]
        return list(dict.fromkeys(kept))

    def is_match(self, hits: list[str], keywords: list[str]) -> bool:
        if len(hits) < self.config.min_keyword_hits:
            return False
        return len(hits) / len(keywords) >= self.config.min_hit_ratio

    def match(
        self,
        requirements: list[RequirementItem],
        profile_text: str,
        addenda_text: str = "",
    ) -> MatchOutcome:
        combined = combine_profile(profile_text, addenda_text)
        index = TextIndex(combined)
        sentences = [(s, TextIndex(s)) for s in map(strip_bullet, split_sentences(combined)) if s]

        matched: list[MatchRecord] = []
        missing: list[RequirementItem] = []
        for requirement in requirements:
            keywords = self.keywords(requirement)
            hits = [kw for kw in keywords if index.contains(kw)]
            if not self.is_match(hits, keywords):
                missing.append(requirement)
                continue
            matched.append(MatchRecord(
                requirement=requirement,
                evidence=self._evidence(hits, sentences),
                matched_keywords=hits,
            ))

        logger.debug("Matched %d of %d requirements", len(matched), len(requirements))
        return MatchOutcome(matched=matched, missing=missing)

    def _evidence(self, hits: list[str], sentences: list[tuple[str, TextIndex]]) -> str:
        best = ""
        best_count = 0
        for sentence, index in sentences:
            count = sum(1 for kw in hits if index.contains(kw))
            if count > best_count:
                best, best_count = sentence, count
        if best:
            return truncate(best, self.config.snippet_length)
        return f"Matches keywords: {', '.join(hits)}"


def match_requirements(
    requirements: list[RequirementItem],
    profile_text: str,
    addenda_text: str = "",
    vocabulary: DomainVocabulary | None = None,
    config: MatchingConfig | None = None,
) -> MatchOutcome:
    """Split requirements into matched (with evidence) and missing."""
    return RequirementMatcher(vocabulary, config).match(requirements, profile_text, addenda_text)
