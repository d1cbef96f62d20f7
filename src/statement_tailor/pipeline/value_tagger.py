"""Value tagging: organisational values named in a job posting."""

from __future__ import annotations

import logging

from statement_tailor.models.vocabulary import DomainVocabulary

logger = logging.getLogger(__name__)


def tag_values(posting_text: str, vocabulary: DomainVocabulary | None = None) -> list[str]:
    """Return canonical value phrases found in the posting.

    Falls back to the vocabulary's default subset so the result is never empty.
    """
    vocab = vocabulary or DomainVocabulary()
    lowered = posting_text.lower()
    found = [v for v in vocab.value_phrases if v.lower() in lowered]
    if not found:
        logger.debug("No value phrases found; using %d defaults", len(vocab.default_values))
        return list(vocab.default_values)
    return found
