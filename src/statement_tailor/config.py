"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from statement_tailor.models.vocabulary import DomainVocabulary


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-sonnet-4-5-20250929"
    max_retries: int = 3
    timeout: int = 120
    max_tokens: int = 4000

    def __post_init__(self) -> None:
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"timeout must be between 1 and 600, got {self.timeout}")
        if not 1 <= self.max_retries <= 10:
            raise ValueError(f"max_retries must be between 1 and 10, got {self.max_retries}")
        if self.max_tokens < 1:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")


@dataclass(frozen=True)
class MatchingConfig:
    """Thresholds for classifying a requirement as matched."""

    min_keyword_hits: int = 2
    min_token_length: int = 4
    min_hit_ratio: float = 0.0
    snippet_length: int = 100

    def __post_init__(self) -> None:
        if self.min_keyword_hits < 1:
            raise ValueError(f"min_keyword_hits must be at least 1, got {self.min_keyword_hits}")
        if self.min_token_length < 1:
            raise ValueError(f"min_token_length must be at least 1, got {self.min_token_length}")
        if not 0.0 <= self.min_hit_ratio <= 1.0:
            raise ValueError(f"min_hit_ratio must be between 0 and 1, got {self.min_hit_ratio}")
        if self.snippet_length < 4:
            raise ValueError(f"snippet_length must be at least 4, got {self.snippet_length}")


@dataclass(frozen=True)
class ExtractionConfig:
    max_skills: int = 15
    max_requirement_length: int = 100
    max_summary_length: int = 100

    def __post_init__(self) -> None:
        if self.max_skills < 1:
            raise ValueError(f"max_skills must be at least 1, got {self.max_skills}")
        if self.max_requirement_length < 4:
            raise ValueError(
                f"max_requirement_length must be at least 4, got {self.max_requirement_length}"
            )
        if self.max_summary_length < 4:
            raise ValueError(f"max_summary_length must be at least 4, got {self.max_summary_length}")


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    vocabulary: DomainVocabulary = field(default_factory=DomainVocabulary)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        matching=MatchingConfig(**raw.get("matching", {})),
        extraction=ExtractionConfig(**raw.get("extraction", {})),
        vocabulary=DomainVocabulary(**raw.get("vocabulary", {})),
    )
