"""Deterministic profile vs. job posting comparison and statement drafting."""

from statement_tailor.errors import InvalidInputError
from statement_tailor.pipeline.orchestrator import AnalysisOrchestrator, analyze

__all__ = ["AnalysisOrchestrator", "InvalidInputError", "analyze"]
