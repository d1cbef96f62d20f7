"""Statement drafting - turns an AnalysisResult into a supporting statement."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel

from statement_tailor.clients.llm_client import DEFAULT_MODEL, LLMClient
from statement_tailor.models.analysis import AnalysisResult
from statement_tailor.pipeline.orchestrator import ProgressCallback, ProgressReporter

logger = logging.getLogger(__name__)


class StyleLevel(str, Enum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    ADVANCED = "advanced"


AUDIENCE_LEVELS: dict[StyleLevel, str] = {
    StyleLevel.SIMPLE: "GCSE level (simple, clear language)",
    StyleLevel.MODERATE: "Professional level (articulate, using industry terminology)",
    StyleLevel.ADVANCED: "Detailed academic level (comprehensive, using sophisticated language)",
}

SYSTEM_PROMPT = """\
You write job application supporting statements in the first person.
Only use facts present in the analysis you are given. Never invent
qualifications, employers, dates or numbers."""


class DraftedStatement(BaseModel):
    statement: str
    style: StyleLevel
    input_tokens: int = 0
    output_tokens: int = 0


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items) if items else "- (none)"


def build_statement_prompt(
    result: AnalysisResult,
    style: StyleLevel = StyleLevel.SIMPLE,
    addenda_text: str = "",
    value_label: str = "NHS values",
) -> str:
    """Build the drafting prompt from the analysis alone."""
    experience = result.experience
    met = [m.requirement.label for m in result.matched_requirements]
    unmet = [r.label for r in result.missing_requirements]
    addenda = (
        f"\nAdditional Information Provided by Applicant:\n{addenda_text.strip()}\n"
        if addenda_text.strip() else ""
    )

    return f"""Please write a compelling job application supporting statement based on this analysis of a CV against a job description.

CV Summary:
- Relevant skills: {', '.join(result.skills)}
- Clinical experience: {', '.join(experience.clinical)}
- Non-clinical experience: {', '.join(experience.non_clinical)}
- Administrative experience: {', '.join(experience.administrative)}
- Years of experience: {experience.years_of_experience}
- Education: {', '.join(result.education)}

Job Requirements Met:
{_bullets(met)}

Job Requirements Needing Attention:
{_bullets(unmet)}

Recommended Highlights:
{_bullets(result.recommended_highlights)}

{value_label} to Emphasize:
{', '.join(result.value_tags)}
{addenda}
Instructions:
1. Write at {AUDIENCE_LEVELS[style]} reading level
2. Focus on how the applicant's experience and skills match the job requirements
3. Address the {value_label} specifically
4. Don't mention "CV" or "resume" directly; write in first person ("I have...")
5. Include specific achievements with numbers where the analysis provides them
6. Acknowledge and address any gaps in meeting requirements
7. Keep the statement between 500-800 words
8. Format with clear paragraphs, no bullet points
9. Start with a brief introduction about why you're interested in the role"""


class StatementWriter:
    """Drafts the statement prose through the LLM client."""

    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 4000,
        value_label: str = "NHS values",
    ):
        self.llm = llm
        self.model = model
        self.max_tokens = max_tokens
        self.value_label = value_label

    async def write(
        self,
        result: AnalysisResult,
        style: StyleLevel = StyleLevel.SIMPLE,
        addenda_text: str = "",
        *,
        on_progress: ProgressCallback | None = None,
    ) -> DraftedStatement:
        progress = ProgressReporter(on_progress)
        succeeded = False
        try:
            progress.report("Preparing statement", 5)
            prompt = build_statement_prompt(result, style, addenda_text, self.value_label)

            progress.report("Generating statement", 50)
            logger.info("Drafting %s statement", style.value)
            response = await self.llm.generate(
                prompt=prompt,
                system=SYSTEM_PROMPT,
                model=self.model,
                max_tokens=self.max_tokens,
            )

            progress.report("Processing response", 90)
            statement = DraftedStatement(
                statement=response.text.strip(),
                style=style,
                input_tokens=response.input_tokens,
                output_tokens=response.output_tokens,
            )
            succeeded = True
            return statement
        except Exception:
            logger.error("Statement drafting failed", exc_info=True)
            raise
        finally:
            progress.finish("Statement generated" if succeeded else "Statement failed")
