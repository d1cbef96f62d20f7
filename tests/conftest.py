"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from statement_tailor.clients.llm_client import LLMClient, LLMResponse

CURRENT_YEAR = 2026


@pytest.fixture
def current_year() -> int:
    return CURRENT_YEAR


@pytest.fixture
def sample_posting_text() -> str:
    return """Staff Nurse - Band 5
Acute Medical Unit

About the role
We are looking for a caring Staff Nurse to join our busy ward team. Our trust
values respect and dignity, compassion and everyone counts.

Person Specification

Essential
- NMC registration as an Adult Nurse
- Experience with medication administration
- Excellent communication skills with patients and families

Desirable
- Leadership course or mentorship qualification
- Experience of electronic records systems

Responsibilities
- Deliver high standards of patient care
"""


@pytest.fixture
def sample_profile_text() -> str:
    return """Jane Doe
Registered Nurse

Profile
Experienced in acute medical care. Proficient in Patient Assessment and Wound Care.

Work Experience
2018 - 2021 Staff Nurse, City Hospital
- Administered medication safely to 20 patients daily.
- Worked with doctors on the acute medical ward.

2021 - present Senior Nurse, County Hospital
- Led a team of nurses and supported patient care on a surgery ward.
- Strong communication skills with patients and their families.

Education
2014 - 2017 BSc Adult Nursing, University of Leeds

Skills
- Patient assessment
- Medication management
- Team leadership
"""


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="  I am applying for this role.  ", input_tokens=100, output_tokens=50)
    )
    return client
