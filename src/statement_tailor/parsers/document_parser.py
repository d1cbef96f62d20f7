"""Decode uploaded profile and posting files into plain text."""

from __future__ import annotations

import re
from pathlib import Path

SUPPORTED_SUFFIXES = (".pdf", ".docx", ".doc", ".txt", ".md")


def parse_document(file_path: str | Path) -> str:
    """Parse a document file (PDF, DOCX, TXT, MD) and return clean plain text."""
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        raw = _parse_pdf(path)
    elif suffix in (".docx", ".doc"):
        raw = _parse_docx(path)
    elif suffix in (".txt", ".md"):
        raw = path.read_text(encoding="utf-8")
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")
    return clean_text(raw)


def clean_text(text: str) -> str:
    """Normalize extraction artifacts while keeping line structure.

    Handles: unicode artifacts, bullet glyph variants, runs of spaces,
    and excessive blank lines.
    """
    # 1. Remove unicode artifacts (BOM, zero-width spaces, soft hyphens)
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)

    # 2. Normalize bullet points (●, •, ◦, ◆, ■, ▪, ★, ○ → -)
    text = re.sub(r"^(\s*)[●•◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)

    # 3. Collapse runs of spaces/tabs and strip trailing whitespace
    lines = [re.sub(r"[ \t]{2,}", " ", line).strip() for line in text.splitlines()]
    text = "\n".join(lines)

    # 4. Remove excessive blank lines (3+ → 2)
    text = re.sub(r"\n{3,}", "\n\n", text)

    return text.strip()


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    with fitz.open(str(path)) as doc:
        return "\n".join(page.get_text() for page in doc)


def _parse_docx(path: Path) -> str:
    from docx import Document

    doc = Document(str(path))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
