import re
from pathlib import Path

SUPPORTED_SUFFIXES = (".pdf", ".docx", ".txt", ".md")


def parse_resume(file_path: str | Path) -> str:
    """Parse a resume file (PDF, DOCX, TXT, MD) and return clean plain text."""
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return clean_text(_parse_pdf(path))
    elif suffix == ".docx":
        return clean_text(_parse_docx(path))
    elif suffix in (".txt", ".md"):
        raw = path.read_bytes().decode("utf-8", errors="replace")
        return clean_text(raw)
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")


def clean_text(text: str) -> str:
    """Normalize extracted resume text before it goes into a prompt.

    Handles: BOM and zero-width characters, control characters left by PDF
    extraction, inconsistent bullet styles, runs of spaces and blank lines.
    """
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    text = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]", " ", text)

    # ●, •, ◦, ◆, ■, ▪, ★, ○ -> "-"
    text = re.sub(r"^(\s*)[●•◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)

    lines = [re.sub(r"[ \t]{2,}", " ", line).strip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)

    return text.strip()


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    doc = fitz.open(str(path))
    text = []
    for page in doc:
        text.append(page.get_text())
    doc.close()
    return "\n".join(text)


def _parse_docx(path: Path) -> str:
    from docx import Document

    doc = Document(str(path))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
