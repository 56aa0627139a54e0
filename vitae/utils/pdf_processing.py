"""
PDF reading utilities for exported résumés.

Helper functions:
    page_count: Quick page count without text extraction.
    extract_text: Full text layer of a PDF.
    extract_lines: Non-empty text lines, in reading order per page.
    normalize_for_matching: Text normalization for fuzzy matching.
"""

from io import BytesIO
from pathlib import Path
from typing import List, Optional, Union

import pdfplumber
from PyPDF2 import PdfReader

PDFSource = Union[Path, str, bytes]


def _open_source(source: PDFSource):
    if isinstance(source, bytes):
        return BytesIO(source)
    return str(source)


def page_count(source: PDFSource) -> Optional[int]:
    """Get page count from PDF bytes or path, or None if unreadable."""
    try:
        reader = PdfReader(_open_source(source))
        return len(reader.pages)
    except Exception:
        return None


def extract_text(source: PDFSource) -> str:
    """
    Extract the selectable text layer of a PDF.

    Args:
        source: PDF bytes or path

    Returns:
        Text of all pages joined by newlines
    """
    with pdfplumber.open(_open_source(source)) as pdf:
        return "\n".join(page.extract_text() or "" for page in pdf.pages)


def extract_lines(source: PDFSource) -> List[str]:
    """Non-empty, stripped text lines across all pages."""
    return [line.strip() for line in extract_text(source).splitlines() if line.strip()]


def normalize_for_matching(text: str) -> str:
    """Keep only lowercase alphanumeric characters for fuzzy text matching."""
    return "".join(c for c in text.lower() if c.isalnum())
