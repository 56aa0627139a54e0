"""Shared fixtures: drafts built through the editor, and a tiny photo."""

from datetime import date
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from vitae.contexts.drafting.draft_loader import load_draft
from vitae.contexts.drafting.mutations import ResumeEditor

FIXTURES_PATH = Path(__file__).parent / "fixtures"
FOOTER_DATE = date(2026, 10, 18)


@pytest.fixture
def fixtures_path():
    return FIXTURES_PATH


@pytest.fixture
def footer_date():
    return FOOTER_DATE


@pytest.fixture
def ada_editor():
    """
    Ada Lovelace scenario: name, email and phone set (no location), 60-char
    summary, one job with an 80-char description, one education entry,
    four skills, no certificates.
    """
    editor = ResumeEditor()
    editor.update_contacts(
        first_name="Ada", last_name="Lovelace", email="ada@analytical.engine", phone="555-0100"
    )
    editor.set_summary("S" * 60)
    editor.add_experience(
        job_title="Analyst",
        company="Analytical Engine Project",
        start_date="1842-09",
        end_date="1843-08",
        description="D" * 80,
    )
    editor.add_education(institution="Private tutoring", degree="Mathematics")
    for name in ("Mathematics", "Translation", "French", "Music"):
        editor.add_skill(name=name)
    return editor


@pytest.fixture
def full_editor():
    """Complete draft replayed from tests/fixtures/ada_lovelace.yaml."""
    return load_draft(FIXTURES_PATH / "ada_lovelace.yaml")


@pytest.fixture
def png_bytes():
    buffer = BytesIO()
    Image.new("RGB", (16, 16), (200, 40, 40)).save(buffer, format="PNG")
    return buffer.getvalue()
