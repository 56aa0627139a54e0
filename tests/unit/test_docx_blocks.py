"""Unit tests for the DOCX block tree."""

import pytest

from vitae.contexts.drafting.mutations import ResumeEditor
from vitae.contexts.exporting.docx_encoder import build_docx_blocks


def _headings(blocks):
    return [block.text for block in blocks if block.kind == "heading" and block.level == 2]


def _texts(blocks):
    return [block.text for block in blocks]


@pytest.mark.unit
def test_empty_sections_are_omitted():
    editor = ResumeEditor()
    editor.update_contacts(first_name="Ada", last_name="Lovelace")

    blocks = build_docx_blocks(editor.data)

    assert blocks[0].kind == "heading" and blocks[0].level == 1
    assert blocks[0].text == "Ada Lovelace"
    assert blocks[0].centered
    assert _headings(blocks) == []


@pytest.mark.unit
def test_section_order(full_editor):
    assert _headings(build_docx_blocks(full_editor.data)) == [
        "Professional Summary",
        "Work Experience",
        "Education",
        "Skills",
        "Projects",
        "Certificates",
    ]


@pytest.mark.unit
def test_no_certificates_heading_without_certificates(ada_editor):
    assert "Certificates" not in _headings(build_docx_blocks(ada_editor.data))


@pytest.mark.unit
def test_single_certificate_heading_followed_by_name_and_issuer(ada_editor):
    ada_editor.add_certificate(name="Honorary Member", issuer="Royal Society", issue_date="1843-10")
    texts = _texts(build_docx_blocks(ada_editor.data))

    assert texts.count("Certificates") == 1
    start = texts.index("Certificates")
    assert texts[start + 1] == "Honorary Member"
    assert texts[start + 2] == "Royal Society - 1843-10"


@pytest.mark.unit
def test_present_substitution_for_current_job():
    editor = ResumeEditor()
    editor.add_experience(job_title="Analyst", start_date="2020-01", end_date="2019-05", is_current_job=True)
    editor.add_education(degree="BSc", start_date="2016-09", end_date="2020-06", is_currently_studying=True)

    texts = _texts(build_docx_blocks(editor.data))

    assert "2020-01 - Present" in texts
    assert "2016-09 - Present" in texts
    assert not any("2019-05" in text or "2020-06" in text for text in texts)


@pytest.mark.unit
def test_past_job_keeps_end_date():
    editor = ResumeEditor()
    editor.add_experience(job_title="Analyst", start_date="2018-01", end_date="2019-05")

    assert "2018-01 - 2019-05" in _texts(build_docx_blocks(editor.data))


@pytest.mark.unit
def test_skills_single_line_without_categories():
    editor = ResumeEditor()
    editor.add_skill(name="Python", category="Languages")
    editor.add_skill(name="Docker", category="Tools")
    editor.add_skill(name="Go", category="Languages")

    texts = _texts(build_docx_blocks(editor.data))
    start = texts.index("Skills")

    assert texts[start + 1] == "Python, Docker, Go"
    assert "Languages" not in texts


@pytest.mark.unit
def test_links_line_only_when_links_present():
    editor = ResumeEditor()
    editor.update_contacts(first_name="Ada", email="ada@example.com", phone="555")
    texts = _texts(build_docx_blocks(editor.data))
    assert [text for text in texts if " | " in text] == ["ada@example.com | 555"]

    editor.update_contacts(website="ada.dev", github="gh/ada")
    texts = _texts(build_docx_blocks(editor.data))
    assert [text for text in texts if " | " in text] == ["ada@example.com | 555", "ada.dev | gh/ada"]


@pytest.mark.unit
def test_description_markup_becomes_bullets_and_runs():
    editor = ResumeEditor()
    editor.add_experience(job_title="Analyst", description="Intro line\n- Wrote **Note G**")

    blocks = build_docx_blocks(editor.data)
    bullet = next(block for block in blocks if block.kind == "bullet")

    assert bullet.text == "Wrote Note G"
    assert [(run.text, run.bold) for run in bullet.runs] == [("Wrote ", False), ("Note G", True)]
    assert "Intro line" in _texts(blocks)


@pytest.mark.unit
def test_education_and_project_details(full_editor):
    blocks = build_docx_blocks(full_editor.data)
    texts = _texts(blocks)

    title = next(block for block in blocks if block.text == "Mathematics in Calculus and Logic")
    assert title.runs[0].bold
    institution = next(block for block in blocks if block.text == "Private tutoring")
    assert institution.runs[0].italic

    assert "Technologies: Analytical Engine, Punched cards" in texts
    assert "URL: https://example.org/note-g | GitHub: https://github.com/example/note-g" in texts
    assert "URL: https://rsl.example.org/ada" in texts


@pytest.mark.unit
def test_blocks_are_idempotent(full_editor):
    assert build_docx_blocks(full_editor.data) == build_docx_blocks(full_editor.data)


@pytest.mark.unit
def test_whitespace_summary_is_omitted(ada_editor):
    ada_editor.set_summary("   \n\t ")

    assert "Professional Summary" not in _headings(build_docx_blocks(ada_editor.data))


@pytest.mark.unit
def test_control_characters_dropped_from_runs():
    editor = ResumeEditor()
    editor.update_contacts(first_name="Ada\x07", last_name="Lovelace")
    editor.add_experience(job_title="Analyst", description="Line one\x0cpasted page break")

    texts = _texts(build_docx_blocks(editor.data))

    assert texts[0] == "Ada Lovelace"
    assert "Line onepasted page break" in texts
