"""
DOCX Encoding

Builds a Word document straight from the draft, with no visual rendering in
between. The draft is first turned into an ordered list of DocxBlock
(heading / paragraph / bullet, each a sequence of styled runs), which
python-docx then writes out.

Section order is fixed: name and contact header, optional links line,
summary, experience, education, skills, projects, certificates. A section
with no content is left out entirely, heading included.

Skills are written as a single comma-joined line of names; categories are
not carried into this format.
"""

from dataclasses import dataclass
from io import BytesIO
from typing import List, Tuple

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH

from vitae.contexts.drafting.resume_data_structure import PRESENT_LABEL, ResumeData
from vitae.contexts.exporting.logger import _log_debug
from vitae.utils.markup import parse_description, strip_control_characters

LINK_SEPARATOR = " | "
BULLET_STYLE = "List Bullet"


@dataclass(frozen=True)
class DocxRun:
    text: str
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True)
class DocxBlock:
    """
    One block-level element of the document.

    Attributes:
        kind: "heading", "paragraph" or "bullet"
        runs: Styled runs in order (empty for a blank spacer paragraph)
        level: Heading level (1 for the name, 2 for section titles)
        centered: Whether the block is centered
    """

    kind: str
    runs: Tuple[DocxRun, ...] = ()
    level: int = 0
    centered: bool = False

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


def _run(text: str, bold: bool = False, italic: bool = False) -> DocxRun:
    return DocxRun(strip_control_characters(text), bold=bold, italic=italic)


def _heading(text: str, level: int = 2, centered: bool = False) -> DocxBlock:
    return DocxBlock("heading", (_run(text),), level=level, centered=centered)


def _paragraph(text: str = "", bold: bool = False, italic: bool = False, centered: bool = False) -> DocxBlock:
    runs = (_run(text, bold=bold, italic=italic),) if text else ()
    return DocxBlock("paragraph", runs, centered=centered)


def _description(text: str) -> List[DocxBlock]:
    return [
        DocxBlock(
            "bullet" if line.bullet else "paragraph",
            tuple(_run(s.text, bold=s.bold, italic=s.italic) for s in line.segments),
        )
        for line in parse_description(text)
    ]


def _date_range(start: str, end: str) -> str:
    return f"{start} - {end}"


def _contact_blocks(data: ResumeData) -> List[DocxBlock]:
    contacts = data.contacts
    blocks = [_heading(contacts.full_name, level=1, centered=True)]

    reach = LINK_SEPARATOR.join(value for value in (contacts.email, contacts.phone) if value)
    if reach:
        blocks.append(_paragraph(reach, centered=True))
    if contacts.location:
        blocks.append(_paragraph(contacts.location, centered=True))
    if contacts.links:
        blocks.append(_paragraph(LINK_SEPARATOR.join(contacts.links), centered=True))

    blocks.append(_paragraph())
    return blocks


def _summary_blocks(data: ResumeData) -> List[DocxBlock]:
    if not data.summary.strip():
        return []
    return [_heading("Professional Summary"), *_description(data.summary), _paragraph()]


def _experience_blocks(data: ResumeData) -> List[DocxBlock]:
    if not data.experience:
        return []

    blocks = [_heading("Work Experience")]
    for exp in data.experience:
        employer = " - ".join(value for value in (exp.company, exp.location) if value)
        end = PRESENT_LABEL if exp.is_current_job else exp.end_date
        blocks.append(_paragraph(exp.job_title, bold=True))
        if employer:
            blocks.append(_paragraph(employer, italic=True))
        blocks.append(_paragraph(_date_range(exp.start_date, end)))
        blocks.extend(_description(exp.description))
        blocks.append(_paragraph())
    return blocks


def _education_blocks(data: ResumeData) -> List[DocxBlock]:
    if not data.education:
        return []

    blocks = [_heading("Education")]
    for edu in data.education:
        title = f"{edu.degree} in {edu.field_of_study}" if edu.field_of_study else edu.degree
        end = PRESENT_LABEL if edu.is_currently_studying else edu.end_date
        blocks.append(_paragraph(title, bold=True))
        blocks.append(_paragraph(edu.institution, italic=True))
        blocks.append(_paragraph(_date_range(edu.start_date, end)))
        blocks.extend(_description(edu.description))
        blocks.append(_paragraph())
    return blocks


def _skills_blocks(data: ResumeData) -> List[DocxBlock]:
    if not data.skills:
        return []
    names = ", ".join(skill.name for skill in data.skills)
    return [_heading("Skills"), _paragraph(names), _paragraph()]


def _projects_blocks(data: ResumeData) -> List[DocxBlock]:
    if not data.projects:
        return []

    blocks = [_heading("Projects")]
    for project in data.projects:
        blocks.append(_paragraph(project.name, bold=True))
        blocks.extend(_description(project.description))
        if project.technologies:
            blocks.append(_paragraph(f"Technologies: {', '.join(project.technologies)}"))

        links = []
        if project.url:
            links.append(f"URL: {project.url}")
        if project.github_url:
            links.append(f"GitHub: {project.github_url}")
        if links:
            blocks.append(_paragraph(LINK_SEPARATOR.join(links)))
        blocks.append(_paragraph())
    return blocks


def _certificate_blocks(data: ResumeData) -> List[DocxBlock]:
    if not data.certificates:
        return []

    blocks = [_heading("Certificates")]
    for cert in data.certificates:
        blocks.append(_paragraph(cert.name, bold=True))
        issued = " - ".join(value for value in (cert.issuer, cert.issue_date) if value)
        if issued:
            blocks.append(_paragraph(issued))
        if cert.url:
            blocks.append(_paragraph(f"URL: {cert.url}"))
        blocks.append(_paragraph())
    return blocks


SECTION_BUILDERS = (
    _contact_blocks,
    _summary_blocks,
    _experience_blocks,
    _education_blocks,
    _skills_blocks,
    _projects_blocks,
    _certificate_blocks,
)


def build_docx_blocks(data: ResumeData) -> List[DocxBlock]:
    """
    Build the ordered block list for a draft.

    Args:
        data: Draft to encode (read-only)

    Returns:
        Blocks in document order
    """
    blocks = []
    for builder in SECTION_BUILDERS:
        blocks.extend(builder(data))
    return blocks


def write_docx(blocks: List[DocxBlock], title: str = "", author: str = "") -> bytes:
    """
    Write blocks to a .docx file in memory.

    Args:
        blocks: Output of build_docx_blocks()
        title: Core property title
        author: Core property author

    Returns:
        DOCX bytes
    """
    document = Document()
    document.core_properties.title = title
    document.core_properties.author = author

    for block in blocks:
        if block.kind == "heading":
            paragraph = document.add_heading(block.text, level=block.level)
        else:
            paragraph = document.add_paragraph(style=BULLET_STYLE if block.kind == "bullet" else None)
            for run in block.runs:
                styled = paragraph.add_run(run.text)
                styled.bold = run.bold or None
                styled.italic = run.italic or None
        if block.centered:
            paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER

    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def encode_docx(data: ResumeData) -> bytes:
    """Encode a draft as DOCX bytes."""
    blocks = build_docx_blocks(data)
    name = strip_control_characters(data.contacts.full_name)
    content = write_docx(blocks, title=f"{name} Resume".strip(), author=name)
    _log_debug(f"Encoded DOCX: {len(blocks)} blocks -> {len(content)} bytes")
    return content
