"""
Finalize-step review helpers and the summary suggestion stub.

The checklist here is a lighter view than the step predicates (contact
information only needs name and email), matching what the finalize screen
shows.
"""

from dataclasses import dataclass
from typing import Dict, List

from vitae.contexts.drafting.resume_data_structure import ResumeData
from vitae.contexts.drafting.scoring import MIN_TEXT_LENGTH

SAMPLE_SUMMARY = (
    "Experienced professional with a proven track record of delivering high-quality "
    "results and driving organizational success. Skilled in cross-functional "
    "collaboration, strategic planning, and process optimization. Passionate about "
    "leveraging technology and innovation to solve complex business challenges and "
    "create value for stakeholders."
)

SUMMARY_TIPS = [
    "Keep it concise (3-4 sentences or 50-100 words)",
    "Start with your years of experience or current role",
    "Highlight your key skills and achievements",
    "Mention the value you bring to employers",
    "Use keywords from your target job descriptions",
]

SUMMARY_LENGTH_WARNING = 400


@dataclass(frozen=True)
class ChecklistItem:
    name: str
    completed: bool


def section_checklist(data: ResumeData) -> List[ChecklistItem]:
    """Completion checklist shown on the finalize step."""
    c = data.contacts
    return [
        ChecklistItem("Contact Information", bool(c.first_name and c.last_name and c.email)),
        ChecklistItem("Professional Summary", len(data.summary) > MIN_TEXT_LENGTH),
        ChecklistItem("Work Experience", len(data.experience) > 0),
        ChecklistItem("Education", len(data.education) > 0),
        ChecklistItem("Skills", len(data.skills) >= 3),
    ]


def resume_statistics(data: ResumeData) -> Dict[str, int]:
    """Entry counts per collection."""
    return {
        "experience": len(data.experience),
        "education": len(data.education),
        "skills": len(data.skills),
        "certificates": len(data.certificates),
        "projects": len(data.projects),
    }


def summary_length_hint(summary: str) -> str:
    """Short guidance on summary length ("" when the length is fine)."""
    if len(summary) < MIN_TEXT_LENGTH:
        return f"aim for {MIN_TEXT_LENGTH}+ characters"
    if len(summary) > SUMMARY_LENGTH_WARNING:
        return "consider shortening"
    return ""


def generate_summary() -> str:
    """Return fixed sample summary text. No model is consulted."""
    return SAMPLE_SUMMARY
