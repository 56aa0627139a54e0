"""
Resume Data Structures

Defines the canonical in-memory representation of a résumé draft. One
ResumeData instance lives for the whole wizard session and is mutated only
through ResumeEditor (see mutations.py).

Collections are always present (empty lists, never None) and their insertion
order is the display and export order.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Dict, List, Optional

PRESENT_LABEL = "Present"


class SkillLevel(str, Enum):
    """Ordered proficiency scale: NOT_SPECIFIED < BEGINNER < ... < EXPERT."""

    NOT_SPECIFIED = "Not specified"
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"

    @property
    def rank(self) -> int:
        return list(SkillLevel).index(self)

    def __lt__(self, other):
        if not isinstance(other, SkillLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, SkillLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, SkillLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, SkillLevel):
            return NotImplemented
        return self.rank >= other.rank


@dataclass
class ContactInfo:
    """
    Contact block (one per résumé, no identity).

    first_name, last_name, email, phone and location count toward the
    completion score. website, linkedin and github are optional and hold an
    empty string when absent.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""
    github: str = ""

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @property
    def links(self) -> List[str]:
        """Optional profile links in fixed order: website, linkedin, github."""
        return [link for link in (self.website, self.linkedin, self.github) if link]


@dataclass
class Experience:
    """
    Work history entry.

    Dates use 'YYYY-MM'. When is_current_job is set, end_date is ignored and
    rendered as "Present" whatever its stored value.
    """

    job_title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current_job: bool = False
    description: str = ""
    id: str = ""

    @property
    def effective_end_date(self) -> Optional[str]:
        """Stored end date, or None when the job is current."""
        return None if self.is_current_job else self.end_date


@dataclass
class Education:
    """Education entry. is_currently_studying follows the same rule as is_current_job."""

    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""
    is_currently_studying: bool = False
    gpa: str = ""
    description: str = ""
    id: str = ""

    @property
    def effective_end_date(self) -> Optional[str]:
        return None if self.is_currently_studying else self.end_date


@dataclass
class Certificate:
    name: str = ""
    issuer: str = ""
    issue_date: str = ""
    expiration_date: str = ""
    credential_id: str = ""
    url: str = ""
    id: str = ""


@dataclass
class Skill:
    """
    Skill entry.

    category is free-form ("Technical Skills", "Languages", ...). Levels given
    as strings are coerced to SkillLevel; unknown levels raise ValueError.
    """

    name: str = ""
    level: SkillLevel = SkillLevel.NOT_SPECIFIED
    category: str = "Technical Skills"
    id: str = ""

    def __post_init__(self):
        self.level = SkillLevel(self.level)


@dataclass
class Project:
    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)
    url: str = ""
    github_url: str = ""
    id: str = ""

    def __post_init__(self):
        self.technologies = list(self.technologies)


@dataclass
class ResumeData:
    """
    Complete résumé draft.

    Attributes:
        contacts: Contact block
        summary: Professional summary text
        experience: Work history, in insertion order
        education: Education entries, in insertion order
        certificates: Certificates, in insertion order
        skills: Skills, in insertion order (grouped by category only for display)
        projects: Projects (extended flow), in insertion order
        photo: Optional embeddable photo as a base64 data URL
    """

    contacts: ContactInfo = field(default_factory=ContactInfo)
    summary: str = ""
    experience: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    certificates: List[Certificate] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    photo: Optional[str] = None


# Collection field name -> entry class
COLLECTION_TYPES = {
    "experience": Experience,
    "education": Education,
    "certificates": Certificate,
    "skills": Skill,
    "projects": Project,
}


def field_names(cls) -> List[str]:
    """Dataclass field names of an entry class, excluding the identity field."""
    return [f.name for f in fields(cls) if f.name != "id"]


def group_skills_by_category(skills: List[Skill]) -> Dict[str, List[Skill]]:
    """
    Group skills by category, keeping first-seen category order and the
    insertion order of skills within each category.
    """
    groups: Dict[str, List[Skill]] = {}
    for skill in skills:
        groups.setdefault(skill.category, []).append(skill)
    return groups
