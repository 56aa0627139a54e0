"""
Drafting Context

Responsibilities:
- Holds the résumé draft (contacts, summary, ordered collections, photo)
- Applies add/update/remove operations with session-unique identities
- Scores draft completeness
- Gates wizard step navigation

Owns: ResumeData, identity assignment, scoring rules, step predicates
Never: Renders or encodes documents
"""

from vitae.contexts.drafting.mutations import IdentityGenerator, ResumeEditor
from vitae.contexts.drafting.resume_data_structure import (
    PRESENT_LABEL,
    Certificate,
    ContactInfo,
    Education,
    Experience,
    Project,
    ResumeData,
    Skill,
    SkillLevel,
    group_skills_by_category,
)
from vitae.contexts.drafting.scoring import score, score_band, score_breakdown
from vitae.contexts.drafting.steps import (
    BASE_FLOW,
    EXTENDED_FLOW,
    WizardNavigator,
    WizardStep,
    is_step_complete,
)

__all__ = [
    # Data model
    "ResumeData",
    "ContactInfo",
    "Experience",
    "Education",
    "Certificate",
    "Skill",
    "SkillLevel",
    "Project",
    "PRESENT_LABEL",
    "group_skills_by_category",
    # Mutation engine
    "ResumeEditor",
    "IdentityGenerator",
    # Scoring
    "score",
    "score_band",
    "score_breakdown",
    # Step gating
    "WizardStep",
    "WizardNavigator",
    "BASE_FLOW",
    "EXTENDED_FLOW",
    "is_step_complete",
]
