"""Unit tests for the résumé data model."""

import pytest

from vitae.contexts.drafting.resume_data_structure import (
    COLLECTION_TYPES,
    ContactInfo,
    Education,
    Experience,
    Project,
    ResumeData,
    Skill,
    SkillLevel,
    field_names,
    group_skills_by_category,
)


@pytest.mark.unit
def test_empty_draft_has_empty_collections():
    """Collections are always present, never None."""
    data = ResumeData()

    for collection in COLLECTION_TYPES:
        assert getattr(data, collection) == []
    assert data.summary == ""
    assert data.photo is None
    assert data.contacts == ContactInfo()


@pytest.mark.unit
def test_drafts_do_not_share_collections():
    first, second = ResumeData(), ResumeData()
    first.skills.append(Skill(name="Python"))

    assert second.skills == []


@pytest.mark.unit
def test_skill_level_ordering():
    assert SkillLevel.NOT_SPECIFIED < SkillLevel.BEGINNER < SkillLevel.INTERMEDIATE
    assert SkillLevel.ADVANCED < SkillLevel.EXPERT
    assert SkillLevel.EXPERT >= SkillLevel.EXPERT
    assert max(SkillLevel) is SkillLevel.EXPERT


@pytest.mark.unit
def test_skill_level_coerced_from_string():
    skill = Skill(name="Go", level="Advanced")
    assert skill.level is SkillLevel.ADVANCED


@pytest.mark.unit
def test_skill_unknown_level_rejected():
    with pytest.raises(ValueError):
        Skill(name="Go", level="Guru")


@pytest.mark.unit
def test_skill_defaults():
    skill = Skill(name="Go")
    assert skill.level is SkillLevel.NOT_SPECIFIED
    assert skill.category == "Technical Skills"


@pytest.mark.unit
def test_contact_links_in_fixed_order():
    contacts = ContactInfo(github="gh/ada", website="ada.dev")
    assert contacts.links == ["ada.dev", "gh/ada"]
    assert ContactInfo().links == []


@pytest.mark.unit
def test_full_name_skips_empty_parts():
    assert ContactInfo(first_name="Ada", last_name="Lovelace").full_name == "Ada Lovelace"
    assert ContactInfo(first_name="Ada").full_name == "Ada"


@pytest.mark.unit
def test_effective_end_date_ignores_stored_value_when_current():
    """A current job ends 'now' whatever end_date says."""
    exp = Experience(end_date="2019-05", is_current_job=True)
    assert exp.effective_end_date is None

    edu = Education(end_date="2012-06", is_currently_studying=False)
    assert edu.effective_end_date == "2012-06"


@pytest.mark.unit
def test_project_copies_technologies():
    technologies = ["Python"]
    project = Project(name="vitae", technologies=technologies)
    technologies.append("Rust")

    assert project.technologies == ["Python"]


@pytest.mark.unit
def test_field_names_excludes_identity():
    names = field_names(Experience)
    assert "id" not in names
    assert names[0] == "job_title"


@pytest.mark.unit
def test_group_skills_keeps_first_seen_category_order():
    skills = [
        Skill(name="Python", category="Languages"),
        Skill(name="Docker", category="Tools"),
        Skill(name="Go", category="Languages"),
    ]
    groups = group_skills_by_category(skills)

    assert list(groups) == ["Languages", "Tools"]
    assert [s.name for s in groups["Languages"]] == ["Python", "Go"]
