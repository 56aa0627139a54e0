"""Unit tests for the completion scorer."""

import pytest

from vitae.contexts.drafting import scoring
from vitae.contexts.drafting.mutations import ResumeEditor
from vitae.contexts.drafting.resume_data_structure import ResumeData
from vitae.contexts.drafting.scoring import (
    MAX_SCORE,
    SCORING_RULES,
    can_download,
    missing_rules,
    score,
    score_band,
)


@pytest.mark.unit
def test_weights_sum_to_max_score():
    assert sum(rule.points for rule in SCORING_RULES) == MAX_SCORE == 100


@pytest.mark.unit
def test_empty_draft_scores_zero():
    assert score(ResumeData()) == 0


@pytest.mark.unit
def test_ada_lovelace_without_location(ada_editor):
    """5 name + 5 email + 5 phone + 15 summary + 10 + 10 experience + 15 education + 5 skills."""
    assert score(ada_editor.data) == 70


@pytest.mark.unit
def test_ada_lovelace_with_location(ada_editor):
    ada_editor.update_contacts(location="London")
    assert score(ada_editor.data) == 75


@pytest.mark.unit
def test_full_draft_scores_hundred(full_editor):
    assert score(full_editor.data) == 100
    assert missing_rules(full_editor.data) == []


@pytest.mark.unit
def test_summary_threshold_is_strict():
    editor = ResumeEditor()
    editor.set_summary("x" * 50)
    assert score(editor.data) == 0

    editor.set_summary("x" * 51)
    assert score(editor.data) == 15


@pytest.mark.unit
def test_name_requires_both_parts():
    editor = ResumeEditor()
    editor.update_contacts(first_name="Ada")
    assert score(editor.data) == 0

    editor.update_contacts(last_name="Lovelace")
    assert score(editor.data) == 5


@pytest.mark.unit
def test_skills_tiers():
    editor = ResumeEditor()
    scores = []
    for i in range(6):
        editor.add_skill(name=f"skill-{i}")
        scores.append(score(editor.data))

    assert scores == [0, 0, 5, 5, 5, 10]


@pytest.mark.unit
def test_score_is_monotonic_under_additions(ada_editor):
    """Each additive mutation keeps the score the same or raises it."""
    editor = ada_editor
    additions = [
        lambda: editor.add_certificate(name="Honorary Member"),
        lambda: editor.add_experience(job_title="Correspondent"),
        lambda: editor.add_skill(name="Poetry"),
        lambda: editor.add_skill(name="Logic"),
        lambda: editor.update_contacts(location="London"),
        lambda: editor.set_summary(editor.data.summary + " and more"),
        lambda: editor.add_project(name="Note G"),
    ]

    previous = score(editor.data)
    for add in additions:
        add()
        current = score(editor.data)
        assert current >= previous
        previous = current
    assert previous == 100


@pytest.mark.unit
def test_removal_may_lower_score(ada_editor):
    before = score(ada_editor.data)
    ada_editor.remove_education(ada_editor.data.education[0].id)

    assert score(ada_editor.data) == before - 15


@pytest.mark.unit
def test_missing_rules_in_table_order(ada_editor):
    names = [rule.name for rule in missing_rules(ada_editor.data)]
    assert names == ["location", "experience_depth", "skills_rich", "certificates"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,band,downloadable",
    [
        (0, "needs_improvement", False),
        (39, "needs_improvement", False),
        (40, "good", True),
        (69, "good", True),
        (70, "excellent", True),
        (100, "excellent", True),
    ],
)
def test_score_bands(value, band, downloadable):
    assert score_band(value) == band
    assert can_download(value) is downloadable


@pytest.mark.unit
def test_weight_check_rejects_unbalanced_table(monkeypatch):
    monkeypatch.setattr(scoring, "SCORING_RULES", scoring.SCORING_RULES[:-1])

    with pytest.raises(RuntimeError, match="sum to 90"):
        scoring._check_weights()
