"""Unit tests for wizard step gating and navigation."""

import pytest

from vitae.contexts.drafting.mutations import ResumeEditor
from vitae.contexts.drafting.steps import (
    BASE_FLOW,
    EXTENDED_FLOW,
    WizardNavigator,
    WizardStep,
    is_step_complete,
)


@pytest.mark.unit
def test_base_flow_order():
    assert [step.value for step in BASE_FLOW] == [
        "contacts",
        "experience",
        "education",
        "skills",
        "summary",
        "finalize",
    ]


@pytest.mark.unit
def test_extended_flow_includes_projects_and_certificates():
    assert WizardStep.PROJECTS in EXTENDED_FLOW
    assert WizardStep.CERTIFICATES in EXTENDED_FLOW
    assert EXTENDED_FLOW[0] is WizardStep.CONTACTS
    assert EXTENDED_FLOW[-1] is WizardStep.FINALIZE


@pytest.mark.unit
def test_contacts_predicate_requires_phone():
    editor = ResumeEditor()
    editor.update_contacts(first_name="Ada", last_name="Lovelace", email="ada@example.com")
    assert not is_step_complete(WizardStep.CONTACTS, editor.data)

    editor.update_contacts(phone="555-0100")
    assert is_step_complete(WizardStep.CONTACTS, editor.data)


@pytest.mark.unit
def test_finalize_predicate_follows_score(ada_editor):
    """Ada scores exactly 70 (location empty), which completes finalize."""
    assert is_step_complete(WizardStep.FINALIZE, ada_editor.data)

    ada_editor.remove_skill(ada_editor.data.skills[0].id)
    ada_editor.remove_skill(ada_editor.data.skills[0].id)
    assert not is_step_complete(WizardStep.FINALIZE, ada_editor.data)


@pytest.mark.unit
def test_starts_on_first_step():
    navigator = WizardNavigator(ResumeEditor().data)
    assert navigator.current is WizardStep.CONTACTS
    assert navigator.current_index == 0


@pytest.mark.unit
def test_one_step_ahead_is_always_clickable():
    navigator = WizardNavigator(ResumeEditor().data)

    assert navigator.is_clickable(WizardStep.EXPERIENCE)
    assert not navigator.is_clickable(WizardStep.EDUCATION)
    assert not navigator.is_clickable(WizardStep.FINALIZE)


@pytest.mark.unit
def test_completed_steps_are_clickable_from_anywhere():
    editor = ResumeEditor()
    navigator = WizardNavigator(editor.data)
    for name in ("Go", "Rust", "Python"):
        editor.add_skill(name=name)

    assert navigator.is_clickable(WizardStep.SKILLS)
    assert navigator.go_to(WizardStep.SKILLS)
    assert navigator.current is WizardStep.SKILLS


@pytest.mark.unit
def test_go_to_refuses_incomplete_far_step():
    navigator = WizardNavigator(ResumeEditor().data)

    assert navigator.go_to(WizardStep.SUMMARY) is False
    assert navigator.current is WizardStep.CONTACTS


@pytest.mark.unit
def test_backward_jumps_always_allowed():
    navigator = WizardNavigator(ResumeEditor().data)
    navigator.next()
    navigator.next()

    assert navigator.current is WizardStep.EDUCATION
    assert navigator.go_to(WizardStep.CONTACTS)
    assert navigator.current is WizardStep.CONTACTS


@pytest.mark.unit
def test_next_and_previous_are_noops_at_boundaries():
    navigator = WizardNavigator(ResumeEditor().data)

    assert navigator.previous() is False
    assert navigator.current is WizardStep.CONTACTS

    while navigator.next():
        pass
    assert navigator.current is WizardStep.FINALIZE
    assert navigator.next_step is None
    assert navigator.next() is False


@pytest.mark.unit
def test_step_not_in_flow_rejected():
    navigator = WizardNavigator(ResumeEditor().data, BASE_FLOW)

    with pytest.raises(ValueError):
        navigator.go_to(WizardStep.PROJECTS)


@pytest.mark.unit
def test_extended_flow_predicates():
    editor = ResumeEditor()
    navigator = WizardNavigator(editor.data, EXTENDED_FLOW)
    assert not navigator.is_complete(WizardStep.PROJECTS)

    editor.add_project(name="vitae")
    editor.add_certificate(name="CKA")
    assert navigator.is_complete(WizardStep.PROJECTS)
    assert navigator.is_complete(WizardStep.CERTIFICATES)
    assert navigator.is_clickable(WizardStep.CERTIFICATES)


@pytest.mark.unit
def test_step_states_snapshot(ada_editor):
    navigator = WizardNavigator(ada_editor.data)
    states = navigator.step_states()

    assert [s.step for s in states] == list(BASE_FLOW)
    assert states[0].active and not states[1].active
    assert states[0].completed  # name, email and phone are set
    assert all(s.clickable for s in states)  # every later step is complete
    assert states[-1].title == "Finalize"


@pytest.mark.unit
def test_invalid_flow_rejected():
    with pytest.raises(ValueError):
        WizardNavigator(ResumeEditor().data, [WizardStep.CONTACTS, WizardStep.CONTACTS])
