"""Unit tests for ResumeRenderer (markup only, no PDF encoding)."""

import xml.etree.ElementTree as ET

import pytest

from vitae.contexts.rendering.renderer import ResumeRenderer
from vitae.contexts.rendering.variants import RENDER_TARGETS, get_render_target


@pytest.mark.unit
def test_render_stores_under_element_id(ada_editor, footer_date):
    renderer = ResumeRenderer()
    target = get_render_target("modern", "without-photo")

    document = renderer.render(ada_editor.data, target, updated_on=footer_date)

    assert renderer.get("resume-preview-pdf-modern-without-photo") is document
    assert "<name>Ada Lovelace</name>" in document.markup
    assert "Last updated: October 18, 2026" in document.markup
    assert document.photo is None


@pytest.mark.unit
def test_rerender_replaces_previous_document(ada_editor, footer_date):
    renderer = ResumeRenderer()
    target = get_render_target("professional", "without-photo")
    first = renderer.render(ada_editor.data, target, updated_on=footer_date)

    ada_editor.update_contacts(last_name="King")
    second = renderer.render(ada_editor.data, target, updated_on=footer_date)

    assert renderer.get(target.element_id) is second
    assert second is not first
    assert "Ada King" in second.markup


@pytest.mark.unit
def test_render_all_skips_photo_targets_without_photo(ada_editor, footer_date):
    renderer = ResumeRenderer()

    documents = renderer.render_all(ada_editor.data, updated_on=footer_date)

    assert len(documents) == len(RENDER_TARGETS) // 2
    assert all(element_id.endswith("-without-photo") for element_id in renderer.element_ids)


@pytest.mark.unit
def test_discard_and_clear(ada_editor, footer_date):
    renderer = ResumeRenderer()
    renderer.render_all(ada_editor.data, updated_on=footer_date)

    renderer.discard("resume-preview-pdf-creative-without-photo")
    renderer.discard("resume-preview-pdf-creative-without-photo")
    assert renderer.get("resume-preview-pdf-creative-without-photo") is None
    assert len(renderer.element_ids) == len(RENDER_TARGETS) // 2 - 1

    renderer.clear()
    assert renderer.element_ids == []


@pytest.mark.unit
def test_rendered_markup_drops_xml_illegal_characters(ada_editor, footer_date):
    ada_editor.update_contacts(location="London\x0c")
    ada_editor.add_skill(name="Poetical\x01 science")

    document = ResumeRenderer().render(
        ada_editor.data, get_render_target("creative", "without-photo"), updated_on=footer_date
    )

    root = ET.fromstring(document.markup)
    assert root.tag == "resume"
    assert "\x0c" not in document.markup
    assert "Poetical science" in document.markup
