"""Unit tests for template/variant resolution."""

import pytest

from vitae.contexts.rendering.variants import (
    RENDER_TARGETS,
    PhotoVariant,
    TemplateId,
    get_render_target,
    resolve_render_target,
)
from vitae.exceptions import PhotoRequiredError

PHOTO = "data:image/png;base64,AAAA"


@pytest.mark.unit
def test_every_pair_has_a_target():
    assert len(RENDER_TARGETS) == len(TemplateId) * len(PhotoVariant) == 8
    for template in TemplateId:
        for variant in PhotoVariant:
            target = get_render_target(template, variant)
            assert target.template is template
            assert target.variant is variant


@pytest.mark.unit
def test_targets_are_distinct_per_variant():
    with_photo = get_render_target("modern", "with-photo")
    without_photo = get_render_target("modern", "without-photo")

    assert with_photo != without_photo
    assert with_photo.shows_photo and not without_photo.shows_photo


@pytest.mark.unit
def test_element_id_and_suffix():
    target = get_render_target(TemplateId.CREATIVE, PhotoVariant.WITH_PHOTO)

    assert target.element_id == "resume-preview-pdf-creative-with-photo"
    assert target.suffix == "creative_with-photo"


@pytest.mark.unit
def test_with_photo_requires_payload():
    """No silent downgrade to without-photo."""
    with pytest.raises(PhotoRequiredError) as excinfo:
        resolve_render_target("professional", "with-photo", None)

    assert excinfo.value.condition == "photo_required"

    with pytest.raises(PhotoRequiredError):
        resolve_render_target("professional", "with-photo", "")


@pytest.mark.unit
def test_resolve_with_photo_present():
    target = resolve_render_target("compact", "with-photo", PHOTO)
    assert target.shows_photo


@pytest.mark.unit
def test_without_photo_ignores_payload():
    assert resolve_render_target("modern", "without-photo", None).variant is PhotoVariant.WITHOUT_PHOTO
    assert resolve_render_target("modern", "without-photo", PHOTO).variant is PhotoVariant.WITHOUT_PHOTO


@pytest.mark.unit
def test_unknown_template_is_programming_error():
    with pytest.raises(ValueError):
        get_render_target("brutalist", "without-photo")


@pytest.mark.unit
def test_labels():
    assert TemplateId.MODERN.label == "Modern"
    assert PhotoVariant.WITH_PHOTO.label == "With Photo"
