"""
Template and photo-variant resolution.

A render target is the pair (template identity, photo variant). The set of
template identities is closed; RENDER_TARGETS maps every pair to its target
and is checked for completeness when this module is imported, so adding a
TemplateId without registering both variants fails immediately.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from vitae.exceptions import PhotoRequiredError


class TemplateId(str, Enum):
    PROFESSIONAL = "professional"
    MODERN = "modern"
    CREATIVE = "creative"
    COMPACT = "compact"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class PhotoVariant(str, Enum):
    WITH_PHOTO = "with-photo"
    WITHOUT_PHOTO = "without-photo"

    @property
    def label(self) -> str:
        return "With Photo" if self is PhotoVariant.WITH_PHOTO else "Without Photo"


@dataclass(frozen=True)
class RenderTarget:
    """
    Concrete render target.

    Attributes:
        template: Template identity
        variant: Photo variant
        template_name: Template file loaded by the TemplateRegistry
    """

    template: TemplateId
    variant: PhotoVariant
    template_name: str

    @property
    def shows_photo(self) -> bool:
        return self.variant is PhotoVariant.WITH_PHOTO

    @property
    def element_id(self) -> str:
        """Stable identifier of the rendered representation for this target."""
        return f"resume-preview-pdf-{self.template.value}-{self.variant.value}"

    @property
    def suffix(self) -> str:
        return f"{self.template.value}_{self.variant.value}"


def _target(template: TemplateId, variant: PhotoVariant) -> RenderTarget:
    return RenderTarget(template=template, variant=variant, template_name=template.value)


RENDER_TARGETS: Dict[Tuple[TemplateId, PhotoVariant], RenderTarget] = {
    (TemplateId.PROFESSIONAL, PhotoVariant.WITHOUT_PHOTO): _target(TemplateId.PROFESSIONAL, PhotoVariant.WITHOUT_PHOTO),
    (TemplateId.PROFESSIONAL, PhotoVariant.WITH_PHOTO): _target(TemplateId.PROFESSIONAL, PhotoVariant.WITH_PHOTO),
    (TemplateId.MODERN, PhotoVariant.WITHOUT_PHOTO): _target(TemplateId.MODERN, PhotoVariant.WITHOUT_PHOTO),
    (TemplateId.MODERN, PhotoVariant.WITH_PHOTO): _target(TemplateId.MODERN, PhotoVariant.WITH_PHOTO),
    (TemplateId.CREATIVE, PhotoVariant.WITHOUT_PHOTO): _target(TemplateId.CREATIVE, PhotoVariant.WITHOUT_PHOTO),
    (TemplateId.CREATIVE, PhotoVariant.WITH_PHOTO): _target(TemplateId.CREATIVE, PhotoVariant.WITH_PHOTO),
    (TemplateId.COMPACT, PhotoVariant.WITHOUT_PHOTO): _target(TemplateId.COMPACT, PhotoVariant.WITHOUT_PHOTO),
    (TemplateId.COMPACT, PhotoVariant.WITH_PHOTO): _target(TemplateId.COMPACT, PhotoVariant.WITH_PHOTO),
}


def _check_exhaustive() -> None:
    missing = [
        f"{template.value}/{variant.value}"
        for template in TemplateId
        for variant in PhotoVariant
        if (template, variant) not in RENDER_TARGETS
    ]
    if missing:
        raise RuntimeError(f"Render targets not registered: {missing}")


_check_exhaustive()


def get_render_target(template: TemplateId, variant: PhotoVariant) -> RenderTarget:
    """Look up the target for a pair (accepts enum members or their string values)."""
    return RENDER_TARGETS[(TemplateId(template), PhotoVariant(variant))]


def resolve_render_target(
    template: TemplateId, variant: PhotoVariant, photo: Optional[str]
) -> RenderTarget:
    """
    Resolve the render target for an export.

    A with-photo variant without a photo payload is refused rather than
    downgraded: the two variants are distinct artifacts.

    Args:
        template: Template identity
        variant: Photo variant
        photo: Current photo payload (data URL) or None

    Returns:
        RenderTarget for the pair

    Raises:
        PhotoRequiredError: If variant is with-photo and photo is empty
        ValueError: If template or variant is not a known value
    """
    target = get_render_target(template, variant)
    if target.shows_photo and not photo:
        raise PhotoRequiredError()
    return target
