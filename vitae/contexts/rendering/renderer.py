"""
Résumé Rendering

ResumeRenderer plays the rendering collaborator: for a resolved render target
it fills the target's layout template with the draft and keeps the result
under the target's stable element id. The PDF encoder later looks the
representation up by that id; it never renders on its own.
"""

import time
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

from vitae.contexts.drafting.resume_data_structure import (
    PRESENT_LABEL,
    ResumeData,
    group_skills_by_category,
)
from vitae.contexts.rendering.logger import log_markup, log_render_complete
from vitae.contexts.rendering.registries import TemplateRegistry
from vitae.contexts.rendering.variants import RENDER_TARGETS, RenderTarget
from vitae.utils.timestamp import format_long_date


@dataclass(frozen=True)
class RenderedDocument:
    """
    Visual representation of one render target.

    Attributes:
        element_id: Stable identifier (see RenderTarget.element_id)
        target: Target this representation was rendered for
        markup: Résumé markup produced by the layout template
        style: Style preset of the template
        photo: Photo data URL embedded by with-photo layouts (None otherwise)
    """

    element_id: str
    target: RenderTarget
    markup: str
    style: Dict[str, Any]
    photo: Optional[str] = None


class ResumeRenderer:
    """
    Renders drafts into template markup and keeps the latest representation
    per element id.

    Example:
        >>> renderer = ResumeRenderer()
        >>> doc = renderer.render(data, get_render_target("modern", "without-photo"))
        >>> renderer.get("resume-preview-pdf-modern-without-photo") is doc
        True
    """

    def __init__(self, registry: TemplateRegistry = None):
        self.registry = registry or TemplateRegistry()
        self._documents: Dict[str, RenderedDocument] = {}

    def _context(self, data: ResumeData, target: RenderTarget, updated_on: Optional[date]) -> Dict[str, Any]:
        show_photo = target.shows_photo and bool(data.photo)
        return {
            "target": target,
            "style": self.registry.get_style(target.template_name),
            "contacts": data.contacts,
            "summary": data.summary,
            "experience": data.experience,
            "education": data.education,
            "certificates": data.certificates,
            "skills": data.skills,
            "skill_groups": group_skills_by_category(data.skills),
            "projects": data.projects,
            "show_photo": show_photo,
            "present_label": PRESENT_LABEL,
            "updated_on": format_long_date(updated_on),
        }

    def render(
        self, data: ResumeData, target: RenderTarget, updated_on: Optional[date] = None
    ) -> RenderedDocument:
        """
        Render a draft for one target and store the result under its element id.

        Args:
            data: Draft to render (read-only)
            target: Resolved render target
            updated_on: Date shown in the "Last updated" footer (default: today)

        Returns:
            The stored RenderedDocument
        """
        start_time = time.time()

        context = self._context(data, target, updated_on)
        markup = self.registry.get_template(target.template_name).render(context)

        document = RenderedDocument(
            element_id=target.element_id,
            target=target,
            markup=markup,
            style=context["style"],
            photo=data.photo if context["show_photo"] else None,
        )
        self._documents[target.element_id] = document

        log_render_complete(target.element_id, len(markup), time.time() - start_time)
        log_markup(target.element_id, markup)
        return document

    def render_all(self, data: ResumeData, updated_on: Optional[date] = None) -> List[RenderedDocument]:
        """Render every target; with-photo targets are skipped while no photo is set."""
        return [
            self.render(data, target, updated_on)
            for target in RENDER_TARGETS.values()
            if not target.shows_photo or data.photo
        ]

    def get(self, element_id: str) -> Optional[RenderedDocument]:
        return self._documents.get(element_id)

    def discard(self, element_id: str) -> None:
        self._documents.pop(element_id, None)

    def clear(self) -> None:
        self._documents.clear()

    @property
    def element_ids(self) -> List[str]:
        return list(self._documents)
