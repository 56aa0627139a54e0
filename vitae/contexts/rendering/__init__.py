"""
Rendering Context

Responsibilities:
- Resolves (template, photo variant) pairs to render targets
- Fills layout templates with a draft and keeps the result per element id
- Encodes a rendered representation as a paginated PDF

Owns: TemplateId, PhotoVariant, render targets, layout templates, style presets
Never: Mutates the draft or decides where artifacts go
"""

from vitae.contexts.rendering.pdf_encoder import PDFEncoder, encode_pdf, load_export_config
from vitae.contexts.rendering.registries import TemplateRegistry
from vitae.contexts.rendering.renderer import RenderedDocument, ResumeRenderer
from vitae.contexts.rendering.variants import (
    RENDER_TARGETS,
    PhotoVariant,
    RenderTarget,
    TemplateId,
    get_render_target,
    resolve_render_target,
)

__all__ = [
    # Targets
    "TemplateId",
    "PhotoVariant",
    "RenderTarget",
    "RENDER_TARGETS",
    "get_render_target",
    "resolve_render_target",
    # Templates
    "TemplateRegistry",
    "ResumeRenderer",
    "RenderedDocument",
    # PDF
    "PDFEncoder",
    "encode_pdf",
    "load_export_config",
]
