"""
Export Pipeline

Orchestrates one export: resolve the render target, encode, name the
artifact and offer it to the download sink.

User-facing failures (photo required, missing render target, encoder
failure) are returned as a failed ExportResult carrying the condition code.
No artifact is offered on failure, and the draft is never touched.
Programming errors (unknown template or variant) propagate.
"""

import asyncio
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from vitae.contexts.drafting.resume_data_structure import ResumeData
from vitae.contexts.exporting.artifacts import (
    DOCX_MEDIA_TYPE,
    PDF_MEDIA_TYPE,
    Artifact,
    DownloadSink,
    artifact_filename,
)
from vitae.contexts.exporting.docx_encoder import encode_docx
from vitae.contexts.exporting.logger import log_export_result, log_export_start
from vitae.contexts.rendering.pdf_encoder import PDFEncoder
from vitae.contexts.rendering.renderer import ResumeRenderer
from vitae.contexts.rendering.variants import PhotoVariant, TemplateId, resolve_render_target
from vitae.exceptions import EncoderError, RenderTargetMissingError, ResumeExportError
from vitae.utils.pdf_processing import page_count


class ExportFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"


@dataclass
class ExportResult:
    """
    Result of one export.

    Attributes:
        success: Whether an artifact was produced
        artifact: The artifact (None if failed)
        condition: Failure code (None on success)
        errors: User-facing messages, then technical detail
        page_count: Pages in a PDF artifact (None for DOCX or failure)
        saved_path: Where the sink put the artifact, if it reports one
    """

    success: bool
    artifact: Optional[Artifact] = None
    condition: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    page_count: Optional[int] = None
    saved_path: Optional[Path] = None


def _failed(error: ResumeExportError) -> ExportResult:
    errors = [f"{error.title}: {error.description}"]
    if error.detail:
        errors.append(error.detail)
    return ExportResult(success=False, condition=error.condition, errors=errors)


class ExportPipeline:
    """
    PDF and DOCX export for a draft.

    Args:
        renderer: Rendering collaborator holding rendered representations
        sink: Where finished artifacts are offered (None: artifacts are only returned)
        pdf_encoder: PDF encoder (default: PDFEncoder with export_defaults.yaml)

    Example:
        >>> pipeline = ExportPipeline(renderer, DirectorySink(tmp_dir))
        >>> result = pipeline.export_docx(data, "modern", "without-photo")
        >>> result.artifact.filename
        'Ada_Lovelace_Resume_modern_without-photo.docx'
    """

    def __init__(
        self,
        renderer: ResumeRenderer,
        sink: Optional[DownloadSink] = None,
        pdf_encoder: Optional[PDFEncoder] = None,
    ):
        self.renderer = renderer
        self.sink = sink
        self.pdf_encoder = pdf_encoder or PDFEncoder()

    def _deliver(self, artifact: Artifact, pages: Optional[int] = None) -> ExportResult:
        saved_path = None
        if self.sink is not None:
            try:
                saved_path = self.sink.offer(artifact)
            except OSError as e:
                return _failed(EncoderError(detail=f"Could not save {artifact.filename}: {e}"))
        return ExportResult(success=True, artifact=artifact, page_count=pages, saved_path=saved_path)

    def export_pdf(self, data: ResumeData, template: TemplateId, variant: PhotoVariant) -> ExportResult:
        """
        Export the rendered representation of (template, variant) as PDF.

        The target must have been rendered beforehand (ResumeRenderer.render);
        this method never renders.

        Args:
            data: Draft being exported (read-only)
            template: Template identity
            variant: Photo variant

        Returns:
            ExportResult
        """
        start_time = time.time()
        log_export_start(ExportFormat.PDF.value, TemplateId(template).value, PhotoVariant(variant).value)

        try:
            target = resolve_render_target(template, variant, data.photo)

            document = self.renderer.get(target.element_id)
            if document is None:
                raise RenderTargetMissingError(detail=f"No rendered representation '{target.element_id}'")

            try:
                content = self.pdf_encoder.encode(document)
            except Exception as e:
                raise EncoderError(detail=f"{type(e).__name__}: {e}") from e

            artifact = Artifact(artifact_filename(data.contacts, target, "pdf"), PDF_MEDIA_TYPE, content)
        except ResumeExportError as e:
            result = _failed(e)
        else:
            result = self._deliver(artifact, page_count(content))

        log_export_result(result, time.time() - start_time)
        return result

    def export_docx(self, data: ResumeData, template: TemplateId, variant: PhotoVariant) -> ExportResult:
        """
        Export the draft as DOCX.

        The DOCX layout does not depend on the template; template and
        variant only name the file. A with-photo variant still requires a
        photo.

        Args:
            data: Draft being exported (read-only)
            template: Template identity
            variant: Photo variant

        Returns:
            ExportResult
        """
        start_time = time.time()
        log_export_start(ExportFormat.DOCX.value, TemplateId(template).value, PhotoVariant(variant).value)

        try:
            target = resolve_render_target(template, variant, data.photo)

            try:
                content = encode_docx(data)
            except Exception as e:
                raise EncoderError(detail=f"{type(e).__name__}: {e}") from e

            artifact = Artifact(artifact_filename(data.contacts, target, "docx"), DOCX_MEDIA_TYPE, content)
        except ResumeExportError as e:
            result = _failed(e)
        else:
            result = self._deliver(artifact)

        log_export_result(result, time.time() - start_time)
        return result

    def export(
        self, data: ResumeData, export_format: ExportFormat, template: TemplateId, variant: PhotoVariant
    ) -> ExportResult:
        if ExportFormat(export_format) is ExportFormat.PDF:
            return self.export_pdf(data, template, variant)
        return self.export_docx(data, template, variant)

    # =========================================================================
    # AWAITABLE FORMS
    # =========================================================================

    async def export_pdf_async(self, data: ResumeData, template: TemplateId, variant: PhotoVariant) -> ExportResult:
        return await asyncio.to_thread(self.export_pdf, data, template, variant)

    async def export_docx_async(self, data: ResumeData, template: TemplateId, variant: PhotoVariant) -> ExportResult:
        return await asyncio.to_thread(self.export_docx, data, template, variant)

    async def export_async(
        self, data: ResumeData, export_format: ExportFormat, template: TemplateId, variant: PhotoVariant
    ) -> ExportResult:
        return await asyncio.to_thread(self.export, data, export_format, template, variant)
