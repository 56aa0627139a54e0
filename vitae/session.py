"""
Wizard Session

One ResumeSession per user session: it owns the draft and wires the
drafting, rendering and exporting contexts around it. Nothing is persisted;
the draft lives as long as the session object.
"""

from datetime import date
from typing import List, Optional, Sequence

from vitae.contexts.drafting.mutations import ResumeEditor
from vitae.contexts.drafting.resume_data_structure import ResumeData
from vitae.contexts.drafting.scoring import can_download, score, score_band
from vitae.contexts.drafting.steps import BASE_FLOW, StepState, WizardNavigator, WizardStep
from vitae.contexts.exporting.artifacts import DownloadSink
from vitae.contexts.exporting.photo import PhotoStore
from vitae.contexts.exporting.pipeline import ExportFormat, ExportPipeline, ExportResult
from vitae.contexts.rendering.renderer import ResumeRenderer
from vitae.contexts.rendering.variants import PhotoVariant, TemplateId, get_render_target


class ResumeSession:
    """
    Draft, navigation, photo and export for one wizard session.

    Args:
        flow: Wizard steps (BASE_FLOW or EXTENDED_FLOW)
        editor: Mutation engine (default: empty draft)
        renderer: Rendering collaborator (default: packaged templates)
        sink: Download sink for exported artifacts (default: none, results only)

    Example:
        >>> session = ResumeSession()
        >>> session.editor.update_contacts(first_name="Ada", last_name="Lovelace")
        >>> session.score
        5
    """

    def __init__(
        self,
        flow: Sequence[WizardStep] = BASE_FLOW,
        editor: Optional[ResumeEditor] = None,
        renderer: Optional[ResumeRenderer] = None,
        sink: Optional[DownloadSink] = None,
    ):
        self.editor = editor or ResumeEditor()
        self.navigator = WizardNavigator(self.editor.data, flow)
        self.photos = PhotoStore(self.editor)
        self.renderer = renderer or ResumeRenderer()
        self.pipeline = ExportPipeline(self.renderer, sink)

    @property
    def data(self) -> ResumeData:
        return self.editor.data

    @property
    def score(self) -> int:
        return score(self.data)

    @property
    def score_band(self) -> str:
        return score_band(self.score)

    @property
    def can_download(self) -> bool:
        return can_download(self.score)

    def steps(self) -> List[StepState]:
        return self.navigator.step_states()

    def render(self, template: TemplateId, variant: PhotoVariant, updated_on: Optional[date] = None):
        """Render (or re-render) one target from the current draft."""
        return self.renderer.render(self.data, get_render_target(template, variant), updated_on)

    def _prepare(self, export_format: ExportFormat, template: TemplateId, variant: PhotoVariant, updated_on) -> None:
        # A with-photo target is not rendered while no photo is set
        target = get_render_target(template, variant)
        if ExportFormat(export_format) is ExportFormat.PDF and (self.data.photo or not target.shows_photo):
            self.renderer.render(self.data, target, updated_on)

    def export(
        self,
        export_format: ExportFormat,
        template: TemplateId,
        variant: PhotoVariant,
        updated_on: Optional[date] = None,
    ) -> ExportResult:
        """
        Export the current draft.

        For PDF the target is re-rendered first so the artifact reflects the
        latest edits.

        Args:
            export_format: "pdf" or "docx"
            template: Template identity
            variant: Photo variant
            updated_on: Date for the PDF "Last updated" footer (default: today)

        Returns:
            ExportResult
        """
        self._prepare(export_format, template, variant, updated_on)
        return self.pipeline.export(self.data, export_format, template, variant)

    async def export_async(
        self,
        export_format: ExportFormat,
        template: TemplateId,
        variant: PhotoVariant,
        updated_on: Optional[date] = None,
    ) -> ExportResult:
        """Awaitable form of export(); the encoder runs in a worker thread."""
        self._prepare(export_format, template, variant, updated_on)
        return await self.pipeline.export_async(self.data, export_format, template, variant)
