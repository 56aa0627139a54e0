"""
Exporting Context

Responsibilities:
- Validates and stores the résumé photo
- Encodes the draft as DOCX
- Orchestrates PDF/DOCX export into named artifacts
- Offers artifacts to a download sink

Owns: Photo intake rules, artifact naming, export results
Never: Renders layout templates (PDF exports consume the rendering context's output)
"""

from vitae.contexts.exporting.artifacts import (
    Artifact,
    DirectorySink,
    DownloadSink,
    MemorySink,
    artifact_filename,
)
from vitae.contexts.exporting.docx_encoder import DocxBlock, DocxRun, build_docx_blocks, encode_docx
from vitae.contexts.exporting.photo import MAX_PHOTO_BYTES, PhotoStore, PhotoUploadResult, validate_photo
from vitae.contexts.exporting.pipeline import ExportFormat, ExportPipeline, ExportResult

__all__ = [
    # Artifacts
    "Artifact",
    "DownloadSink",
    "DirectorySink",
    "MemorySink",
    "artifact_filename",
    # DOCX
    "DocxBlock",
    "DocxRun",
    "build_docx_blocks",
    "encode_docx",
    # Photo
    "PhotoStore",
    "PhotoUploadResult",
    "MAX_PHOTO_BYTES",
    "validate_photo",
    # Pipeline
    "ExportFormat",
    "ExportPipeline",
    "ExportResult",
]
