"""
User-facing failure conditions for photo intake and export.

Each exception carries a stable `condition` code plus a short title and
description suitable for a notification. Orchestrators catch these at the
export/upload boundary and turn them into failed results.
"""

from typing import Optional


class ResumeExportError(Exception):
    """
    Base class for named, non-fatal export and upload failures.

    Attributes:
        condition: Stable machine-readable code (e.g. "photo_required")
        title: Short user-facing title
        description: User-facing explanation
        detail: Optional technical detail for logs
    """

    condition = "export_failed"
    title = "Download Failed"
    description = "There was an error generating the document. Please try again."

    def __init__(self, description: Optional[str] = None, detail: Optional[str] = None):
        if description:
            self.description = description
        self.detail = detail

        parts = [f"{self.title}: {self.description}"]
        if detail:
            parts.append(f"Detail: {detail}")

        super().__init__("\n".join(parts))


class ValidationRejection(ResumeExportError):
    """Input refused before any state change or artifact was produced."""

    condition = "validation_rejected"
    title = "Invalid Input"


class InvalidPhotoTypeError(ValidationRejection):
    condition = "invalid_photo_type"
    title = "Invalid File"
    description = "Please upload an image file (JPG, PNG, etc.)"


class PhotoTooLargeError(ValidationRejection):
    condition = "photo_too_large"
    title = "File Too Large"
    description = "Please upload an image smaller than 5MB"


class PhotoUnreadableError(ValidationRejection):
    condition = "photo_unreadable"
    title = "Upload Failed"
    description = "The selected file could not be read. Please choose it again."


class PhotoRequiredError(ValidationRejection):
    condition = "photo_required"
    title = "Photo Required"
    description = "Please upload a photo for the resume with photo format"


class RenderTargetMissingError(ResumeExportError):
    """The rendering collaborator has not produced the requested representation."""

    condition = "render_target_missing"
    title = "Download Failed"
    description = "Resume template not found. Please try again."


class EncoderError(ResumeExportError):
    """An encoding step failed; reported generically to the user."""

    condition = "export_failed"
