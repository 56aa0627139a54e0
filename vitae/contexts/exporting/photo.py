"""
Photo intake.

Accepts one image per upload event, validates the declared media type and
size, checks that the bytes decode as a raster image the PDF encoder can
embed, and stores the image on the draft as a base64 data URL. A rejected
upload leaves the current photo untouched.

Uploads are last-write-wins: every upload event takes a new generation
number, and an upload that finishes after a newer one has started is
discarded instead of overwriting the newer result.
"""

import asyncio
import base64
import mimetypes
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import List, Optional, Union

from reportlab.lib.utils import ImageReader

from vitae.contexts.drafting.mutations import ResumeEditor
from vitae.contexts.exporting.logger import (
    log_photo_accepted,
    log_photo_rejected,
    log_photo_superseded,
)
from vitae.exceptions import (
    InvalidPhotoTypeError,
    PhotoTooLargeError,
    PhotoUnreadableError,
    ValidationRejection,
)

MAX_PHOTO_BYTES = 5 * 1024 * 1024


@dataclass
class PhotoUploadResult:
    """
    Outcome of one upload event.

    Attributes:
        success: Whether the photo was stored
        condition: Rejection code (None on success or when superseded)
        errors: User-facing messages
        superseded: A newer upload started before this one finished
        generation: Upload event number
    """

    success: bool
    condition: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    superseded: bool = False
    generation: int = 0


def validate_photo(media_type: Optional[str], size: int) -> None:
    """
    Check an upload against the intake rules.

    Raises:
        InvalidPhotoTypeError: If media_type is not image/*
        PhotoTooLargeError: If size exceeds MAX_PHOTO_BYTES
    """
    if not media_type or not media_type.startswith("image/"):
        raise InvalidPhotoTypeError(detail=f"media type {media_type!r}")
    if size > MAX_PHOTO_BYTES:
        raise PhotoTooLargeError(detail=f"{size} bytes > {MAX_PHOTO_BYTES}")


def check_raster(content: bytes, media_type: str) -> None:
    """
    Check that image bytes decode as a raster image.

    Raises:
        InvalidPhotoTypeError: If the bytes are not a readable bitmap (e.g. SVG)
    """
    try:
        ImageReader(BytesIO(content)).getSize()
    except Exception as e:
        raise InvalidPhotoTypeError(detail=f"{media_type} content is not a raster image: {e}")


def prepare_photo(content: bytes, media_type: str) -> str:
    """Check image bytes and encode them as a data URL."""
    check_raster(content, media_type)
    return encode_photo(content, media_type)


def encode_photo(content: bytes, media_type: str) -> str:
    """Encode image bytes as an embeddable data URL."""
    return f"data:{media_type};base64,{base64.b64encode(content).decode('ascii')}"


class PhotoStore:
    """
    Photo slot of a draft with last-write-wins uploads.

    Args:
        editor: Mutation engine owning the draft
    """

    def __init__(self, editor: ResumeEditor):
        self.editor = editor
        self._generation = 0

    @property
    def photo(self) -> Optional[str]:
        return self.editor.data.photo

    def _claim(self) -> int:
        self._generation += 1
        return self._generation

    def _rejected(self, error: ValidationRejection, media_type: Optional[str], size: int, generation: int):
        log_photo_rejected(error.condition, media_type, size)
        return PhotoUploadResult(
            success=False,
            condition=error.condition,
            errors=[f"{error.title}: {error.description}"],
            generation=generation,
        )

    def _store(self, encoded: str, media_type: str, size: int, generation: int) -> PhotoUploadResult:
        if generation != self._generation:
            log_photo_superseded(generation, self._generation)
            return PhotoUploadResult(success=False, superseded=True, generation=generation)
        self.editor.set_photo(encoded)
        log_photo_accepted(media_type, size, generation)
        return PhotoUploadResult(success=True, generation=generation)

    def accept(self, content: bytes, media_type: Optional[str]) -> PhotoUploadResult:
        """
        Validate and store an in-memory image.

        Args:
            content: Raw image bytes
            media_type: Declared MIME type (e.g. "image/png")

        Returns:
            PhotoUploadResult (never raises for rejected input)
        """
        generation = self._claim()
        try:
            validate_photo(media_type, len(content))
            encoded = prepare_photo(content, media_type)
        except ValidationRejection as e:
            return self._rejected(e, media_type, len(content), generation)
        return self._store(encoded, media_type, len(content), generation)

    async def upload(self, source: Union[Path, str, bytes], media_type: Optional[str] = None) -> PhotoUploadResult:
        """
        Awaitable upload from a file path or bytes.

        The media type defaults to a guess from the file name. Size is
        checked before the file is read, so oversized files are never
        loaded. A missing or unreadable file is reported as photo_unreadable.

        Args:
            source: Image file path or raw bytes
            media_type: Declared MIME type

        Returns:
            PhotoUploadResult; superseded=True if a newer upload started meanwhile
        """
        generation = self._claim()

        if isinstance(source, bytes):
            content, size = source, len(source)
        else:
            path = Path(source)
            media_type = media_type or mimetypes.guess_type(path.name)[0]
            content = None
            try:
                size = (await asyncio.to_thread(path.stat)).st_size
            except OSError as e:
                return self._rejected(PhotoUnreadableError(detail=str(e)), media_type, 0, generation)

        try:
            validate_photo(media_type, size)
            if content is None:
                try:
                    content = await asyncio.to_thread(path.read_bytes)
                except OSError as e:
                    raise PhotoUnreadableError(detail=str(e))
            encoded = await asyncio.to_thread(prepare_photo, content, media_type)
        except ValidationRejection as e:
            return self._rejected(e, media_type, size, generation)

        return self._store(encoded, media_type, len(content), generation)

    def clear(self) -> None:
        """Remove the photo; in-flight uploads are discarded."""
        self._claim()
        self.editor.set_photo(None)
