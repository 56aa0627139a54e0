"""
Download artifacts and the sinks that deliver them.

The export pipeline ends by handing an Artifact to a DownloadSink. How the
host offers the file (browser download, disk, HTTP response) is the sink's
business.
"""

import os
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from vitae.contexts.drafting.resume_data_structure import ContactInfo
from vitae.contexts.exporting.logger import _log_debug
from vitae.contexts.rendering.variants import RenderTarget

load_dotenv()

RESULTS_PATH = Path(os.getenv("VITAE_RESULTS_PATH", "outs/results"))

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Path separators, characters reserved on Windows, and control characters
RESERVED_FILENAME_CHARS = re.compile(r"[\\/:*?\"<>|\x00-\x1f]+")


@dataclass(frozen=True)
class Artifact:
    """
    Named binary artifact ready to be offered for download.

    Attributes:
        filename: Deterministic download name
        media_type: MIME type of content
        content: Encoded document bytes
    """

    filename: str
    media_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


def _filename_part(value: str) -> str:
    return RESERVED_FILENAME_CHARS.sub("_", value).lstrip(". ")


def artifact_filename(contacts: ContactInfo, target: RenderTarget, extension: str) -> str:
    """
    Build the download name for an export.

    Name parts come from the draft, so reserved characters are replaced and
    leading dots dropped; the result never contains a path separator.

    Example:
        >>> artifact_filename(ContactInfo(first_name="Ada", last_name="Lovelace"), target, "pdf")
        'Ada_Lovelace_Resume_modern_without-photo.pdf'
    """
    first, last = _filename_part(contacts.first_name), _filename_part(contacts.last_name)
    return f"{first}_{last}_Resume_{target.suffix}.{extension.lstrip('.')}"


class DownloadSink(ABC):
    """Host capability that offers a finished artifact to the user."""

    @abstractmethod
    def offer(self, artifact: Artifact):
        """Deliver the artifact. Return value is sink-specific (e.g. a saved path)."""


class DirectorySink(DownloadSink):
    """
    Writes artifacts into a directory, overwriting same-named files.

    Args:
        output_dir: Target directory (default: VITAE_RESULTS_PATH)
    """

    def __init__(self, output_dir: Path = None):
        self.output_dir = Path(output_dir) if output_dir is not None else RESULTS_PATH

    def offer(self, artifact: Artifact) -> Path:
        """
        Write the artifact into output_dir.

        Raises:
            PermissionError: If the filename would resolve outside output_dir
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / artifact.filename
        if path.resolve().parent != self.output_dir.resolve():
            raise PermissionError(f"Refusing to write {artifact.filename!r} outside {self.output_dir}")
        path.write_bytes(artifact.content)
        _log_debug(f"Wrote {artifact.filename} to {self.output_dir}")
        return path


class MemorySink(DownloadSink):
    """Keeps offered artifacts in a list (latest last)."""

    def __init__(self):
        self.artifacts = []

    def offer(self, artifact: Artifact) -> None:
        self.artifacts.append(artifact)
