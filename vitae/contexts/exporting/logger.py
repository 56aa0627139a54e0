"""
Exporting context logger.

Provides logging interface for exporting context with automatic [export] prefix.
All exporting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[export]"


def setup_export_logger(
    log_dir: Path,
    results_path: Path = None,
    draft_source: str = None,
    template: str = None,
    variant: str = None,
    export_format: str = None,
) -> Path:
    """
    Setup logger for exporting context.

    Args:
        log_dir: Directory for this export session
        results_path: Where artifacts are written
        draft_source: Draft file being exported
        template: Template identity
        variant: Photo variant
        export_format: "pdf" or "docx"

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="export",
        log_dir=log_dir,
        extra_provenance={
            "Draft": draft_source,
            "Template": template,
            "Variant": variant,
            "Format": export_format,
            "Results": results_path,
        },
    )


# Wrapper functions with automatic [export] prefix


def _log_info(message: str) -> None:
    """Log info message with [export] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [export] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [export] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [export] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [export] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level exporting-specific logging helpers


def log_export_start(export_format: str, template: str, variant: str) -> None:
    _log_info(f"Exporting {export_format.upper()}: {template} / {variant}")


def log_export_result(
    result,  # ExportResult
    elapsed_time: float,
) -> None:
    """
    Log export result.

    Args:
        result: ExportResult from ExportPipeline
        elapsed_time: Time taken to export
    """
    if result.success:
        artifact = result.artifact
        _log_success(f"{artifact.filename}: {len(artifact.content)} bytes ({elapsed_time:.2f}s)")
        if result.page_count is not None:
            _log_debug(f"  Pages: {result.page_count}")
        if result.saved_path:
            _log_debug(f"  Saved: {result.saved_path}")
    else:
        _log_error(f"Export failed [{result.condition}] ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")


def log_photo_rejected(condition: str, media_type: str, size: int) -> None:
    _log_warning(f"Photo rejected [{condition}]: {media_type or 'unknown type'}, {size} bytes")


def log_photo_accepted(media_type: str, size: int, generation: int) -> None:
    _log_info(f"Photo accepted: {media_type}, {size} bytes (upload #{generation})")


def log_photo_superseded(generation: int, latest: int) -> None:
    _log_debug(f"Photo upload #{generation} superseded by #{latest}; discarded")
