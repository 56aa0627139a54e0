"""
Drafting context logger.

Provides logging interface for drafting context with automatic [draft] prefix.
All drafting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[draft]"


def setup_drafting_logger(log_dir: Path, source: str = "wizard") -> Path:
    """
    Setup logger for drafting context.

    Args:
        log_dir: Directory for this drafting session
        source: Where the draft comes from ("wizard" or a draft file path)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="draft",
        log_dir=log_dir,
        extra_provenance={"Draft source": source},
    )


# Wrapper functions with automatic [draft] prefix


def _log_info(message: str) -> None:
    """Log info message with [draft] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [draft] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level drafting-specific logging helpers


def log_entry_added(collection: str, entry_id: str, size: int) -> None:
    _log_debug(f"Added {collection} entry {entry_id} ({size} total)")


def log_entry_missing(operation: str, collection: str, entry_id: str) -> None:
    _log_debug(f"Ignored {operation} on {collection}: no entry with id {entry_id}")


def log_draft_loaded(source: Path, counts: dict) -> None:
    """Log summary of a draft replayed from file."""
    _log_info(f"Loaded draft from {source}")
    for collection, count in counts.items():
        _log_debug(f"  {collection}: {count}")


def log_step_change(previous: str, current: str) -> None:
    _log_debug(f"Step changed: {previous} -> {current}")


def log_step_refused(step: str, current: str) -> None:
    _log_debug(f"Step {step} is not reachable from {current}")
