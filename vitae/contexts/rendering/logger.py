"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[render]"


# Wrapper functions with automatic [render] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_complete(element_id: str, markup_length: int, elapsed_time: float) -> None:
    _log_debug(f"Rendered {element_id}: {markup_length} chars of markup ({elapsed_time:.3f}s)")


def log_pdf_encoded(element_id: str, flowable_count: int, size_bytes: int) -> None:
    _log_debug(f"Encoded {element_id}: {flowable_count} flowables -> {size_bytes} bytes")


def log_markup(element_id: str, markup: str) -> None:
    """Dump rendered markup at debug level, bypassing the line format."""
    logger.opt(raw=True).debug(f"\n{'=' * 80}\nMARKUP {element_id}:\n{'=' * 80}\n{markup}\n")
