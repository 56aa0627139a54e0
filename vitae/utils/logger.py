"""
Session logging for vitae commands.

Each CLI run gets its own directory under VITAE_LOGS_PATH holding one log
file per context. The file keeps everything down to DEBUG; the console shows
INFO and above. Every log opens with a provenance header naming the command,
the vitae version, and the template and export settings in effect, plus
whatever the context adds (draft source, template, variant, format).

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from vitae import __version__
from vitae.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("VITAE_LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def session_log_dir(context_name: str, logs_path: Optional[Path] = None) -> Path:
    """
    Directory for one logging session, e.g. outs/logs/export_20261018_101500.

    Args:
        context_name: Context identifier ("draft", "export")
        logs_path: Parent directory (default: VITAE_LOGS_PATH)
    """
    return (logs_path or LOGS_PATH) / f"{context_name}_{now()}"


def session_provenance(extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Key-value pairs describing where a session's output came from.

    Entries of `extra` whose value is None are left out.
    """
    provenance = {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "vitae": __version__,
        "Python": sys.version.split()[0],
        "Templates": os.getenv("VITAE_TEMPLATES_PATH", "packaged"),
        "Export config": os.getenv("VITAE_EXPORT_CONFIG_PATH", "packaged"),
    }
    for key, value in (extra or {}).items():
        if value is not None:
            provenance[key] = value
    return provenance


def setup_logger(context_name: str, log_dir: Path, extra_provenance: Optional[Dict[str, Any]] = None) -> Path:
    """
    Route loguru output to <log_dir>/<context_name>.log and the console.

    Args:
        context_name: Context identifier ("draft", "export")
        log_dir: Directory for this logging session (created if missing)
        extra_provenance: Context-specific provenance entries

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="export",
            log_dir=session_log_dir("export"),
            extra_provenance={"Template": "modern", "Variant": "with-photo"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(session_provenance(extra_provenance))
    return log_file


def log_provenance(provenance: Dict[str, Any]) -> None:
    """Write a provenance header block, one 'key: value' line per entry."""
    logger.info("=" * 80)
    for key, value in provenance.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
