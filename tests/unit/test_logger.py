"""Unit tests for session logging setup."""

from pathlib import Path

import pytest
from loguru import logger

from vitae import __version__
from vitae.contexts.exporting.logger import setup_export_logger
from vitae.utils.logger import session_log_dir, session_provenance


@pytest.fixture
def restore_logger():
    yield
    logger.remove()


@pytest.mark.unit
def test_session_log_dir_is_per_context(tmp_path):
    log_dir = session_log_dir("export", tmp_path)

    assert log_dir.parent == tmp_path
    assert log_dir.name.startswith("export_")


@pytest.mark.unit
def test_session_provenance_skips_missing_values():
    provenance = session_provenance({"Template": "modern", "Variant": None})

    assert provenance["vitae"] == __version__
    assert provenance["Template"] == "modern"
    assert "Variant" not in provenance
    assert {"Command", "Working directory", "Python", "Templates", "Export config"} <= set(provenance)


@pytest.mark.unit
def test_export_log_records_session_settings(tmp_path, restore_logger):
    log_file = setup_export_logger(
        tmp_path / "export_session",
        results_path=Path("outs/results"),
        draft_source="drafts/ada.yaml",
        template="creative",
        variant="with-photo",
        export_format="pdf",
    )
    logger.debug("[export] encoder detail")

    content = log_file.read_text()
    assert log_file == tmp_path / "export_session" / "export.log"
    for expected in (
        f"vitae: {__version__}",
        "Draft: drafts/ada.yaml",
        "Template: creative",
        "Variant: with-photo",
        "Format: pdf",
        "[export] encoder detail",
    ):
        assert expected in content
