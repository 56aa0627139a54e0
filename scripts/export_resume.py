#!/usr/bin/env python3
"""
Résumé Draft CLI

Replays a YAML draft through the wizard engine to inspect its score and step
gating, and exports it to PDF or DOCX. Nothing is written back to the draft.

Commands:
    score  - Show completion score and rule breakdown
    steps  - Show wizard step states
    export - Export a draft to PDF or DOCX
    text   - Print the text layer of an exported PDF

Examples:\n

    export_resume.py score tests/fixtures/ada_lovelace.yaml

    export_resume.py steps tests/fixtures/ada_lovelace.yaml --extended

    export_resume.py export tests/fixtures/ada_lovelace.yaml --template modern --format docx

    export_resume.py export draft.yaml --variant with-photo --photo me.png
"""

import asyncio
import os
from datetime import date
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vitae.contexts.drafting.draft_loader import load_draft
from vitae.contexts.drafting.logger import setup_drafting_logger
from vitae.contexts.drafting.review import resume_statistics, section_checklist
from vitae.contexts.drafting.scoring import score_breakdown
from vitae.contexts.drafting.steps import BASE_FLOW, EXTENDED_FLOW
from vitae.contexts.exporting.artifacts import DirectorySink
from vitae.contexts.exporting.logger import setup_export_logger
from vitae.contexts.exporting.pipeline import ExportFormat
from vitae.contexts.rendering.variants import PhotoVariant, TemplateId
from vitae.session import ResumeSession
from vitae.utils.logger import session_log_dir
from vitae.utils.pdf_processing import extract_lines

load_dotenv()
LOGS_PATH = Path(os.getenv("VITAE_LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("VITAE_RESULTS_PATH", "outs/results"))

app = typer.Typer(
    help="Score, inspect and export résumé drafts",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_session(draft_path: Path, extended: bool = False, sink=None) -> ResumeSession:
    session = ResumeSession(flow=EXTENDED_FLOW if extended else BASE_FLOW, sink=sink)
    try:
        load_draft(draft_path, session.editor)
    except (FileNotFoundError, ValueError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return session


@app.command("score")
def score_command(
    draft_path: Annotated[Path, typer.Argument(help="Draft YAML file")],
):
    """
    Show the completion score with its rule breakdown.

    Examples:\n

        $ export_resume.py score tests/fixtures/ada_lovelace.yaml
    """
    setup_drafting_logger(session_log_dir("draft", LOGS_PATH), source=str(draft_path))
    session = _load_session(draft_path)

    band_colors = {
        "needs_improvement": typer.colors.RED,
        "good": typer.colors.YELLOW,
        "excellent": typer.colors.GREEN,
    }
    typer.secho(f"\nScore: {session.score}/100 ({session.score_band})", fg=band_colors[session.score_band], bold=True)
    typer.echo("")

    for rule, satisfied in score_breakdown(session.data):
        mark = "✓" if satisfied else "✗"
        color = typer.colors.GREEN if satisfied else typer.colors.RED
        typer.secho(f"  {mark} {rule.points:>3}  {rule.description}", fg=color)

    typer.echo("\nChecklist:")
    for item in section_checklist(session.data):
        typer.echo(f"  {'✓' if item.completed else '•'} {item.name}")

    typer.echo("\nEntries:")
    for collection, count in resume_statistics(session.data).items():
        typer.echo(f"  {collection:<13}{count}")

    if not session.can_download:
        typer.secho("\nDownload is disabled below 40%.", fg=typer.colors.YELLOW)


@app.command("steps")
def steps_command(
    draft_path: Annotated[Path, typer.Argument(help="Draft YAML file")],
    extended: Annotated[
        bool,
        typer.Option("--extended", "-e", help="Use the flow with projects and certificates"),
    ] = False,
):
    """
    Show wizard step states (from the first step).

    Examples:\n

        $ export_resume.py steps tests/fixtures/ada_lovelace.yaml --extended
    """
    setup_drafting_logger(session_log_dir("draft", LOGS_PATH), source=str(draft_path))
    session = _load_session(draft_path, extended=extended)

    typer.echo("")
    for state in session.steps():
        mark = "✓" if state.completed else " "
        access = "" if state.clickable else "  (locked)"
        line = f"  [{mark}] {state.index + 1}. {state.title:<13}{state.description}{access}"
        typer.secho(line, bold=state.active)


@app.command("export")
def export_command(
    draft_path: Annotated[Path, typer.Argument(help="Draft YAML file")],
    template: Annotated[
        TemplateId,
        typer.Option("--template", "-t", help="Visual template"),
    ] = TemplateId.PROFESSIONAL,
    variant: Annotated[
        PhotoVariant,
        typer.Option("--variant", help="Photo variant"),
    ] = PhotoVariant.WITHOUT_PHOTO,
    export_format: Annotated[
        ExportFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = ExportFormat.PDF,
    photo: Annotated[
        Optional[Path],
        typer.Option("--photo", help="Photo file for the with-photo variant"),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output directory (default: VITAE_RESULTS_PATH)"),
    ] = None,
    updated_on: Annotated[
        Optional[str],
        typer.Option("--date", help="Footer date as YYYY-MM-DD (default: today)"),
    ] = None,
):
    """
    Export a draft to PDF or DOCX.

    Examples:\n

        $ export_resume.py export draft.yaml                              # Professional PDF

        $ export_resume.py export draft.yaml -t creative -f docx          # Creative DOCX

        $ export_resume.py export draft.yaml --variant with-photo --photo me.jpg
    """
    setup_export_logger(
        session_log_dir("export", LOGS_PATH),
        output_dir or RESULTS_PATH,
        draft_source=str(draft_path),
        template=template.value,
        variant=variant.value,
        export_format=export_format.value,
    )

    session = _load_session(draft_path, sink=DirectorySink(output_dir or RESULTS_PATH))

    if photo is not None:
        upload = asyncio.run(session.photos.upload(photo))
        if not upload.success:
            for error in upload.errors:
                typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    footer_date = date.fromisoformat(updated_on) if updated_on else None

    typer.secho(
        f"\nExporting {export_format.value.upper()}: {template.label} / {variant.label}",
        fg=typer.colors.BLUE,
        bold=True,
    )
    if not session.can_download:
        typer.secho(f"Warning: score is {session.score}%, below the download threshold", fg=typer.colors.YELLOW)

    result = session.export(export_format, template, variant, updated_on=footer_date)

    if result.success:
        typer.secho(f"✓ {result.saved_path}", fg=typer.colors.GREEN)
        if result.page_count is not None:
            typer.echo(f"  Pages: {result.page_count}")
    else:
        typer.secho(f"✗ [{result.condition}]", fg=typer.colors.RED, err=True)
        for error in result.errors:
            typer.secho(f"  {error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("text")
def text_command(
    pdf_path: Annotated[Path, typer.Argument(help="Exported PDF file")],
):
    """
    Print the selectable text of an exported PDF, one line per row.

    Examples:\n

        $ export_resume.py text outs/results/Ada_Lovelace_Resume_modern_without-photo.pdf
    """
    if not pdf_path.exists():
        typer.secho(f"Error: {pdf_path} not found\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for line in extract_lines(pdf_path):
        typer.echo(line)


if __name__ == "__main__":
    app()
