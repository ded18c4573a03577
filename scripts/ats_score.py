#!/usr/bin/env python3
"""
ATS Score CLI

Scores a resume PDF against a job description using keyword overlap.

Commands:
    score   - Compute the ATS match score for a resume
    extract - Show the text extracted from a resume PDF

Examples:\n

    ats_score.py score resume.pdf --job "Python cloud engineer"     # Inline job text

    ats_score.py score resume.pdf --job-file jobs/backend.txt       # Job text from file

    ats_score.py score resume.pdf --job-file jobs/backend.txt -d    # Show matched/missing keywords

    ats_score.py extract resume.pdf                                 # Preview extracted text
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from jobmatch.contexts.intake import UPLOAD_FAILED_NOTICE, extract_document, page_count
from jobmatch.contexts.intake.logger import setup_intake_logger
from jobmatch.contexts.scoring import MatchStatus, evaluate_document
from jobmatch.contexts.scoring.logger import setup_scoring_logger
from jobmatch.utils.logger import setup_console_logger
from jobmatch.utils.text_processing import format_keyword_list, truncate_display
from jobmatch.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

PREVIEW_CHARS = 2000


app = typer.Typer(
    help="Score resumes against job descriptions by keyword overlap",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _read_job_description(job: Optional[str], job_file: Optional[Path]) -> str:
    """Resolve job description text from --job or --job-file (exactly one required)."""
    if (job is None) == (job_file is None):
        typer.secho(
            "Error: provide exactly one of --job or --job-file\n", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=2)

    if job is not None:
        return job

    try:
        return job_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.secho(f"Error: cannot read job file {job_file}: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("score")
def score_command(
    resume_pdf: Annotated[
        Path,
        typer.Argument(help="Resume PDF to score"),
    ],
    job: Annotated[
        Optional[str],
        typer.Option("--job", "-j", help="Job description text"),
    ] = None,
    job_file: Annotated[
        Optional[Path],
        typer.Option("--job-file", "-f", help="File containing the job description"),
    ] = None,
    details: Annotated[
        bool,
        typer.Option("--details", "-d", help="List matched and missing keywords"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Write a session log under LOGS_PATH and echo debug output",
        ),
    ] = False,
):
    """
    Compute the ATS match score for a resume.

    The job description is split on spaces into keywords, and the score is the
    percentage of keywords that appear verbatim in the resume text. A resume
    that cannot be read scores 0.

    Examples:\n

        $ ats_score.py score resume.pdf --job "Python cloud engineer"

        $ ats_score.py score resume.pdf --job-file jobs/backend.txt --details
    """
    job_description = _read_job_description(job, job_file)

    if verbose:
        log_dir = LOGS_PATH / f"score_{now()}"
        log_file = setup_scoring_logger(log_dir, resume=str(resume_pdf), console_level="DEBUG")
    else:
        log_file = None
        setup_console_logger()

    result = evaluate_document(resume_pdf, job_description)

    typer.echo("")
    if result.status is MatchStatus.EXTRACTION_FAILED:
        typer.secho(UPLOAD_FAILED_NOTICE, fg=typer.colors.RED, err=True)
        if result.extraction and result.extraction.error:
            typer.secho(f"  {result.extraction.error}", fg=typer.colors.RED, err=True)
        elif result.extraction:
            typer.secho("  No text found in the document", fg=typer.colors.RED, err=True)
    elif result.status is MatchStatus.EMPTY_INPUT:
        typer.secho("Job description is empty", fg=typer.colors.YELLOW, err=True)

    typer.secho(f"ATS Score: {result.score}", bold=True)

    if details and result.is_ok:
        typer.echo(f"  Keywords: {len(result.keywords)}")
        typer.secho(
            f"  Matched ({len(result.matched_keywords)}): "
            f"{format_keyword_list(result.matched_keywords)}",
            fg=typer.colors.GREEN,
        )
        typer.secho(
            f"  Missing ({len(result.missing_keywords)}): "
            f"{format_keyword_list(result.missing_keywords)}",
            fg=typer.colors.YELLOW,
        )

    if log_file:
        typer.echo(f"  Log: {log_file}")
    typer.echo("")


@app.command("extract")
def extract_command(
    resume_pdf: Annotated[
        Path,
        typer.Argument(help="Resume PDF to extract"),
    ],
    full: Annotated[
        bool,
        typer.Option("--full", help="Print the full text instead of a preview"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Write a session log under LOGS_PATH and echo debug output",
        ),
    ] = False,
):
    """
    Show the text extracted from a resume PDF.

    Useful for checking what the scorer will see, e.g. whether a scanned PDF
    has any text layer at all.
    """
    if verbose:
        log_dir = LOGS_PATH / f"extract_{now()}"
        log_file = setup_intake_logger(log_dir, document=str(resume_pdf), console_level="DEBUG")
    else:
        log_file = None
        setup_console_logger()

    typer.secho(f"\nExtracting: {resume_pdf}", fg=typer.colors.BLUE, bold=True)
    pages = page_count(resume_pdf)
    typer.echo(f"Pages: {pages if pages is not None else 'unreadable'}")

    result = extract_document(resume_pdf)
    if not result.success:
        typer.secho(f"✗ {UPLOAD_FAILED_NOTICE}", fg=typer.colors.RED, bold=True)
        typer.secho(f"  {result.error}\n", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.secho(f"✓ Extracted {len(result.text)} characters", fg=typer.colors.GREEN, bold=True)
    typer.echo("")
    typer.echo(result.text if full else truncate_display(result.text, PREVIEW_CHARS))
    if log_file:
        typer.echo(f"\n  Log: {log_file}")
    typer.echo("")


if __name__ == "__main__":
    app()
