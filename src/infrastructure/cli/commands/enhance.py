"""Run the accessibility enhancement stage on a document structure."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

import typer
from rich.console import Console

from src.application.use_cases.audit_accessibility import audit_accessibility
from src.application.use_cases.enhance_accessibility import enhance_accessibility
from src.domain.errors import DocumentLoadError, InvalidDocumentStructure
from src.infrastructure.adapters.json_document_store import JsonDocumentStoreAdapter
from src.infrastructure.cli.commands.audit import display_report
from src.infrastructure.config.settings import Settings
from src.infrastructure.logging import configure_logging, set_job_id

app = typer.Typer(help="Add alt text, semantic roles and reading order to documents")
console = Console()
logger = logging.getLogger(__name__)


def default_output_path(source: Path) -> Path:
    """Return <stem>.accessible.json next to the source file."""
    return source.with_name(f"{source.stem}.accessible.json")


@app.command()
def run(
    source: Path = typer.Argument(..., help="Path to a document structure JSON file"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output path (defaults to <stem>.accessible.json)"),
    config_path: str | None = typer.Option(None, "--config", help="Path to docaccess.toml configuration file"),
    repair_reading_order: bool = typer.Option(
        False,
        "--repair-reading-order",
        help="Repair existing reading orders that miss or reference unknown block ids",
    ),
    job_id: str | None = typer.Option(None, "--job-id", help="Job identifier for log correlation"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-pass details"),
) -> None:
    """
    Enhance a document structure for accessible reflowable output.
    
    Fills missing alt text, assigns semantic roles to text blocks, and
    builds reading orders for pages that have none. Writes the enhanced
    structure as JSON and prints an accessibility summary.
    
    Examples:
        docaccess enhance run book.json
        docaccess enhance run book.json --output out/book.json --repair-reading-order
    """
    try:
        settings = Settings.from_toml(config_path)
    except Exception as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        raise typer.Exit(1)
    
    configure_logging(settings.logging.level_number, verbose=verbose or settings.logging.verbose)
    
    job_id = job_id or str(uuid.uuid4())
    set_job_id(job_id)
    
    options = settings.to_options()
    if repair_reading_order:
        options.repair_incomplete_reading_order = True
    
    store = JsonDocumentStoreAdapter()
    output_path = output or default_output_path(source)
    
    try:
        structure = store.load(source)
        structure = enhance_accessibility(structure, options=options, job_id=job_id)
        store.save(structure, output_path)
    except (DocumentLoadError, InvalidDocumentStructure) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error writing {output_path}: {e}[/red]")
        raise typer.Exit(1)
    
    logger.info(f"Enhanced document written to {output_path}", extra={"job_id": job_id})
    
    display_report(audit_accessibility(structure))
    console.print(f"\n[green]✓ Enhanced document written to {output_path}[/green]")
