"""Audit the accessibility state of a document structure."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from src.application.dto.accessibility import AccessibilityReport
from src.application.use_cases.audit_accessibility import audit_accessibility
from src.domain.errors import DocumentLoadError, InvalidDocumentStructure
from src.infrastructure.adapters.json_document_store import JsonDocumentStoreAdapter
from src.infrastructure.config.settings import Settings
from src.infrastructure.logging import configure_logging

app = typer.Typer(help="Audit document accessibility metadata")
console = Console()
logger = logging.getLogger(__name__)


@app.command()
def run(
    source: Path = typer.Argument(..., help="Path to a document structure JSON file"),
    config_path: str | None = typer.Option(None, "--config", help="Path to docaccess.toml configuration file"),
    show_pages: bool = typer.Option(False, "--pages", help="Show per-page reading order findings"),
) -> None:
    """
    Report missing alt text, images awaiting review and reading order gaps.
    
    Exits with status 1 when the document is not ready for rendering
    (an image has no alt text or a page has no reading order).
    
    Examples:
        docaccess audit run book.accessible.json
        docaccess audit run book.json --pages
    """
    try:
        settings = Settings.from_toml(config_path)
    except Exception as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        raise typer.Exit(1)
    
    configure_logging(settings.logging.level_number, verbose=settings.logging.verbose)
    
    try:
        structure = JsonDocumentStoreAdapter().load(source)
        report = audit_accessibility(structure)
    except (DocumentLoadError, InvalidDocumentStructure) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    
    display_report(report, show_pages=show_pages)
    
    if report.ready_for_rendering:
        console.print("\n[green]✓ Document is ready for rendering[/green]")
    else:
        console.print("\n[red]✗ Document is missing alt text or reading order. Run 'docaccess enhance run' first.[/red]")
        raise typer.Exit(1)


def display_report(report: AccessibilityReport, show_pages: bool = False) -> None:
    """Display an accessibility report as rich tables."""
    table = Table(title="Accessibility Report", show_header=True, header_style="bold magenta")
    table.add_column("Check", style="cyan", no_wrap=True)
    table.add_column("Count", justify="right")
    
    def _count(value: int, bad_style: str = "red") -> str:
        return f"[{bad_style}]{value}[/{bad_style}]" if value else f"[green]{value}[/green]"
    
    table.add_row("Pages", str(report.pages))
    table.add_row("Text blocks", str(report.text_blocks))
    table.add_row("Images", str(report.images))
    table.add_row("Images missing alt text", _count(report.images_missing_alt_text))
    table.add_row("Images awaiting review", _count(report.images_flagged_for_review, "yellow"))
    table.add_row("Blocks without role", _count(report.blocks_without_role, "yellow"))
    table.add_row("Pages without reading order", _count(report.pages_without_reading_order))
    table.add_row("Pages with incomplete reading order", _count(report.pages_with_incomplete_reading_order, "yellow"))
    
    console.print()
    console.print(table)
    
    if show_pages and report.page_audits:
        pages_table = Table(title="Reading Order by Page", show_header=True, header_style="bold magenta")
        pages_table.add_column("Page", justify="right")
        pages_table.add_column("Blocks", justify="right")
        pages_table.add_column("Status", justify="center")
        pages_table.add_column("Missing ids", style="white")
        pages_table.add_column("Unknown ids", style="white")
        
        for audit in report.page_audits:
            if not audit.has_reading_order:
                status = "[red][NONE][/red]"
            elif audit.reading_order_complete:
                status = "[green][OK][/green]"
            else:
                status = "[yellow][PARTIAL][/yellow]"
            page_label = audit.page_number if audit.page_number is not None else audit.page_index + 1
            pages_table.add_row(
                str(page_label),
                str(audit.text_blocks),
                status,
                ", ".join(audit.missing_block_ids) or "-",
                ", ".join(audit.unknown_block_ids) or "-",
            )
        
        console.print()
        console.print(pages_table)
    
    for warning in report.warnings:
        console.print(f"[yellow]⚠ {warning}[/yellow]")
