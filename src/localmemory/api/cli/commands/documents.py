"""Documents command - Inspect and manage stored documents."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from localmemory.application.document_service import DocumentService
from localmemory.application.infrastructure_builder import InfrastructureBuilder
from localmemory.application.settings import load_settings
from localmemory.core.domain.errors import LocalMemoryError

app = typer.Typer(help="Document management")
console = Console()


def _service(ctx: typer.Context) -> DocumentService:
    global_opts = ctx.obj or {}
    try:
        settings = load_settings(global_opts.get("config_path"))
    except LocalMemoryError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(1) from exc
    return InfrastructureBuilder(settings).build_document_service()


@app.command("list")
def list_documents(
    ctx: typer.Context,
    page: int = typer.Option(1, "--page", help="Page number"),
    limit: int = typer.Option(10, "--limit", "-n", help="Documents per page"),
    tags: list[str] | None = typer.Option(
        None, "--tag", "-t", help="Container tag filter (repeatable)"
    ),
):
    """List documents, newest first."""
    service = _service(ctx)

    try:
        result = asyncio.run(service.query(page=page, limit=limit, container_tags=tags))
    except LocalMemoryError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(1) from exc

    table = Table(title="Documents")
    table.add_column("ID", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Title", style="white")
    table.add_column("Tags", style="magenta")
    table.add_column("Created", style="dim")

    for doc in result.items:
        table.add_row(
            doc.id,
            doc.type.value,
            doc.title,
            ", ".join(doc.container_tags),
            doc.created_at,
        )

    console.print(table)
    pagination = result.pagination
    console.print(
        f"Page {pagination.current_page}/{pagination.total_pages} "
        f"({pagination.total_items} documents)"
    )


@app.command("show")
def show_document(
    ctx: typer.Context,
    document_id: str = typer.Argument(..., help="Document ID"),
):
    """Show a document as JSON."""
    service = _service(ctx)
    try:
        document = asyncio.run(service.get(document_id))
    except LocalMemoryError as exc:
        console.print(f"[red]Document '{document_id}' not found[/red]")
        raise typer.Exit(1) from exc
    console.print_json(data=document.to_dict())


@app.command("delete")
def delete_document(
    ctx: typer.Context,
    document_id: str = typer.Argument(..., help="Document ID"),
):
    """Delete a document record (uploaded files are kept)."""
    service = _service(ctx)
    try:
        asyncio.run(service.delete(document_id))
    except LocalMemoryError as exc:
        console.print(f"[red]Document '{document_id}' not found[/red]")
        raise typer.Exit(1) from exc
    console.print(f"[green]Deleted {document_id}[/green]")
