"""localmemory CLI entry point."""

import typer
from rich.console import Console

from localmemory.api.cli.commands import config, documents
from localmemory.application.settings import load_settings
from localmemory.core.domain.errors import ConfigError

app = typer.Typer(
    name="localmemory",
    help="localmemory - Offline document store for the memory service API",
    add_completion=True,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(documents.app, name="documents", help="Document management")
app.add_typer(config.app, name="config", help="Configuration management")


@app.callback()
def main(
    ctx: typer.Context,
    config_path: str | None = typer.Option(
        None, "--config", "-c", help="Path to a YAML settings file"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """localmemory CLI."""
    from localmemory.api.server import configure_logging

    configure_logging("DEBUG" if debug else "WARNING")
    # Store global options in context for subcommands
    ctx.obj = {"config_path": config_path, "debug": debug}


@app.command()
def serve(
    ctx: typer.Context,
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on"),
):
    """Run the HTTP server."""
    from localmemory.api.server import run

    global_opts = ctx.obj or {}
    try:
        settings = load_settings(global_opts.get("config_path"))
    except ConfigError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(1) from exc

    updates = {}
    if host:
        updates["host"] = host
    if port:
        updates["port"] = port
    if updates:
        settings = settings.model_copy(update=updates)

    console.print(f"[bold blue]Local memory server[/bold blue] on port [cyan]{settings.port}[/cyan]")
    console.print(f"Storing data in [cyan]{settings.memory_dir}[/cyan]")
    run(settings)


@app.command()
def version():
    """Show localmemory version."""
    from localmemory import __version__

    console.print(f"[bold blue]Version:[/bold blue] [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
