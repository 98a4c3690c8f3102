"""Config command - Configuration management."""

import json

import typer
from rich.console import Console

from localmemory.application.settings import load_settings
from localmemory.core.domain.errors import ConfigError

app = typer.Typer(help="Configuration management")
console = Console()


@app.command("show")
def show_config(ctx: typer.Context):
    """Show the effective settings (defaults, file and environment merged)."""
    global_opts = ctx.obj or {}
    try:
        settings = load_settings(global_opts.get("config_path"))
    except ConfigError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(1) from exc

    data = json.loads(settings.model_dump_json())
    data["data_dir"] = str(settings.data_dir)
    data["files_dir"] = str(settings.files_dir)
    console.print_json(data=data)
