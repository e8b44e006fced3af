"""Main CLI entry point for Crowdin metadata."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import CrowdinConfig
from ..utils.logging import setup_logging
from .commands import select, show
from .state import CLIState, document_from_option

# Create main app
app = typer.Typer(
    name="crowdin-metadata",
    help="Browse Crowdin projects, branches, languages, files and strings",
    add_completion=False,
)

console = Console()

# Add command groups
app.add_typer(show.app, name="show", help="List Crowdin metadata for a document")
app.add_typer(select.app, name="select", help="Select project and branch for a document")


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML config file (default: ~/.crowdin-metadata/config.yaml)",
    ),
    document: Optional[str] = typer.Option(
        None,
        "--document",
        "-d",
        help="Design document the selection belongs to",
    ),
    settings_file: Optional[Path] = typer.Option(
        None,
        "--settings-file",
        help="YAML file holding per-document selections",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of tables",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING...)",
    ),
):
    """Crowdin metadata for design documents."""
    try:
        config = CrowdinConfig.load(config_path)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if settings_file is not None:
        config.settings_file = str(settings_file)

    setup_logging(level=log_level or config.log_level)

    ctx.obj = CLIState(
        config=config,
        document=document_from_option(document),
        as_json=as_json,
    )

    if ctx.invoked_subcommand == "show":
        errors = config.validate_config()
        if errors:
            for error in errors:
                console.print(f"[red]{error}[/red]")
            raise typer.Exit(1)


@app.command()
def version():
    """Show version information."""
    from .. import __version__

    console.print(f"crowdin-metadata version {__version__}")


if __name__ == "__main__":
    app()
