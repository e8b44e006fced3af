"""Show commands listing Crowdin metadata for a document."""

import asyncio
import json
from typing import Any, Callable

import typer
from rich.console import Console
from rich.table import Table

from ..state import CLIState, open_fetcher

app = typer.Typer()
console = Console()


def _run(state: CLIState, operation: Callable) -> Any:
    async def run():
        async with open_fetcher(state) as fetcher:
            return await operation(fetcher)

    return asyncio.run(run())


def _print_json(data: Any) -> None:
    console.print_json(json.dumps(data, ensure_ascii=False))


def _table(title: str, columns: list[str], rows: list[list[Any]], selected: Any = None) -> Table:
    table = Table(title=title)
    for column in columns:
        table.add_column(column)
    for row in rows:
        style = "bold green" if selected is not None and row[0] == selected else None
        table.add_row(*(str(v) if v is not None else "" for v in row), style=style)
    return table


@app.command("projects")
def show_projects(ctx: typer.Context):
    """List projects; the selected one is highlighted."""
    state: CLIState = ctx.obj
    result = _run(state, lambda f: f.get_projects())

    if state.as_json:
        _print_json(result.to_dict())
        return

    console.print(
        _table(
            "Projects",
            ["ID", "Name"],
            [[p.id, p.name] for p in result.projects],
            selected=result.selected_project_id,
        )
    )


@app.command("branches")
def show_branches(ctx: typer.Context):
    """List branches of the selected project."""
    state: CLIState = ctx.obj
    result = _run(state, lambda f: f.get_branches())

    if state.as_json:
        _print_json(result.to_dict())
        return

    console.print(
        _table(
            "Branches",
            ["ID", "Name"],
            [[b.id, b.name] for b in result.branches],
            selected=result.selected_branch_id,
        )
    )


@app.command("languages")
def show_languages(ctx: typer.Context):
    """List target languages of the selected project."""
    state: CLIState = ctx.obj
    languages = _run(state, lambda f: f.get_languages())

    if state.as_json:
        _print_json([lang.to_dict() for lang in languages])
        return

    console.print(_table("Languages", ["ID", "Name"], [[lang.id, lang.name] for lang in languages]))


@app.command("files")
def show_files(ctx: typer.Context):
    """List files of the selected project (and branch)."""
    state: CLIState = ctx.obj
    files = _run(state, lambda f: f.get_files())

    if state.as_json:
        _print_json([f.to_dict() for f in files])
        return

    console.print(_table("Files", ["ID", "Path", "Type"], [[f.id, f.name, f.type] for f in files]))


@app.command("strings")
def show_strings(
    ctx: typer.Context,
    limit: int = typer.Option(
        50,
        "--limit",
        "-l",
        help="Maximum strings to print in table mode",
    ),
):
    """List source strings of the selected project (and branch)."""
    state: CLIState = ctx.obj
    strings = _run(state, lambda f: f.get_strings())

    if state.as_json:
        _print_json([s.to_dict() for s in strings])
        return

    console.print(
        _table(
            "Strings",
            ["ID", "File", "Identifier", "Text"],
            [[s.id, s.file_id, s.identifier, s.text] for s in strings[:limit]],
        )
    )
    if len(strings) > limit:
        console.print(f"  ... and {len(strings) - limit} more")
