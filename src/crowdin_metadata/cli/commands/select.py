"""Select commands storing the project/branch for a document."""

import typer
from rich.console import Console

from ...constants import BRANCH_ID, PROJECT_ID
from ..state import CLIState

app = typer.Typer()
console = Console()


@app.command("project")
def select_project(
    ctx: typer.Context,
    project_id: int = typer.Argument(..., help="Crowdin project ID"),
):
    """Use a project for the document. Clears the selected branch."""
    state: CLIState = ctx.obj
    document = state.require_document()
    settings = state.settings

    settings.set(document, PROJECT_ID, project_id)
    settings.set(document, BRANCH_ID, None)
    console.print(f"Project [bold]{project_id}[/bold] selected for {document.name}")


@app.command("branch")
def select_branch(
    ctx: typer.Context,
    branch_id: int = typer.Argument(..., help="Branch ID, 0 to clear"),
):
    """Use a branch for the document."""
    state: CLIState = ctx.obj
    document = state.require_document()

    if branch_id <= 0:
        state.settings.set(document, BRANCH_ID, None)
        console.print(f"Branch cleared for {document.name}")
        return

    state.settings.set(document, BRANCH_ID, branch_id)
    console.print(f"Branch [bold]{branch_id}[/bold] selected for {document.name}")
