"""Shared CLI state and wiring of the fetcher's collaborators."""

from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator, Optional

import typer

from ..api import CrowdinClient, RateLimitedClient
from ..config import CrowdinConfig
from ..fetcher import MetadataFetcher
from ..host import ConsoleNotifier, Document, FileSettingsStore, StaticDocumentProvider
from ..utils.logging import console


@dataclass
class CLIState:
    """Options given before the command name."""

    config: CrowdinConfig
    document: Optional[Document] = None
    as_json: bool = False

    @property
    def settings(self) -> FileSettingsStore:
        return FileSettingsStore(self.config.settings_file)

    def require_document(self) -> Document:
        if self.document is None:
            console.print("[red]No document given, use --document[/red]")
            raise typer.Exit(1)
        return self.document


def document_from_option(value: Optional[str]) -> Optional[Document]:
    """Documents are identified by their resolved path."""
    if not value:
        return None
    path = Path(value).expanduser().resolve()
    return Document(id=str(path), name=path.name)


@asynccontextmanager
async def open_fetcher(state: CLIState) -> AsyncIterator[MetadataFetcher]:
    """Yield a fetcher bound to an open HTTP session."""
    config = state.config
    async with RateLimitedClient(
        token=config.token,
        requests_per_minute=config.requests_per_minute,
        timeout=config.timeout,
        max_retries=config.max_retries,
    ) as http:
        client = CrowdinClient(http, config.base_url, config.page_size)
        yield MetadataFetcher(
            client=client,
            documents=StaticDocumentProvider(state.document),
            settings=state.settings,
            notifier=ConsoleNotifier(console),
        )
