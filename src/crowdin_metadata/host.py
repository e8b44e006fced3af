"""Host collaborators: selected document, per-document settings, notifications."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

import yaml
from rich.console import Console

from .utils.config_loader import load_config
from .utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Document:
    """A host document that metadata selections are stored against."""

    id: str
    name: str = ""


class DocumentProvider(Protocol):
    def get_selected_document(self) -> Optional[Document]: ...


class SettingsStore(Protocol):
    def get(self, document: Document, key: str) -> Optional[str]: ...

    def set(self, document: Document, key: str, value: Optional[object]) -> None: ...


class Notifier(Protocol):
    def message(self, text: str) -> None: ...


class StaticDocumentProvider:
    """Always reports the same document (or none) as selected."""

    def __init__(self, document: Optional[Document] = None):
        self.document = document

    def get_selected_document(self) -> Optional[Document]:
        return self.document


class FileSettingsStore:
    """Per-document settings kept in a YAML file.

    Layout::

        <document id>:
          crowdin-project-id: "123"
          crowdin-branch-id: "7"

    Values are always stored and returned as strings.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def _read(self) -> dict[str, dict[str, str]]:
        if not self.path.exists():
            return {}
        data = load_config(self.path.resolve())
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed settings file: {self.path}")
            return {}
        return data

    def get(self, document: Document, key: str) -> Optional[str]:
        value = (self._read().get(document.id) or {}).get(key)
        return None if value is None else str(value)

    def set(self, document: Document, key: str, value: Optional[object]) -> None:
        """Store a value for a document. ``None`` removes the key."""
        data = self._read()
        entry = data.get(document.id) or {}
        if value is None:
            entry.pop(key, None)
        else:
            entry[key] = str(value)

        if entry:
            data[document.id] = entry
        else:
            data.pop(document.id, None)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=True)
        logger.debug(f"Saved {key}={value!r} for document {document.id}")


class ConsoleNotifier:
    """Shows notifications on a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def message(self, text: str) -> None:
        self.console.print(f"[bold blue]»[/bold blue] {text}")


class MemoryNotifier:
    """Collects notifications in memory."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def message(self, text: str) -> None:
        self.messages.append(text)
