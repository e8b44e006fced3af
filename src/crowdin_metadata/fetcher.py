"""Retrieve Crowdin project metadata for the selected document.

Every public operation of MetadataFetcher resolves to a usable value: errors
are reported through the error handler and turned into an empty result, so
callers treat emptiness as the failure signal.
"""

import asyncio
from typing import Any, Iterable, Optional

from .api.client import CrowdinClient
from .constants import BRANCH_ID, NO_BRANCH, PROJECT_ID
from .errors import ErrorHandler, MetadataWarning
from .host import Document, DocumentProvider, Notifier, SettingsStore
from .models import (
    Branch,
    BranchesResult,
    File,
    Language,
    Project,
    ProjectsResult,
    SourceString,
    parse_text,
    resolve_text,
)
from .texts import TextBundle, load_texts
from .utils.logging import get_logger

logger = get_logger(__name__)


def parse_id(value: Optional[object]) -> Optional[int]:
    """Parse a stored identifier, returning None if absent or not an integer."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def is_set(id: Optional[int]) -> bool:
    """True for a real (positive) identifier."""
    return id is not None and id > 0


def convert_crowdin_strings_to_strings(crowdin_strings: Iterable[dict]) -> list[SourceString]:
    """Map API source string records to SourceStrings.

    Plural texts are resolved to a single form; records whose text resolves
    to an empty string are dropped.
    """
    strings = []
    for record in crowdin_strings:
        data = record.get("data", {})
        text = resolve_text(parse_text(data.get("text")))
        if not text:
            continue
        strings.append(
            SourceString(
                id=data.get("id"),
                file_id=data.get("fileId"),
                identifier=data.get("identifier"),
                context=data.get("context"),
                text=text,
            )
        )
    return strings


def _records(response: dict) -> list[dict[str, Any]]:
    return [item["data"] for item in response.get("data", [])]


class MetadataFetcher:
    """Loads projects, branches, languages, files and strings for the UI."""

    def __init__(
        self,
        client: CrowdinClient,
        documents: DocumentProvider,
        settings: SettingsStore,
        notifier: Notifier,
        texts: Optional[TextBundle] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        """Initialize the fetcher.

        Args:
            client: Crowdin API client
            documents: Provides the currently selected document
            settings: Per-document settings holding project/branch selection
            notifier: Receives progress notifications
            texts: Notification texts (defaults to the packaged bundle)
            error_handler: Reports caught errors (defaults to one using notifier)
        """
        self.client = client
        self.documents = documents
        self.settings = settings
        self.notifier = notifier
        self.texts = texts or load_texts()
        self.error_handler = error_handler or ErrorHandler(notifier, self.texts)

    @property
    def _info(self):
        return self.texts.notifications.info

    @property
    def _warning(self):
        return self.texts.notifications.warning

    def _require_document(self) -> Document:
        document = self.documents.get_selected_document()
        if document is None:
            raise MetadataWarning(self._warning.select_document)
        return document

    def _require_project_id(self, document: Document) -> int:
        project_id = parse_id(self.settings.get(document, PROJECT_ID))
        if project_id is None:
            raise MetadataWarning(self._warning.select_project)
        return project_id

    def _selected_branch_id(self, document: Document) -> Optional[int]:
        """Stored branch id if it is a real branch, otherwise None."""
        branch_id = parse_id(self.settings.get(document, BRANCH_ID))
        return branch_id if is_set(branch_id) else None

    async def get_projects(self) -> ProjectsResult:
        try:
            document = self._require_document()
            self.notifier.message(self._info.loading_projects)

            response = await self.client.projects_groups_api.list_projects()
            projects = [Project(id=p["id"], name=p["name"]) for p in _records(response)]
            if not projects:
                raise MetadataWarning(self._warning.no_projects)

            project_id = parse_id(self.settings.get(document, PROJECT_ID))
            if project_id is None:
                project_id = projects[0].id

            return ProjectsResult(projects=projects, selected_project_id=project_id)
        except Exception as error:
            self.error_handler.handle(error)
            return ProjectsResult(projects=[])

    async def get_branches(self) -> BranchesResult:
        try:
            document = self._require_document()
            project_id = self._require_project_id(document)
            self.notifier.message(self._info.loading_branches)

            response = await self.client.source_files_api.list_project_branches(project_id)
            branches = [Branch(id=b["id"], name=b["name"]) for b in _records(response)]

            branch_id = parse_id(self.settings.get(document, BRANCH_ID))
            if branch_id not in {b.id for b in branches}:
                branch_id = NO_BRANCH

            return BranchesResult(selected_branch_id=branch_id, branches=branches)
        except Exception as error:
            self.error_handler.handle(error)
            return BranchesResult(selected_branch_id=NO_BRANCH, branches=[])

    async def get_languages(self) -> list[Language]:
        try:
            document = self._require_document()
            project_id = self._require_project_id(document)
            self.notifier.message(self._info.loading_languages)

            tasks = [
                asyncio.ensure_future(self.client.languages_api.list_supported_languages()),
                asyncio.ensure_future(self.client.projects_groups_api.get_project(project_id)),
            ]
            try:
                languages, project = await asyncio.gather(*tasks)
            except BaseException:
                # Don't leave the other request running on a closing session
                for task in tasks:
                    task.cancel()
                raise
            target_ids = set(project["data"].get("targetLanguageIds") or [])

            return [
                Language(id=lang["id"], name=lang["name"])
                for lang in _records(languages)
                if lang["id"] in target_ids
            ]
        except Exception as error:
            self.error_handler.handle(error)
            return []

    async def get_files(self) -> list[File]:
        try:
            document = self._require_document()
            project_id = self._require_project_id(document)
            branch_id = self._selected_branch_id(document)
            self.notifier.message(self._info.loading_files)

            response = await self.client.source_files_api.list_project_files(
                project_id, branch_id=branch_id
            )
            return [
                File(id=f["id"], name=f["path"], type=f["type"])
                for f in _records(response)
            ]
        except Exception as error:
            self.error_handler.handle(error)
            return []

    async def get_strings(self) -> list[SourceString]:
        try:
            document = self._require_document()
            project_id = self._require_project_id(document)
            self.notifier.message(self._info.loading_strings)

            strings = await self.fetch_strings(project_id)
            if not strings:
                raise MetadataWarning(self._warning.no_strings)
            return strings
        except Exception as error:
            self.error_handler.handle(error)
            return []

    async def fetch_strings(self, project_id: int) -> list[SourceString]:
        """Fetch source strings of a project, limited to the selected branch.

        Unlike the get_* operations this raises on API errors.
        """
        response = await self.client.source_strings_api.list_project_strings(project_id)
        strings = convert_crowdin_strings_to_strings(response.get("data", []))

        document = self.documents.get_selected_document()
        branch_id = self._selected_branch_id(document) if document else None
        if branch_id is None:
            return strings

        files = await self.client.source_files_api.list_project_files(
            project_id, branch_id=branch_id, recursion=True
        )
        file_ids = {f["id"] for f in _records(files)}
        logger.debug(f"Branch {branch_id} has {len(file_ids)} files")
        return [s for s in strings if s.file_id in file_ids]
