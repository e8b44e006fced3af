from __future__ import annotations

from typing import Any, Optional

import pytest

from crowdin_metadata.constants import BRANCH_ID, PROJECT_ID
from crowdin_metadata.fetcher import MetadataFetcher
from crowdin_metadata.host import Document, MemoryNotifier, StaticDocumentProvider


def wrap(*items: dict) -> dict:
    """Shape records like a fetch-all list response."""
    return {"data": [{"data": item} for item in items], "pagination": {"offset": 0, "limit": len(items)}}


class _FakeSettings:
    def __init__(self) -> None:
        self.values: dict[tuple[str, str], str] = {}

    def get(self, document: Document, key: str) -> Optional[str]:
        return self.values.get((document.id, key))

    def set(self, document: Document, key: str, value: Optional[object]) -> None:
        if value is None:
            self.values.pop((document.id, key), None)
        else:
            self.values[(document.id, key)] = str(value)


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple, dict]] = []
        self.responses: dict[str, Any] = {}

    async def _respond(self, name: str, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((name, args, kwargs))
        response = self.responses.get(name, wrap())
        if isinstance(response, BaseException):
            raise response
        return response


class _FakeProjectsGroupsApi(_Recorder):
    async def list_projects(self, **kwargs: Any) -> Any:
        return await self._respond("list_projects", **kwargs)

    async def get_project(self, project_id: int) -> Any:
        return await self._respond("get_project", project_id)


class _FakeSourceFilesApi(_Recorder):
    async def list_project_branches(self, project_id: int, **kwargs: Any) -> Any:
        return await self._respond("list_project_branches", project_id, **kwargs)

    async def list_project_files(self, project_id: int, **kwargs: Any) -> Any:
        return await self._respond("list_project_files", project_id, **kwargs)


class _FakeLanguagesApi(_Recorder):
    async def list_supported_languages(self, **kwargs: Any) -> Any:
        return await self._respond("list_supported_languages", **kwargs)


class _FakeSourceStringsApi(_Recorder):
    async def list_project_strings(self, project_id: int, **kwargs: Any) -> Any:
        return await self._respond("list_project_strings", project_id, **kwargs)


class _FakeClient:
    def __init__(self) -> None:
        self.projects_groups_api = _FakeProjectsGroupsApi()
        self.source_files_api = _FakeSourceFilesApi()
        self.languages_api = _FakeLanguagesApi()
        self.source_strings_api = _FakeSourceStringsApi()

    @property
    def calls(self) -> list[tuple[str, tuple, dict]]:
        return (
            self.projects_groups_api.calls
            + self.source_files_api.calls
            + self.languages_api.calls
            + self.source_strings_api.calls
        )


@pytest.fixture
def document() -> Document:
    return Document(id="/designs/app.sketch", name="app.sketch")


@pytest.fixture
def client() -> _FakeClient:
    return _FakeClient()


@pytest.fixture
def settings() -> _FakeSettings:
    return _FakeSettings()


@pytest.fixture
def notifier() -> MemoryNotifier:
    return MemoryNotifier()


@pytest.fixture
def documents(document: Document) -> StaticDocumentProvider:
    return StaticDocumentProvider(document)


@pytest.fixture
def fetcher(client, documents, settings, notifier) -> MetadataFetcher:
    return MetadataFetcher(client=client, documents=documents, settings=settings, notifier=notifier)


@pytest.fixture
def select(settings: _FakeSettings, document: Document):
    def _select(project_id: Optional[object] = None, branch_id: Optional[object] = None) -> None:
        settings.set(document, PROJECT_ID, project_id)
        settings.set(document, BRANCH_ID, branch_id)

    return _select
