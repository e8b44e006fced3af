from __future__ import annotations

from typing import Any, Optional

import pytest

from crowdin_metadata.api.client import CrowdinClient
from crowdin_metadata.api.http import _encode_params
from crowdin_metadata.errors import CrowdinAPIError


class _FakeTransport:
    """Serves a list of items with offset/limit paging."""

    def __init__(self, items: list[dict], max_limit: int = 500) -> None:
        self.items = items
        self.max_limit = max_limit
        self.requests: list[tuple[str, dict]] = []

    async def get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        params = dict(params or {})
        self.requests.append((url, params))
        if url.endswith("/projects/5"):
            return {"data": {"id": 5, "targetLanguageIds": ["de"]}}
        offset = params.get("offset") or 0
        limit = min(params.get("limit") or 25, self.max_limit)
        page = self.items[offset:offset + limit]
        return {"data": [{"data": item} for item in page], "pagination": {"offset": offset, "limit": limit}}


def _items(n: int) -> list[dict]:
    return [{"id": i, "name": f"Project {i}"} for i in range(1, n + 1)]


@pytest.mark.asyncio
async def test_fetch_all_concatenates_pages_until_short_page() -> None:
    transport = _FakeTransport(_items(7))
    client = CrowdinClient(transport, "https://api.crowdin.com/api/v2/", page_size=3)

    response = await client.projects_groups_api.list_projects()

    assert [r["data"]["id"] for r in response["data"]] == list(range(1, 8))
    assert [p["offset"] for _, p in transport.requests] == [0, 3, 6]
    assert all(url == "https://api.crowdin.com/api/v2/projects" for url, _ in transport.requests)


@pytest.mark.asyncio
async def test_fetch_all_requests_one_extra_page_on_exact_multiple() -> None:
    transport = _FakeTransport(_items(6))
    client = CrowdinClient(transport, page_size=3)

    response = await client.languages_api.list_supported_languages()

    assert len(response["data"]) == 6
    assert [p["offset"] for _, p in transport.requests] == [0, 3, 6]


@pytest.mark.asyncio
async def test_single_page_when_fetch_all_disabled() -> None:
    transport = _FakeTransport(_items(7))
    client = CrowdinClient(transport, page_size=3)

    response = await client.projects_groups_api.list_projects(fetch_all=False, limit=2, offset=4)

    assert [r["data"]["id"] for r in response["data"]] == [5, 6]
    assert len(transport.requests) == 1


@pytest.mark.asyncio
async def test_list_project_files_passes_branch_and_recursion() -> None:
    transport = _FakeTransport([])
    client = CrowdinClient(transport)

    await client.source_files_api.list_project_files(5, branch_id=7, recursion=True)

    url, params = transport.requests[0]
    assert url == "https://api.crowdin.com/api/v2/projects/5/files"
    assert params["branchId"] == 7
    assert params["recursion"] is True
    assert params["limit"] == 500


@pytest.mark.asyncio
async def test_get_project_is_not_paginated() -> None:
    transport = _FakeTransport([])
    client = CrowdinClient(transport)

    project = await client.projects_groups_api.get_project(5)

    assert project["data"]["targetLanguageIds"] == ["de"]
    assert transport.requests == [("https://api.crowdin.com/api/v2/projects/5", {})]


def test_encode_params_drops_unset_and_encodes_booleans() -> None:
    assert _encode_params({"branchId": None, "recursion": True, "limit": 500, "x": False}) == {
        "recursion": "1",
        "limit": "500",
        "x": "0",
    }
    assert _encode_params(None) == {}


def test_api_error_from_error_body() -> None:
    error = CrowdinAPIError.from_response(404, {"error": {"code": 404, "message": "Project Not Found"}})

    assert error.status == 404
    assert error.code == 404
    assert error.message == "Project Not Found"
    assert str(error) == "Project Not Found (HTTP 404)"


def test_api_error_from_validation_body() -> None:
    body = {
        "errors": [
            {"error": {"key": "branchId", "errors": [{"code": "isEmpty", "message": "Value is required"}]}}
        ]
    }

    error = CrowdinAPIError.from_response(400, body)

    assert error.message == "branchId: Value is required"
    assert error.code == "validation"


def test_api_error_from_unknown_body() -> None:
    assert CrowdinAPIError.from_response(502, None).message == "Request failed with status 502"
    assert CrowdinAPIError.from_response(502, "Bad gateway").message == "Bad gateway"
