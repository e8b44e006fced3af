"""Crowdin API v2 client.

Only the read endpoints needed for project metadata are covered:

- Projects: GET /projects, GET /projects/{projectId}
- Branches: GET /projects/{projectId}/branches
- Files: GET /projects/{projectId}/files
- Languages: GET /languages
- Source strings: GET /projects/{projectId}/strings

List endpoints answer ``{"data": [{"data": {...}}, ...], "pagination": {...}}``
and are paginated with ``offset``/``limit`` (at most 500 per page).
"""

from typing import Any, Optional, Protocol

from ..constants import CROWDIN_API_URL, MAX_PAGE_SIZE
from ..utils.logging import get_logger

logger = get_logger(__name__)


class JSONTransport(Protocol):
    async def get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any: ...


class BaseApi:
    """Shared request helpers for the endpoint groups."""

    def __init__(self, http: JSONTransport, base_url: str, page_size: int = MAX_PAGE_SIZE):
        self.http = http
        self.base_url = base_url.rstrip("/")
        self.page_size = max(1, min(page_size, MAX_PAGE_SIZE))

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> dict:
        return await self.http.get_json(self._url(path), params)

    async def _list(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
        fetch_all: bool = True,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> dict:
        """Fetch a list endpoint.

        With ``fetch_all`` every page is requested until a short page comes
        back, and the items are returned as a single response.
        """
        params = dict(params or {})

        if not fetch_all:
            params["limit"] = limit
            params["offset"] = offset
            return await self._get(path, params)

        items: list[dict] = []
        page_offset = 0

        while True:
            params["limit"] = self.page_size
            params["offset"] = page_offset
            response = await self._get(path, params) or {}
            page = response.get("data") or []
            items.extend(page)

            logger.debug(
                f"Fetched {path} offset {page_offset}: {len(page)} items "
                f"(total: {len(items)})"
            )

            if len(page) < self.page_size:
                break
            page_offset += self.page_size

        return {
            "data": items,
            "pagination": {"offset": 0, "limit": len(items)},
        }


class ProjectsGroupsApi(BaseApi):
    async def list_projects(
        self,
        group_id: Optional[int] = None,
        has_manager_access: Optional[bool] = None,
        fetch_all: bool = True,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> dict:
        params = {"groupId": group_id, "hasManagerAccess": has_manager_access}
        return await self._list("projects", params, fetch_all, limit, offset)

    async def get_project(self, project_id: int | str) -> dict:
        return await self._get(f"projects/{project_id}")


class SourceFilesApi(BaseApi):
    async def list_project_branches(
        self,
        project_id: int | str,
        name: Optional[str] = None,
        fetch_all: bool = True,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> dict:
        params = {"name": name}
        return await self._list(
            f"projects/{project_id}/branches", params, fetch_all, limit, offset
        )

    async def list_project_files(
        self,
        project_id: int | str,
        branch_id: Optional[int | str] = None,
        directory_id: Optional[int | str] = None,
        recursion: bool = False,
        filter: Optional[str] = None,
        fetch_all: bool = True,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> dict:
        """List project files.

        Args:
            project_id: Project identifier
            branch_id: Only files of this branch
            directory_id: Only files of this directory
            recursion: Include files of nested directories/branches
            filter: Filter files by name
        """
        params = {
            "branchId": branch_id,
            "directoryId": directory_id,
            "recursion": recursion or None,
            "filter": filter,
        }
        return await self._list(
            f"projects/{project_id}/files", params, fetch_all, limit, offset
        )


class LanguagesApi(BaseApi):
    async def list_supported_languages(
        self,
        fetch_all: bool = True,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> dict:
        return await self._list("languages", None, fetch_all, limit, offset)


class SourceStringsApi(BaseApi):
    async def list_project_strings(
        self,
        project_id: int | str,
        file_id: Optional[int] = None,
        branch_id: Optional[int] = None,
        filter: Optional[str] = None,
        fetch_all: bool = True,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> dict:
        params = {"fileId": file_id, "branchId": branch_id, "filter": filter}
        return await self._list(
            f"projects/{project_id}/strings", params, fetch_all, limit, offset
        )


class CrowdinClient:
    """Groups the Crowdin endpoint APIs over one HTTP transport."""

    def __init__(
        self,
        http: JSONTransport,
        base_url: str = CROWDIN_API_URL,
        page_size: int = MAX_PAGE_SIZE,
    ):
        """Initialize the API client.

        Args:
            http: Transport returning decoded JSON (usually a RateLimitedClient)
            base_url: API root, e.g. https://api.crowdin.com/api/v2
            page_size: Items per page when fetching all pages
        """
        self.http = http
        self.base_url = base_url
        self.projects_groups_api = ProjectsGroupsApi(http, base_url, page_size)
        self.source_files_api = SourceFilesApi(http, base_url, page_size)
        self.languages_api = LanguagesApi(http, base_url, page_size)
        self.source_strings_api = SourceStringsApi(http, base_url, page_size)
