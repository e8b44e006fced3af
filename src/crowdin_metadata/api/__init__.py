"""Crowdin REST API access."""

from .client import (
    CrowdinClient,
    LanguagesApi,
    ProjectsGroupsApi,
    SourceFilesApi,
    SourceStringsApi,
)
from .http import RateLimitedClient

__all__ = [
    "RateLimitedClient",
    "CrowdinClient",
    "ProjectsGroupsApi",
    "SourceFilesApi",
    "LanguagesApi",
    "SourceStringsApi",
]
