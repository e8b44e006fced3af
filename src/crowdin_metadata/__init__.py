"""Crowdin project metadata for design documents.

This package provides:
- An async, rate-limited client for the Crowdin v2 REST API
- Retrieval of projects, branches, languages, files and source strings
  for the currently selected document
- Per-document project/branch selection storage
- A command line interface over the above
"""

__version__ = "1.0.0"

from .fetcher import MetadataFetcher, convert_crowdin_strings_to_strings

__all__ = ["MetadataFetcher", "convert_crowdin_strings_to_strings", "__version__"]
