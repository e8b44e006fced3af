"""Utility modules for Crowdin metadata retrieval."""

from .config_loader import BaseConfig, get_project_root, load_config, merge_configs
from .logging import console, get_logger, setup_logging

__all__ = [
    "BaseConfig",
    "load_config",
    "merge_configs",
    "get_project_root",
    "setup_logging",
    "get_logger",
    "console",
]
