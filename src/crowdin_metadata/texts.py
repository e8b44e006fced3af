"""Localized notification texts."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from .utils.config_loader import load_config

DEFAULT_TEXTS_PATH = Path(__file__).parent / "assets" / "texts.yaml"


class InfoTexts(BaseModel):
    loading_projects: str
    loading_branches: str
    loading_languages: str
    loading_files: str
    loading_strings: str


class WarningTexts(BaseModel):
    select_document: str
    select_project: str
    no_projects: str
    no_strings: str


class ErrorTexts(BaseModel):
    api: str
    unexpected: str


class Notifications(BaseModel):
    info: InfoTexts
    warning: WarningTexts
    error: ErrorTexts


class TextBundle(BaseModel):
    """Notification messages keyed by category and event."""

    notifications: Notifications


@lru_cache(maxsize=None)
def _load_texts(path: Path) -> TextBundle:
    return TextBundle(**load_config(path))


def load_texts(path: Optional[str | Path] = None) -> TextBundle:
    """Load a text bundle, defaulting to the packaged English texts.

    Bundles are parsed once per path.
    """
    return _load_texts(Path(path or DEFAULT_TEXTS_PATH).expanduser().resolve())
