"""View models returned to the UI layer."""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .constants import NO_BRANCH, PLURAL_FORMS


@dataclass(frozen=True)
class PlainText:
    """Source string text without plural forms."""

    value: str


@dataclass(frozen=True)
class PluralText:
    """Source string text keyed by plural form (one, few, other...)."""

    forms: dict[str, str]


Text = Union[PlainText, PluralText]


def parse_text(raw: Any) -> Optional[Text]:
    """Build a Text variant from the ``text`` field of an API string record.

    Returns None when the field is missing, null or of any other type,
    which resolves to an empty string.
    """
    if isinstance(raw, str):
        return PlainText(raw)
    if isinstance(raw, dict):
        return PluralText({k: v for k, v in raw.items() if isinstance(v, str)})
    return None


def resolve_text(text: Optional[Text]) -> str:
    """Resolve a Text variant down to a single display string.

    Plural texts yield the first non-empty form in PLURAL_FORMS order,
    or an empty string if none is present.
    """
    if text is None:
        return ""
    if isinstance(text, PlainText):
        return text.value
    for form in PLURAL_FORMS:
        value = text.forms.get(form)
        if value:
            return value
    return ""


@dataclass
class Project:
    """Crowdin project."""

    id: int
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass
class Branch:
    """Project branch."""

    id: int
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass
class Language:
    """Target language of a project."""

    id: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass
class File:
    """Source file. ``name`` holds the file path within the project."""

    id: int
    name: str
    type: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "type": self.type}


@dataclass
class SourceString:
    """Source string with its text resolved to one display value."""

    id: int
    file_id: Optional[int]
    identifier: Optional[str]
    context: Optional[str]
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "fileId": self.file_id,
            "identifier": self.identifier,
            "context": self.context,
            "text": self.text,
        }


@dataclass
class ProjectsResult:
    """Projects plus the project selected for the current document."""

    projects: list[Project] = field(default_factory=list)
    selected_project_id: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.selected_project_id is not None:
            result["selectedProjectId"] = self.selected_project_id
        result["projects"] = [p.to_dict() for p in self.projects]
        return result


@dataclass
class BranchesResult:
    """Branches plus the branch selected for the current document."""

    selected_branch_id: int = NO_BRANCH
    branches: list[Branch] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "selectedBranchId": self.selected_branch_id,
            "branches": [b.to_dict() for b in self.branches],
        }
