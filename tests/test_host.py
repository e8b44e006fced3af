from __future__ import annotations

import yaml

from crowdin_metadata.constants import BRANCH_ID, PROJECT_ID
from crowdin_metadata.host import Document, FileSettingsStore, StaticDocumentProvider


def test_missing_settings_file_reads_empty(tmp_path) -> None:
    store = FileSettingsStore(tmp_path / "nope.yaml")

    assert store.get(Document("a"), PROJECT_ID) is None


def test_settings_are_kept_per_document(tmp_path) -> None:
    path = tmp_path / "nested" / "settings.yaml"
    store = FileSettingsStore(path)
    first, second = Document("first"), Document("second")

    store.set(first, PROJECT_ID, 5)
    store.set(first, BRANCH_ID, 7)
    store.set(second, PROJECT_ID, "9")

    assert store.get(first, PROJECT_ID) == "5"
    assert store.get(first, BRANCH_ID) == "7"
    assert store.get(second, PROJECT_ID) == "9"
    assert store.get(second, BRANCH_ID) is None
    assert yaml.safe_load(path.read_text())["first"] == {PROJECT_ID: "5", BRANCH_ID: "7"}


def test_setting_none_removes_key_and_empty_document(tmp_path) -> None:
    store = FileSettingsStore(tmp_path / "settings.yaml")
    document = Document("doc")

    store.set(document, BRANCH_ID, 7)
    store.set(document, BRANCH_ID, None)

    assert store.get(document, BRANCH_ID) is None
    assert yaml.safe_load((tmp_path / "settings.yaml").read_text()) == {}


def test_malformed_settings_file_is_ignored(tmp_path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("- just\n- a list\n")

    assert FileSettingsStore(path).get(Document("doc"), PROJECT_ID) is None


def test_static_document_provider() -> None:
    document = Document("doc", "doc.sketch")

    assert StaticDocumentProvider(document).get_selected_document() is document
    assert StaticDocumentProvider().get_selected_document() is None
