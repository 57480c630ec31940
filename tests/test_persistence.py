"""Tests for the JSON metadata repository and the system clipboard."""

import json
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cite_formatter.domain.errors import ClipboardError, ConfigurationError, MetadataValidationError
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.infrastructure.clipboard.system_clipboard import SystemClipboard, _detect_backend
from cite_formatter.infrastructure.persistence.json_repository import JsonMetadataRepository

# ─── Helpers ─────────────────────────────────────────────────────────────────


def _record(**overrides) -> MetadataRecord:
    defaults = dict(
        title="Test Book",
        author="Smith, John",
        year="2023",
        publisher="Pub Co.",
        source_type="book",
    )
    defaults.update(overrides)
    return MetadataRecord(**defaults)


# ═══════════════════════════════════════════════════════════════════════════════
# JSON repository
# ═══════════════════════════════════════════════════════════════════════════════


class TestJsonRepository:
    """Load and save metadata files."""

    def test_save_and_load(self, tmp_path: Path):
        repo = JsonMetadataRepository()
        path = tmp_path / "records.json"
        records = [_record(), _record(title="Second", include_access_date=True)]
        repo.save(records, path)
        assert [r.model_dump() for r in repo.load(path)] == [r.model_dump() for r in records]

    def test_saved_keys_are_camel_case(self, tmp_path: Path):
        path = tmp_path / "records.json"
        JsonMetadataRepository().save([_record()], path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data[0]["sourceType"] == "book"
        assert "source_type" not in data[0]

    def test_save_creates_parent_dirs(self, tmp_path: Path):
        path = tmp_path / "nested" / "dir" / "records.json"
        JsonMetadataRepository().save([_record()], path)
        assert path.exists()

    def test_single_object_file(self, tmp_path: Path):
        path = tmp_path / "one.json"
        path.write_text(json.dumps({"title": "Solo", "date": "2020-01-02"}), encoding="utf-8")
        (record,) = JsonMetadataRepository().load(path)
        assert record.title == "Solo"
        assert record.year == "2020"

    def test_load_nonexistent(self, tmp_path: Path):
        with pytest.raises(ConfigurationError):
            JsonMetadataRepository().load(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            JsonMetadataRepository().load(path)

    def test_load_unexpected_shape(self, tmp_path: Path):
        path = tmp_path / "scalar.json"
        path.write_text("42", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            JsonMetadataRepository().load(path)

    def test_load_invalid_record(self, tmp_path: Path):
        path = tmp_path / "typed.json"
        path.write_text(json.dumps([{"title": 7}]), encoding="utf-8")
        with pytest.raises(MetadataValidationError):
            JsonMetadataRepository().load(path)


# ═══════════════════════════════════════════════════════════════════════════════
# Clipboard
# ═══════════════════════════════════════════════════════════════════════════════

_MODULE = "cite_formatter.infrastructure.clipboard.system_clipboard"


class TestClipboard:
    """Subprocess-backed clipboard adapter."""

    @patch(f"{_MODULE}._detect_backend", return_value=["pbcopy"])
    @patch(f"{_MODULE}.subprocess.run")
    def test_copy(self, mock_run: MagicMock, mock_detect: MagicMock):
        SystemClipboard().copy("Smith, J. (2024).")
        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args[0] == ["pbcopy"]
        assert kwargs["input"] == "Smith, J. (2024).".encode("utf-8")

    @patch(f"{_MODULE}._detect_backend", return_value=["xclip", "-selection", "clipboard"])
    @patch(f"{_MODULE}.subprocess.run", side_effect=subprocess.CalledProcessError(1, "xclip"))
    def test_copy_failure(self, mock_run: MagicMock, mock_detect: MagicMock):
        with pytest.raises(ClipboardError):
            SystemClipboard().copy("text")

    @patch(f"{_MODULE}._detect_backend", return_value=["wl-copy"])
    @patch(f"{_MODULE}.subprocess.run", side_effect=FileNotFoundError("wl-copy"))
    def test_missing_binary(self, mock_run: MagicMock, mock_detect: MagicMock):
        with pytest.raises(ClipboardError):
            SystemClipboard().copy("text")

    def test_detect_linux_backend(self, monkeypatch):
        monkeypatch.setattr(f"{_MODULE}.sys.platform", "linux")
        monkeypatch.setattr(
            f"{_MODULE}.shutil.which", lambda name: "/usr/bin/xsel" if name == "xsel" else None
        )
        assert _detect_backend() == ["xsel", "--clipboard", "--input"]

    def test_detect_linux_without_tools(self, monkeypatch):
        monkeypatch.setattr(f"{_MODULE}.sys.platform", "linux")
        monkeypatch.setattr(f"{_MODULE}.shutil.which", lambda name: None)
        with pytest.raises(ClipboardError):
            _detect_backend()

    def test_detect_macos(self, monkeypatch):
        monkeypatch.setattr(f"{_MODULE}.sys.platform", "darwin")
        assert _detect_backend() == ["pbcopy"]
