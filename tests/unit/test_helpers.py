"""Unit tests for tool helper functions."""

import pytest

from text_patch_mcp.exceptions import FileSystemError
from text_patch_mcp.helpers import _count_lines
from text_patch_mcp.helpers import _format_title
from text_patch_mcp.helpers import _generate_content_diff
from text_patch_mcp.helpers import _read_text
from text_patch_mcp.helpers import _write_text
from text_patch_mcp.storage.local import LocalStorageBackend


class TestGenerateContentDiff:
    """Tests for unified diff generation."""

    def test_unchanged_content(self):
        diff = _generate_content_diff("same\n", "same\n")

        assert diff == {"changed": False, "diff": None, "summary": "No changes made to content"}

    def test_changed_line(self):
        diff = _generate_content_diff("Hello World\n", "Hello Forge\n", "greeting.txt")

        assert diff["changed"] is True
        assert diff["stats"] == {"added": 1, "removed": 1}
        assert diff["summary"] == "Content changed: 1 lines added, 1 lines removed"
        assert "--- greeting.txt (before)" in diff["diff"]
        assert "+++ greeting.txt (after)" in diff["diff"]
        assert "-Hello World\n" in diff["diff"]
        assert "+Hello Forge\n" in diff["diff"]

    def test_added_lines_only(self):
        diff = _generate_content_diff("a\n", "a\nb\nc\n")

        assert diff["stats"] == {"added": 2, "removed": 0}

    def test_missing_final_newline_is_marked(self):
        diff = _generate_content_diff("Hello World", "Hello Forge")

        assert "-Hello World\n\\ No newline at end of file\n" in diff["diff"]
        assert diff["diff"].endswith("+Hello Forge\n\\ No newline at end of file\n")

    def test_line_ending_change_is_reported(self):
        diff = _generate_content_diff("a\n", "a\r\n")

        assert diff["changed"] is True


class TestTextHelpers:
    @pytest.mark.parametrize(
        "text,expected",
        [("", 0), ("one", 1), ("one\n", 1), ("one\ntwo", 2), ("one\ntwo\n", 2)],
    )
    def test_count_lines(self, text, expected):
        assert _count_lines(text) == expected

    def test_format_title(self):
        assert _format_title("Patch", "src/app.py") == "Patch src/app.py"


class TestStorageHelpers:
    """Tests for I/O error wrapping."""

    @pytest.mark.asyncio
    async def test_read_missing_file(self, tmp_path):
        storage = LocalStorageBackend(str(tmp_path))
        missing = str(tmp_path / "missing.txt")

        with pytest.raises(FileSystemError) as exc_info:
            await _read_text(storage, missing)

        assert exc_info.value.details["operation"] == "read"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    @pytest.mark.asyncio
    async def test_read_invalid_utf8(self, tmp_path):
        (tmp_path / "binary.bin").write_bytes(b"\xff\xfe\x00")
        storage = LocalStorageBackend(str(tmp_path))

        with pytest.raises(FileSystemError):
            await _read_text(storage, str(tmp_path / "binary.bin"))

    @pytest.mark.asyncio
    async def test_write_failure(self, mocker, tmp_path):
        storage = LocalStorageBackend(str(tmp_path))
        mocker.patch.object(storage, "write_file", side_effect=PermissionError("read-only"))

        with pytest.raises(FileSystemError) as exc_info:
            await _write_text(storage, "/a.txt", "x")

        assert str(exc_info.value) == "Failed to write file '/a.txt': read-only"

    @pytest.mark.asyncio
    async def test_round_trip(self, tmp_path):
        storage = LocalStorageBackend(str(tmp_path))
        path = str(tmp_path / "note.txt")

        await _write_text(storage, path, "line\r\n")

        assert await _read_text(storage, path) == "line\r\n"
