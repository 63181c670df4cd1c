"""Shared helper functions for the file tools.

It provides diff generation, line counting and the title line shown for
each tool call.
"""

import difflib
from typing import Any

from .exceptions import FileSystemError
from .storage import StorageBackend

# --- Diff Generation Helper ---


def _generate_content_diff(original_content: str, new_content: str, filename: str = "file") -> dict[str, Any]:
    """Generate a unified diff between original and new content.

    Compares two strings and produces a diff report including a summary,
    lines added/removed, and the full unified diff text. Neither text is
    normalized, so line-ending changes show up in the diff.
    """
    if original_content == new_content:
        return {"changed": False, "diff": None, "summary": "No changes made to content"}

    original_lines = original_content.splitlines(keepends=True)
    new_lines = new_content.splitlines(keepends=True)

    diff_lines = list(
        difflib.unified_diff(
            original_lines,
            new_lines,
            fromfile=f"{filename} (before)",
            tofile=f"{filename} (after)",
        )
    )

    lines_added = sum(1 for line in diff_lines if line.startswith("+") and not line.startswith("+++"))
    lines_removed = sum(1 for line in diff_lines if line.startswith("-") and not line.startswith("---"))

    return {
        "changed": True,
        "diff": "".join(_terminate(line) for line in diff_lines),
        "summary": f"Content changed: {lines_added} lines added, {lines_removed} lines removed",
        "stats": {"added": lines_added, "removed": lines_removed},
    }


def _terminate(line: str) -> str:
    # The last line of a file without a trailing newline still needs one in the diff
    if line.endswith("\n"):
        return line
    return line + "\n\\ No newline at end of file\n"


# --- Text Processing ---


def _count_lines(text: str) -> int:
    """Count the lines of a text, counting a final unterminated line."""
    return len(text.splitlines())


def _format_title(action: str, subject: str) -> str:
    """Format the one-line title logged for a tool call, e.g. 'Patch src/app.py'."""
    return f"{action} {subject}"


# --- Storage Operations ---


async def _read_text(storage: StorageBackend, path: str) -> str:
    """Read a file through storage, wrapping I/O failures in FileSystemError."""
    try:
        return await storage.read_file(path)
    except (OSError, UnicodeDecodeError) as e:
        raise FileSystemError("read", path, str(e)) from e


async def _write_text(storage: StorageBackend, path: str, content: str) -> None:
    """Write a file through storage, wrapping I/O failures in FileSystemError."""
    try:
        await storage.write_file(path, content)
    except OSError as e:
        raise FileSystemError("write", path, str(e)) from e
