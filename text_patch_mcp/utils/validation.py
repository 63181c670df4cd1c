"""Input validation helpers for the file tools."""

from pathlib import Path

from ..exceptions import ValidationError


def validate_absolute_path(path: str) -> tuple[bool, str | None]:
    """Check that a tool path is non-empty and absolute."""
    if not path or not path.strip():
        return False, "Path cannot be empty."
    if not Path(path).is_absolute():
        return False, f"Path must be absolute: {path}"
    return True, None


def assert_absolute_path(path: str) -> Path:
    """Return ``path`` as a Path, raising ValidationError if it is not absolute."""
    is_valid, error = validate_absolute_path(path)
    if not is_valid:
        raise ValidationError(error, field="path", value=path)
    return Path(path)


def format_display_path(path: Path, cwd: Path) -> str:
    """Format a path for display.

    Paths beneath ``cwd`` are shown relative to it; anything else is shown
    as given.
    """
    try:
        relative = path.relative_to(cwd)
    except ValueError:
        return str(path)
    return str(relative) if relative.parts else str(path)
