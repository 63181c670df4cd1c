"""Best-effort syntax checks for patched files.

The check picks a parser from the file extension. Files of unknown types are
never reported. A failed check produces a warning for the response record;
it never prevents the write.
"""

import ast
import json
import tomllib
from pathlib import Path

import yaml  # type: ignore[import-untyped]


def _check_python(content: str) -> None:
    ast.parse(content)


def _check_json(content: str) -> None:
    json.loads(content)


def _check_yaml(content: str) -> None:
    yaml.safe_load(content)


def _check_toml(content: str) -> None:
    tomllib.loads(content)


_CHECKERS = {
    ".py": ("Python", _check_python, (SyntaxError, ValueError)),
    ".json": ("JSON", _check_json, (json.JSONDecodeError,)),
    ".yaml": ("YAML", _check_yaml, (yaml.YAMLError,)),
    ".yml": ("YAML", _check_yaml, (yaml.YAMLError,)),
    ".toml": ("TOML", _check_toml, (tomllib.TOMLDecodeError,)),
}


def validate_syntax(path: Path | str, content: str) -> str | None:
    """Check ``content`` against the syntax of the file type of ``path``.

    Returns:
        A warning message if the content does not parse, None otherwise
    """
    checker = _CHECKERS.get(Path(path).suffix.lower())
    if checker is None:
        return None

    language, check, errors = checker
    try:
        check(content)
    except errors as e:
        return f"{language} syntax error in {Path(path).name}: {e}"
    return None
