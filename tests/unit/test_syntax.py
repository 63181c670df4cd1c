"""Unit tests for post-patch syntax warnings."""

import pytest

from text_patch_mcp.utils.syntax import validate_syntax


@pytest.mark.parametrize(
    "name,content",
    [
        ("app.py", "def f():\n    return 1\n"),
        ("data.json", '{"a": [1, 2]}'),
        ("conf.yaml", "a:\n  b: 1\n"),
        ("conf.yml", "- one\n- two\n"),
        ("pyproject.toml", '[project]\nname = "x"\n'),
    ],
)
def test_valid_content_has_no_warning(name, content):
    assert validate_syntax(name, content) is None


@pytest.mark.parametrize(
    "name,language",
    [
        ("app.py", "Python"),
        ("data.json", "JSON"),
        ("conf.yaml", "YAML"),
        ("pyproject.toml", "TOML"),
    ],
)
def test_invalid_content_is_reported(name, language):
    broken = {
        "Python": "def f(:\n",
        "JSON": '{"a": }',
        "YAML": "a: [1, 2\n",
        "TOML": "[project\n",
    }[language]

    warning = validate_syntax(f"/work/{name}", broken)

    assert warning is not None
    assert warning.startswith(f"{language} syntax error in {name}")


def test_unknown_extension_is_not_checked():
    assert validate_syntax("notes.txt", "def f(:") is None


def test_extension_is_case_insensitive():
    assert validate_syntax("DATA.JSON", "{") is not None
