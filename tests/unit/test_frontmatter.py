"""Unit tests for YAML front matter utilities."""

from text_patch_mcp.utils.frontmatter import parse_frontmatter
from text_patch_mcp.utils.frontmatter import write_frontmatter


def test_write_keeps_key_order():
    text = write_frontmatter("body", {"type": "patch", "path": "/a", "total_chars": 1})

    assert text == "---\ntype: patch\npath: /a\ntotal_chars: 1\n---\nbody"


def test_write_allows_unicode():
    text = write_frontmatter("", {"path": "/données/été.txt"})

    assert "été" in text


def test_parse_extracts_metadata_and_content():
    metadata, content = parse_frontmatter("---\ntype: file_read\npath: /a\n---\nhello\n")

    assert metadata == {"type": "file_read", "path": "/a"}
    assert content == "hello\n"


def test_parse_keeps_content_verbatim():
    body = "---\nnot front matter\n---\n  trailing  "
    text = write_frontmatter(body, {"type": "generic"})

    metadata, content = parse_frontmatter(text)

    assert metadata == {"type": "generic"}
    assert content == body


def test_parse_without_front_matter():
    assert parse_frontmatter("plain text") == (None, "plain text")


def test_parse_unclosed_block():
    text = "---\ntype: patch\nno closing delimiter"

    assert parse_frontmatter(text) == (None, text)


def test_parse_invalid_yaml_returns_content():
    metadata, content = parse_frontmatter("---\nkey: [unclosed\n---\nbody")

    assert metadata is None
    assert content == "body"


def test_parse_non_mapping_yaml():
    metadata, content = parse_frontmatter("---\n- a\n- b\n---\nbody")

    assert metadata is None
    assert content == "body"
