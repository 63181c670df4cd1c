"""YAML front matter rendering and parsing utilities.

Tool responses are returned as a YAML block followed by free text:
---
type: patch
path: /work/app.py
total_chars: 1204
---
<diff or file content>

The text after the closing delimiter is kept byte-for-byte.
"""

from typing import Any

import yaml  # type: ignore[import-untyped]

FRONTMATTER_OPEN = "---\n"
FRONTMATTER_CLOSE = "\n---\n"


def write_frontmatter(content: str, metadata: dict[str, Any]) -> str:
    """Render metadata as a front matter block in front of content.

    Args:
        content: Text placed after the closing delimiter, unchanged
        metadata: Mapping rendered as YAML, in insertion order

    Returns:
        The combined document
    """
    yaml_str = yaml.dump(metadata, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"{FRONTMATTER_OPEN}{yaml_str}---\n{content}"


def parse_frontmatter(text: str) -> tuple[dict[str, Any] | None, str]:
    """Split a front matter document into its metadata and content.

    Returns:
        Tuple of (metadata dict, content). Metadata is None when the text has
        no front matter; when the YAML block is invalid the metadata is None
        and only the content after the block is returned.
    """
    if not text.startswith(FRONTMATTER_OPEN):
        return None, text

    end_index = text.find(FRONTMATTER_CLOSE, len(FRONTMATTER_OPEN))
    if end_index < 0:
        return None, text

    yaml_block = text[len(FRONTMATTER_OPEN) : end_index]
    content = text[end_index + len(FRONTMATTER_CLOSE) :]

    try:
        metadata = yaml.safe_load(yaml_block)
    except yaml.YAMLError:
        return None, content

    if not isinstance(metadata, dict):
        return None, content
    return metadata, content
