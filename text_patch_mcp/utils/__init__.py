"""Utility modules for the text-patch MCP system.

This package contains shared utility functions:
- validation.py: Path validation and display helpers
- frontmatter.py: YAML front matter rendering/parsing
- syntax.py: Best-effort syntax checks for patched files
"""
