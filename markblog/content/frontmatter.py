"""YAML frontmatter parsing for Markdown sources."""

from __future__ import annotations

from typing import Any

import yaml

_DELIMITER = "---"


class FrontmatterError(ValueError):
    """Raised when a frontmatter block is present but unusable."""


def split_frontmatter(text: str) -> tuple[str | None, str]:
    """Split a document into its raw frontmatter block and body.

    Returns ``(None, text)`` when the document does not open with ``---`` or
    the block is never closed.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n").lstrip("\ufeff")
    if not text.startswith(_DELIMITER + "\n"):
        return None, text

    lines = text.splitlines(keepends=True)
    for i in range(1, len(lines)):
        if lines[i].strip() == _DELIMITER:
            return "".join(lines[1:i]), "".join(lines[i + 1 :])
    return None, text


def parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Parse frontmatter into a dict and return it with the remaining body.

    Args:
        text: Full Markdown source

    Returns:
        (frontmatter, body). Documents without frontmatter yield an empty dict.

    Raises:
        FrontmatterError: If the block is not valid YAML or not a mapping
    """
    raw, body = split_frontmatter(text)
    if raw is None:
        return {}, body

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"invalid YAML frontmatter: {e}") from e

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontmatterError("frontmatter must be a mapping")
    return data, body
