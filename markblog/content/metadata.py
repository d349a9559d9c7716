"""Site metadata model and loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError


class SiteConfigError(ValueError):
    """Raised when the site configuration is missing or invalid."""


class Social(BaseModel):
    """Social handles shown in the bio and document head."""

    model_config = ConfigDict(frozen=True)

    twitter: str | None = None
    github: str | None = None


class SiteMetadata(BaseModel):
    """Site-wide metadata, read by every page."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    author: str = ""
    location: str | None = None
    site_url: str | None = None
    avatar: str | None = None
    social: Social = Social()


def load_site_metadata(path: Path) -> SiteMetadata:
    """Load site metadata from a YAML file.

    The file may hold the fields at the top level or under ``siteMetadata``.

    Raises:
        SiteConfigError: If the file is missing, unreadable, or lacks a title
    """
    if not path.exists():
        raise SiteConfigError(f"site config not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise SiteConfigError(f"invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise SiteConfigError(f"site config must be a mapping: {path}")
    return site_metadata_from_dict(data, source=str(path))


def site_metadata_from_dict(data: dict[str, Any], source: str = "<dict>") -> SiteMetadata:
    data = data.get("siteMetadata", data)
    try:
        return SiteMetadata.model_validate(data)
    except ValidationError as e:
        raise SiteConfigError(f"invalid site config {source}: {e}") from e
