"""Content sourcing: site metadata, Markdown posts, and rendered markup."""

from .frontmatter import FrontmatterError, parse_frontmatter
from .markup import Markup, excerpt_markup, has_code, has_code_block, make_excerpt, render_markdown
from .metadata import SiteConfigError, SiteMetadata, Social, load_site_metadata
from .posts import ContentError, Neighbors, PostRecord, load_posts, neighbors, sort_posts

__all__ = [
    "FrontmatterError",
    "parse_frontmatter",
    "Markup",
    "excerpt_markup",
    "has_code",
    "has_code_block",
    "make_excerpt",
    "render_markdown",
    "SiteConfigError",
    "SiteMetadata",
    "Social",
    "load_site_metadata",
    "ContentError",
    "Neighbors",
    "PostRecord",
    "load_posts",
    "neighbors",
    "sort_posts",
]
