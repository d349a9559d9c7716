"""Configuration constants and paths for markblog."""

import os
from pathlib import Path

# Content locations, relative to the working directory unless overridden.
CONTENT_DIR = Path(os.getenv("MARKBLOG_CONTENT_DIR", "content/blog"))
SITE_CONFIG = Path(os.getenv("MARKBLOG_SITE_CONFIG", "site.yml"))
OUT_DIR = Path(os.getenv("MARKBLOG_OUT_DIR", "public"))

# Prefix for every generated link, e.g. "/blog" when served from a subpath.
PATH_PREFIX = os.getenv("MARKBLOG_PATH_PREFIX", "")

# "MMMM DD, YYYY"
DATE_FORMAT = "%B %d, %Y"

# Excerpt lengths (characters) for the index and for post page descriptions
INDEX_EXCERPT_LENGTH = 140
POST_EXCERPT_LENGTH = 160

# Markdown rendering
CODE_CSS_CLASS = "highlight"
PYGMENTS_STYLE = "dracula"
MARKDOWN_EXTENSIONS = ["fenced_code", "codehilite", "tables", "sane_lists"]
MARKDOWN_EXTENSION_CONFIGS = {
    "codehilite": {"guess_lang": False, "css_class": CODE_CSS_CLASS},
}

# Bio avatar edge length in pixels
AVATAR_SIZE = 50

# Local preview server
DEV_SERVER_HOST = "localhost"
DEV_SERVER_PORT = 8000
