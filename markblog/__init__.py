"""markblog: a small static blog generator."""

__version__ = "0.1.0"
