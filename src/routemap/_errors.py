"""Routemap error hierarchy.

All routemap-specific errors inherit from RoutemapError for easy catching.
"""


class RoutemapError(Exception):
    """Base error for all routemap operations."""


class ConfigError(RoutemapError):
    """Invalid or missing configuration (including bad route patterns)."""


class SitemapError(RoutemapError):
    """An existing sitemap document could not be read or parsed."""


class ExportError(RoutemapError):
    """Writing a sitemap or robots.txt file failed."""
