"""Shared type definitions for routemap."""

import re
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from routemap.routes.matcher import RouteMatcher

# Route URL path as handed over by the host (e.g., "/", "/blog/post-1")
type RoutePath = str

# Sitemap <changefreq> values
type ChangeFreq = Literal["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"]

# A single priority, or one priority per route depth
type Priority = str | tuple[str, ...]

# Entry in the ignore list: exact route, regular expression, or route pattern
type IgnoreEntry = str | re.Pattern[str] | RouteMatcher

# How route overrides win over global defaults
type OverrideMode = Literal["truthy", "presence"]
