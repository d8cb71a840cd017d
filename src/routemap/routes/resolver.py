"""Route config resolver — effective sitemap settings for a single route.

Route-specific overrides are checked in their configured order. The first
override whose pattern matches supplies its settings; anything it leaves
unset falls back to the global configuration.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from routemap.routes.matcher import RouteMatcher, compile_route_pattern

if TYPE_CHECKING:
    from collections.abc import Iterable

    from routemap._types import ChangeFreq, IgnoreEntry, Priority
    from routemap.config import RouteOverride, SitemapConfig

# Fields an override may set, in the order they are resolved
_OVERRIDABLE: tuple[str, ...] = (
    "url_prefix",
    "trailing_slash",
    "sitemap_filename",
    "merge",
    "change_freq",
    "priority",
    "last_mod",
)


@dataclass(frozen=True, slots=True)
class CompiledOverride:
    """A route override paired with its compiled matcher."""

    override: RouteOverride
    matcher: RouteMatcher


@dataclass(frozen=True, slots=True)
class ResolvedRouteConfig:
    """Effective settings for one route.

    Attributes:
        route: The route these settings apply to.
        url_prefix: Base URL the route is joined to.
        trailing_slash: Whether the final URL gets a trailing slash.
        sitemap_filename: Sitemap file the route is written to.
        merge: Whether that file is merged with an existing copy on disk.
        change_freq: ``<changefreq>`` value.
        priority: Priority string, per-depth priorities, or *None*.
        last_mod: Fixed ``<lastmod>`` value, or *None* for the run timestamp.
        pattern: Pattern of the override that applied, or *None*.

    """

    route: str
    url_prefix: str
    trailing_slash: bool
    sitemap_filename: str
    merge: bool
    change_freq: ChangeFreq
    priority: Priority | None
    last_mod: str | None
    pattern: str | None = None


def compile_overrides(config: SitemapConfig) -> tuple[CompiledOverride, ...]:
    """Compile the matcher for every route override, preserving order.

    Raises:
        ConfigError: If any override pattern is malformed.

    """
    return tuple(
        CompiledOverride(override=override, matcher=compile_route_pattern(override.pattern))
        for override in config.routes
    )


def resolve_route_config(
    config: SitemapConfig,
    overrides: Iterable[CompiledOverride],
    route: str,
) -> ResolvedRouteConfig:
    """Resolve the settings for *route*.

    Only the first matching override is applied. Whether an override value
    wins depends on ``config.override_mode``: in ``"truthy"`` mode a falsy
    value (``False``, ``""``) never replaces the global one, in
    ``"presence"`` mode any value other than *None* does.

    """
    for compiled in overrides:
        if not compiled.matcher.matches(route):
            continue
        override = compiled.override
        values = {}
        for name in _OVERRIDABLE:
            value = getattr(override, name)
            if _wins(value, config.override_mode):
                values[name] = value
            else:
                values[name] = getattr(config, name)
        return ResolvedRouteConfig(route=route, pattern=override.pattern, **values)

    return ResolvedRouteConfig(
        route=route,
        url_prefix=config.url_prefix,
        trailing_slash=config.trailing_slash,
        sitemap_filename=config.sitemap_filename,
        merge=config.merge,
        change_freq=config.change_freq,
        priority=config.priority,
        last_mod=config.last_mod,
    )


def _wins(value: object, mode: str) -> bool:
    if mode == "presence":
        return value is not None
    return bool(value)


def is_ignored(route: str, ignored: Iterable[IgnoreEntry]) -> bool:
    """Return True if *route* matches any entry of the ignore list.

    Strings must equal the route exactly. Regular expressions are searched
    anywhere in the route; route matchers apply their own anchoring.

    """
    for entry in ignored:
        if isinstance(entry, str):
            if route == entry:
                return True
        elif isinstance(entry, re.Pattern):
            if entry.search(route):
                return True
        elif entry.matches(route):
            return True
    return False
