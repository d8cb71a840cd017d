"""Sitemap map builder — bucket routes into per-file sitemap entries.

Routes are fed one at a time, in order.  Each is checked against the ignore
list, resolved against the route overrides, and stored under its final URL
in the map for its target sitemap file.  The first time a file's map is
needed, it is seeded from the copy on disk when merging is enabled.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from routemap.export.sitemap import (
    SitemapEntry,
    build_location,
    compute_priority,
    format_timestamp,
    load_sitemap,
)
from routemap.routes.resolver import compile_overrides, is_ignored, resolve_route_config

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from datetime import datetime

    from routemap.config import SitemapConfig
    from routemap.observability.collector import BuildCollector
    from routemap.routes.resolver import ResolvedRouteConfig

type SitemapMaps = dict[str, dict[str, SitemapEntry]]


class SitemapBuilder:
    """Accumulates sitemap entries for one run.

    Route overrides are compiled once, on construction, and the ``lastmod``
    fallback is fixed from *now* so that every route of the run shares it.

    Args:
        config: Global configuration for the run.
        now: Run timestamp used when a route has no ``last_mod``.
        collector: Optional event collector.
        warn: Optional callback for advisory warnings.

    Raises:
        ConfigError: If an override pattern cannot be compiled.

    """

    __slots__ = ("_collector", "_config", "_ignored", "_lastmod", "_maps", "_overrides", "_warn")

    def __init__(
        self,
        config: SitemapConfig,
        *,
        now: datetime,
        collector: BuildCollector | None = None,
        warn: Callable[[str], None] | None = None,
    ) -> None:
        self._config = config
        self._overrides = compile_overrides(config)
        self._lastmod = format_timestamp(now)
        self._collector = collector
        self._warn = warn
        self._maps: SitemapMaps = {}
        self._ignored = 0

    @property
    def maps(self) -> SitemapMaps:
        """Filename -> (location -> entry), in first-use order."""
        return self._maps

    @property
    def ignored_count(self) -> int:
        """Number of routes skipped by the ignore list so far."""
        return self._ignored

    def add(self, route: str) -> SitemapEntry | None:
        """Place *route* into its sitemap and return the entry.

        Returns *None* for ignored routes.  A route whose URL is already in
        the map replaces the earlier entry.

        Raises:
            SitemapError: If an existing sitemap must be merged but cannot
                be read or parsed.

        """
        if is_ignored(route, self._config.ignored_routes):
            self._ignored += 1
            if self._collector is not None:
                self._collector.record_ignored(route)
            return None

        resolved = resolve_route_config(self._config, self._overrides, route)
        filename = resolved.sitemap_filename or self._config.sitemap_filename
        entries = self._map_for(filename, resolved)

        loc = build_location(resolved.url_prefix, route, resolved.trailing_slash)
        priority = compute_priority(route, resolved.priority)
        if priority is None and self._warn is not None:
            self._warn(f"No priority configured for depth of {route!r}; leaving it empty")

        entry = SitemapEntry(
            loc=loc,
            changefreq=resolved.change_freq,
            lastmod=resolved.last_mod or self._lastmod,
            priority=priority,
        )
        entries[loc] = entry

        if self._collector is not None:
            self._collector.record_route(route, loc, filename, pattern=resolved.pattern)
        return entry

    def add_all(self, routes: Iterable[str]) -> SitemapMaps:
        """Add every route in order and return the maps."""
        for route in routes:
            self.add(route)
        return self._maps

    def _map_for(self, filename: str, resolved: ResolvedRouteConfig) -> dict[str, SitemapEntry]:
        """Return the map for *filename*, creating (and maybe seeding) it."""
        entries = self._maps.get(filename)
        if entries is not None:
            return entries

        entries = {}
        if resolved.merge:
            t0 = time.perf_counter()
            path = self._config.output_path / filename
            existing = load_sitemap(path)
            if existing is not None:
                entries = existing
                if self._collector is not None:
                    self._collector.record_build(
                        "load_sitemap",
                        filename,
                        str(path),
                        entry_count=len(existing),
                        duration_ms=(time.perf_counter() - t0) * 1000,
                    )

        self._maps[filename] = entries
        return entries


def build_maps(
    routes: Iterable[str],
    config: SitemapConfig,
    *,
    now: datetime,
    collector: BuildCollector | None = None,
) -> SitemapMaps:
    """Build the per-file sitemap maps for *routes*.

    Deterministic for a given route list, configuration, *now*, and set of
    files on disk.

    """
    builder = SitemapBuilder(config, now=now, collector=collector)
    return builder.add_all(routes)
