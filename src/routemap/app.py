"""Routemap run — turn a route list into sitemap files and robots.txt.

``run()`` is the single invocation a host pipeline makes once its routes are
known.  ``build()`` wraps it for standalone use: it loads file configuration
and, when no routes are given, discovers them from the exported site.
"""

from __future__ import annotations

import sys
import time
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from routemap.config_loader import load_config
from routemap.export.builder import SitemapBuilder
from routemap.export.records import ExportedFile, SitemapResult
from routemap.export.robots import write_robots
from routemap.export.sitemap import write_sitemap
from routemap.routes.discovery import discover_routes

if TYPE_CHECKING:
    from collections.abc import Sequence

    from routemap.config import SitemapConfig
    from routemap.observability.collector import BuildCollector

_NAME = "routemap"


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


class _StatusLog:
    """Status lines on stderr, silenced by ``suppress_log``."""

    __slots__ = ("_quiet",)

    def __init__(self, quiet: bool) -> None:
        self._quiet = quiet

    def __call__(self, message: str) -> None:
        if not self._quiet:
            print(f"  {message}", file=sys.stderr)

    def warn(self, message: str) -> None:
        if not self._quiet:
            print(f"  Warning: {message}", file=sys.stderr)


def run(
    routes: Sequence[str] | None,
    config: SitemapConfig,
    *,
    now: datetime | None = None,
    collector: BuildCollector | None = None,
) -> SitemapResult | None:
    """Generate the sitemaps (and optionally robots.txt) for *routes*.

    Pipeline order:
        1. Resolve and bucket every route into its sitemap map
        2. Write each sitemap file
        3. Write robots.txt (if ``create_robots_file``)

    Args:
        routes: Routes in the order the host discovered them, or *None* when
            the host found no routes (nothing is written).
        config: Global configuration.
        now: Timestamp used for ``<lastmod>`` when a route has no fixed
            value.  Captured once; defaults to the current UTC time.
        collector: Optional event collector.

    Returns:
        A :class:`SitemapResult`, or *None* when *routes* is *None*.

    Raises:
        ConfigError: If a route override pattern is invalid.
        SitemapError: If an existing sitemap cannot be merged.
        ExportError: If an output file cannot be written.

    """
    log = _StatusLog(config.suppress_log)
    log(f"Started {_NAME}")

    if routes is None:
        log("No routes were provided")
        return None

    start = time.perf_counter()
    if now is None:
        now = datetime.now(UTC)
    output_dir = config.output_path

    count = len(routes)
    log(f"Generating sitemaps for {count} {_plural(count, 'route', 'routes')}.")

    # 1. Bucket routes per sitemap file
    builder = SitemapBuilder(config, now=now, collector=collector, warn=log.warn)
    maps = builder.add_all(routes)

    files: list[ExportedFile] = []

    # 2. Write sitemaps
    for filename, entries in maps.items():
        written = write_sitemap(entries, filename, output_dir)
        files.append(written)
        if collector is not None:
            collector.record_build(
                "write_sitemap",
                filename,
                str(written.output_path),
                entry_count=written.entry_count,
                duration_ms=written.duration_ms,
            )
        n = written.entry_count
        log(f"Wrote {n} {_plural(n, 'route', 'routes')} to {filename}")

    # 3. robots.txt
    if config.create_robots_file:
        log("Generating robots.txt file")
        robots = write_robots(config, output_dir)
        files.append(robots)
        if collector is not None:
            collector.record_build(
                "write_robots",
                robots.source_path,
                str(robots.output_path),
                duration_ms=robots.duration_ms,
            )
        log("Wrote robots.txt file")

    log(f"Finished {_NAME}")

    return SitemapResult(
        files=tuple(files),
        total_routes=count,
        ignored_routes=builder.ignored_count,
        duration_ms=(time.perf_counter() - start) * 1000,
        output_dir=output_dir,
    )


def build(
    root: str | Path = ".",
    routes: Sequence[str] | None = None,
    *,
    now: datetime | None = None,
    collector: BuildCollector | None = None,
    **overrides: object,
) -> SitemapResult | None:
    """Load configuration from *root* and generate sitemaps.

    Args:
        root: Project root holding ``routemap.yaml`` / ``routemap.toml``.
        routes: Routes to include.  When *None*, routes are discovered from
            the HTML files in the output directory.
        now: See :func:`run`.
        collector: See :func:`run`.
        **overrides: Configuration values taking precedence over the file.

    """
    config = load_config(Path(root), **overrides)
    if routes is None:
        discovered = discover_routes(config.output_path)
        routes = discovered or None
    return run(routes, config, now=now, collector=collector)
