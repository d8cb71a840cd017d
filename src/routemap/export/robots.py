"""robots.txt generation — allow all crawlers and point them at the sitemap."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from routemap._errors import ExportError
from routemap.export.records import ExportedFile

if TYPE_CHECKING:
    from pathlib import Path

    from routemap.config import SitemapConfig

ROBOTS_FILENAME = "robots.txt"


def sitemap_url(config: SitemapConfig) -> str:
    """Absolute URL of the primary sitemap.

    Uses the global ``url_prefix`` and ``sitemap_filename``; per-route
    overrides play no part here.  Every trailing slash of the prefix is
    dropped before joining, so ``"https://a.com/"`` gives
    ``"https://a.com/sitemap.xml"``.  Earlier releases of the plugin cut two
    characters from such a prefix, losing its last real character.

    """
    prefix = config.url_prefix.rstrip("/")
    return f"{prefix}/{config.sitemap_filename.lstrip('/')}"


def generate_robots(config: SitemapConfig) -> str:
    """Return robots.txt content: an allow-all group and a Sitemap line."""
    allow_all = "\n".join(["User-agent: *", "Allow: /"])
    groups = [allow_all, f"Sitemap: {sitemap_url(config)}"]
    return "\n\n".join(groups)


def write_robots(config: SitemapConfig, output_dir: Path) -> ExportedFile:
    """Write ``robots.txt`` at the root of *output_dir*, replacing any existing file.

    Raises:
        ExportError: If the file cannot be written.

    """
    t0 = time.perf_counter()
    robots_path = output_dir / ROBOTS_FILENAME
    data = generate_robots(config).encode("utf-8")
    try:
        robots_path.write_bytes(data)
    except OSError as exc:
        msg = f"Failed to write {robots_path}: {exc}"
        raise ExportError(msg) from exc
    elapsed = (time.perf_counter() - t0) * 1000

    return ExportedFile(
        source_path=ROBOTS_FILENAME,
        output_path=robots_path,
        source_type="robots",
        entry_count=0,
        size_bytes=len(data),
        duration_ms=elapsed,
    )
