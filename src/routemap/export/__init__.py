"""Export layer — sitemap and robots.txt output.

Builds per-file sitemap entries from routes and writes them, together with
an optional robots.txt, into the output directory.
"""

from routemap.export.builder import SitemapBuilder, build_maps
from routemap.export.records import ExportedFile, SitemapResult
from routemap.export.robots import generate_robots, write_robots
from routemap.export.sitemap import (
    SitemapEntry,
    build_location,
    compute_priority,
    generate_sitemap,
    load_sitemap,
    write_sitemap,
)

__all__ = [
    "ExportedFile",
    "SitemapBuilder",
    "SitemapEntry",
    "SitemapResult",
    "build_location",
    "build_maps",
    "compute_priority",
    "generate_robots",
    "generate_sitemap",
    "load_sitemap",
    "write_robots",
    "write_sitemap",
]
