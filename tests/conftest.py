"""Shared test fixtures for routemap."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from xml.etree.ElementTree import fromstring

import pytest

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# Fixed run timestamp and its serialized form
FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
FIXED_NOW_ISO = "2024-01-02T03:04:05.000Z"


@pytest.fixture
def now() -> datetime:
    """A fixed run timestamp."""
    return FIXED_NOW


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """An existing, empty output directory."""
    output = tmp_path / "dist"
    output.mkdir()
    return output


@pytest.fixture
def read_urls() -> Callable[[Path], list[dict[str, str | None]]]:
    """Return a helper that parses a sitemap file into a list of field dicts.

    Each dict maps child tag (without namespace) to its text, preserving the
    document's ``<url>`` order.
    """

    def _read(path: Path) -> list[dict[str, str | None]]:
        root = fromstring(path.read_text(encoding="utf-8").split("\n", 1)[1])
        assert root.tag == f"{{{SITEMAP_NS}}}urlset"
        return [
            {child.tag.split("}", 1)[1]: child.text for child in url}
            for url in root.findall(f"{{{SITEMAP_NS}}}url")
        ]

    return _read


def write_existing_sitemap(path: Path, entries: list[tuple[str, str]]) -> None:
    """Write a minimal sitemap with ``(loc, priority)`` pairs to *path*."""
    urls = "".join(
        f"<url><loc>{loc}</loc><changefreq>daily</changefreq>"
        f"<lastmod>2020-01-01T00:00:00.000Z</lastmod>"
        f"<priority>{priority}</priority></url>"
        for loc, priority in entries
    )
    path.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NS}">{urls}</urlset>\n',
        encoding="utf-8",
    )


@pytest.fixture
def existing_sitemap() -> Callable[[Path, list[tuple[str, str]]], None]:
    """Return the helper that writes a prior run's sitemap."""
    return write_existing_sitemap


@pytest.fixture
def now_iso() -> str:
    """``now`` as written into ``<lastmod>``."""
    return FIXED_NOW_ISO
