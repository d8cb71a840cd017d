"""Tests for routemap.export.robots — robots.txt generation."""

from __future__ import annotations

from pathlib import Path

import pytest

from routemap._errors import ExportError
from routemap.config import RouteOverride, SitemapConfig
from routemap.export.robots import generate_robots, sitemap_url, write_robots


class TestGenerateRobots:
    """generate_robots — content of robots.txt."""

    def test_default_config(self) -> None:
        content = generate_robots(SitemapConfig())
        assert content == (
            "User-agent: *\n"
            "Allow: /\n"
            "\n"
            "Sitemap: http://localhost/sitemap.xml"
        )

    def test_prefix_trailing_slash(self) -> None:
        config = SitemapConfig(url_prefix="https://example.com/")
        assert sitemap_url(config) == "https://example.com/sitemap.xml"

    def test_prefix_with_path(self) -> None:
        config = SitemapConfig(url_prefix="https://example.com/app/")
        assert sitemap_url(config) == "https://example.com/app/sitemap.xml"

    def test_prefix_keeps_last_character(self) -> None:
        config = SitemapConfig(url_prefix="https://example.com/app//")
        assert sitemap_url(config) == "https://example.com/app/sitemap.xml"

    def test_custom_filename(self) -> None:
        config = SitemapConfig(sitemap_filename="pages.xml")
        assert "Sitemap: http://localhost/pages.xml" in generate_robots(config)

    def test_route_overrides_not_used(self) -> None:
        config = SitemapConfig(
            routes=(RouteOverride("/blog/:slug", sitemap_filename="blog.xml"),),
        )
        assert sitemap_url(config) == "http://localhost/sitemap.xml"


class TestWriteRobots:
    """write_robots — file writing."""

    def test_writes_at_output_root(self, out_dir: Path) -> None:
        result = write_robots(SitemapConfig(), out_dir)

        path = out_dir / "robots.txt"
        assert path.read_text(encoding="utf-8") == generate_robots(SitemapConfig())
        assert result.source_type == "robots"
        assert result.output_path == path
        assert result.size_bytes == path.stat().st_size

    def test_overwrites(self, out_dir: Path) -> None:
        (out_dir / "robots.txt").write_text("User-agent: *\nDisallow: /\n", encoding="utf-8")

        write_robots(SitemapConfig(), out_dir)

        assert "Disallow" not in (out_dir / "robots.txt").read_text(encoding="utf-8")

    def test_missing_output_dir(self, tmp_path: Path) -> None:
        with pytest.raises(ExportError):
            write_robots(SitemapConfig(), tmp_path / "missing")
