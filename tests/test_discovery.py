"""Tests for routemap.routes.discovery — routes from exported HTML."""

from __future__ import annotations

from pathlib import Path

from routemap.routes.discovery import discover_routes


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("<html></html>")


class TestDiscoverRoutes:
    """discover_routes — clean-URL file layout to routes."""

    def test_missing_dir(self, tmp_path: Path) -> None:
        assert discover_routes(tmp_path / "missing") == ()

    def test_clean_urls(self, tmp_path: Path) -> None:
        _touch(tmp_path / "index.html")
        _touch(tmp_path / "about" / "index.html")
        _touch(tmp_path / "docs" / "intro" / "index.html")

        assert discover_routes(tmp_path) == ("/", "/about", "/docs/intro")

    def test_plain_html_files(self, tmp_path: Path) -> None:
        _touch(tmp_path / "search.html")
        _touch(tmp_path / "docs" / "api.html")

        assert discover_routes(tmp_path) == ("/docs/api", "/search")

    def test_skips_error_pages_and_private(self, tmp_path: Path) -> None:
        _touch(tmp_path / "index.html")
        _touch(tmp_path / "404.html")
        _touch(tmp_path / "_partials" / "nav.html")
        _touch(tmp_path / ".cache" / "index.html")

        assert discover_routes(tmp_path) == ("/",)

    def test_ignores_non_html(self, tmp_path: Path) -> None:
        _touch(tmp_path / "index.html")
        (tmp_path / "style.css").write_text("body {}")
        (tmp_path / "sitemap.xml").write_text("<urlset/>")

        assert discover_routes(tmp_path) == ("/",)
