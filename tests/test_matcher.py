"""Tests for routemap.routes.matcher — route pattern compilation."""

from __future__ import annotations

import pytest

from routemap._errors import ConfigError
from routemap.routes.matcher import compile_route_pattern


class TestLiteralPatterns:
    """Patterns without parameters."""

    def test_exact_match(self) -> None:
        matcher = compile_route_pattern("/about")
        assert matcher.matches("/about")

    def test_trailing_slash_tolerated(self) -> None:
        assert compile_route_pattern("/about").matches("/about/")

    def test_case_insensitive(self) -> None:
        assert compile_route_pattern("/about").matches("/About")

    def test_anchored(self) -> None:
        matcher = compile_route_pattern("/about")
        assert not matcher.matches("/about/team")
        assert not matcher.matches("/aboutus")
        assert not matcher.matches("/en/about")

    def test_root(self) -> None:
        matcher = compile_route_pattern("/")
        assert matcher.matches("/")
        assert not matcher.matches("/about")

    def test_regex_characters_are_literal(self) -> None:
        matcher = compile_route_pattern("/feed.xml")
        assert matcher.matches("/feed.xml")
        assert not matcher.matches("/feedaxml")


class TestParameters:
    """Named and unnamed parameters."""

    def test_named_parameter(self) -> None:
        matcher = compile_route_pattern("/blog/:slug")
        assert matcher.matches("/blog/hello-world")
        assert not matcher.matches("/blog")
        assert not matcher.matches("/blog/2024/hello")

    def test_named_parameter_captured(self) -> None:
        matcher = compile_route_pattern("/blog/:slug")
        assert matcher.params("/blog/hello") == {"slug": "hello"}

    def test_params_none_when_no_match(self) -> None:
        assert compile_route_pattern("/blog/:slug").params("/docs/x") is None

    def test_optional_parameter(self) -> None:
        matcher = compile_route_pattern("/blog/:slug?")
        assert matcher.matches("/blog")
        assert matcher.matches("/blog/hello")

    def test_zero_or_more(self) -> None:
        matcher = compile_route_pattern("/docs/:path*")
        assert matcher.matches("/docs")
        assert matcher.matches("/docs/a/b/c")
        assert matcher.params("/docs/a/b") == {"path": "a/b"}

    def test_one_or_more(self) -> None:
        matcher = compile_route_pattern("/docs/:path+")
        assert not matcher.matches("/docs")
        assert matcher.matches("/docs/a")
        assert matcher.matches("/docs/a/b")

    def test_custom_parameter_pattern(self) -> None:
        matcher = compile_route_pattern("/user/:id(\\d+)")
        assert matcher.matches("/user/42")
        assert not matcher.matches("/user/alice")

    def test_unnamed_group(self) -> None:
        matcher = compile_route_pattern("/files/(.*)")
        assert matcher.matches("/files/a/b.txt")
        assert matcher.params("/files/a/b.txt") == {0: "a/b.txt"}

    def test_bare_wildcard(self) -> None:
        matcher = compile_route_pattern("/blog/*")
        assert matcher.matches("/blog")
        assert matcher.matches("/blog/2024/hello")
        assert not matcher.matches("/blogger")

    def test_keys(self) -> None:
        matcher = compile_route_pattern("/:lang/docs/:page")
        assert matcher.keys == ("lang", "page")

    def test_callable(self) -> None:
        matcher = compile_route_pattern("/about")
        assert matcher("/about")
        assert not matcher("/contact")


class TestInvalidPatterns:
    """Malformed patterns raise ConfigError."""

    @pytest.mark.parametrize(
        "pattern",
        [
            "/blog/:",
            "/files/(abc",
            "/files/()",
            "/a?",
            "/files/(a(b))",
        ],
    )
    def test_rejected(self, pattern: str) -> None:
        with pytest.raises(ConfigError):
            compile_route_pattern(pattern)
