"""Route matcher — compile route patterns into predicates.

Patterns use the path-to-regexp conventions common to JavaScript routers:

    /about                 literal route
    /blog/:slug            named parameter (one segment)
    /blog/:slug?           optional parameter
    /docs/:path*           zero or more segments
    /docs/:path+           one or more segments
    /user/:id(\\d+)        parameter with a custom regular expression
    /files/(.*)            unnamed group
    /blog/*                bare wildcard (any remainder, including nothing)

Matching is case-insensitive, anchored at both ends, and tolerates one
trailing delimiter (``/blog/:slug`` matches ``/blog/hello/``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from routemap._errors import ConfigError

_DEFAULT_SEGMENT = r"[^/#?]+?"
_DELIMITER = r"[/#?]"
_PREFIXES = "./"
_NAME_CHARS = re.compile(r"[A-Za-z0-9_]")


@dataclass(frozen=True, slots=True)
class _Token:
    """A parameter or group parsed out of a pattern."""

    name: str | int
    prefix: str
    pattern: str
    modifier: str


def _read_group(pattern: str, start: int) -> tuple[str, int]:
    """Read a balanced ``(...)`` group beginning at *start*.

    Returns the inner expression and the index just past the closing paren.
    """
    depth = 1
    i = start + 1
    inner: list[str] = []
    if i < len(pattern) and pattern[i] == "?":
        msg = f"Pattern cannot start with '?' at {i} in {pattern!r}"
        raise ConfigError(msg)
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            inner.append(pattern[i:i + 2])
            i += 2
            continue
        if char == ")":
            depth -= 1
            if depth == 0:
                i += 1
                break
        elif char == "(":
            depth += 1
            if i + 1 < len(pattern) and pattern[i + 1] != "?":
                msg = f"Capturing groups are not allowed at {i} in {pattern!r}"
                raise ConfigError(msg)
        inner.append(char)
        i += 1
    if depth:
        msg = f"Unbalanced pattern at {start} in {pattern!r}"
        raise ConfigError(msg)
    if not inner:
        msg = f"Missing pattern at {start} in {pattern!r}"
        raise ConfigError(msg)
    return "".join(inner), i


def _tokenize(pattern: str) -> list[str | _Token]:
    """Split *pattern* into literal strings and parameter tokens."""
    tokens: list[str | _Token] = []
    literal: list[str] = []
    key = 0
    i = 0

    def take_prefix() -> str:
        if literal and literal[-1] in _PREFIXES:
            return literal.pop()
        return ""

    def flush() -> None:
        if literal:
            tokens.append("".join(literal))
            literal.clear()

    while i < len(pattern):
        char = pattern[i]

        if char == "\\" and i + 1 < len(pattern):
            literal.append(pattern[i + 1])
            i += 2
            continue

        if char == ":":
            j = i + 1
            while j < len(pattern) and _NAME_CHARS.match(pattern[j]):
                j += 1
            name = pattern[i + 1:j]
            if not name:
                msg = f"Missing parameter name at {i} in {pattern!r}"
                raise ConfigError(msg)
            param_pattern = _DEFAULT_SEGMENT
            if j < len(pattern) and pattern[j] == "(":
                param_pattern, j = _read_group(pattern, j)
            modifier = ""
            if j < len(pattern) and pattern[j] in "?*+":
                modifier = pattern[j]
                j += 1
            prefix = take_prefix()
            flush()
            tokens.append(_Token(name, prefix, param_pattern, modifier))
            i = j
            continue

        if char == "(":
            group, j = _read_group(pattern, i)
            modifier = ""
            if j < len(pattern) and pattern[j] in "?*+":
                modifier = pattern[j]
                j += 1
            prefix = take_prefix()
            flush()
            tokens.append(_Token(key, prefix, group, modifier))
            key += 1
            i = j
            continue

        if char == "*":
            # Bare wildcard: "/blog/*" also matches "/blog"
            prefix = take_prefix()
            flush()
            tokens.append(_Token(key, prefix, ".*", "?"))
            key += 1
            i += 1
            continue

        if char in "?+":
            msg = f"Unexpected modifier {char!r} at {i} in {pattern!r}"
            raise ConfigError(msg)

        literal.append(char)
        i += 1

    flush()
    return tokens


def _token_to_regex(token: _Token) -> str:
    prefix = re.escape(token.prefix)
    if not prefix:
        if token.modifier in ("+", "*"):
            return f"((?:{token.pattern}){token.modifier})"
        return f"({token.pattern}){token.modifier}"
    if token.modifier in ("+", "*"):
        repeat = "?" if token.modifier == "*" else ""
        return (
            f"(?:{prefix}((?:{token.pattern})(?:{prefix}(?:{token.pattern}))*))"
            f"{repeat}"
        )
    return f"(?:{prefix}({token.pattern})){token.modifier}"


@dataclass(frozen=True, slots=True)
class RouteMatcher:
    """A compiled route pattern.

    Attributes:
        pattern: The source pattern string.
        regex: Compiled regular expression.
        keys: Parameter names (or positional indexes for unnamed groups).

    """

    pattern: str
    regex: re.Pattern[str]
    keys: tuple[str | int, ...]

    def matches(self, route: str) -> bool:
        """Return True if *route* matches this pattern."""
        return self.regex.search(route) is not None

    def params(self, route: str) -> dict[str | int, str] | None:
        """Return captured parameters for *route*, or *None* if it does not match."""
        match = self.regex.search(route)
        if match is None:
            return None
        return {
            key: value
            for key, value in zip(self.keys, match.groups(), strict=True)
            if value is not None
        }

    def __call__(self, route: str) -> bool:
        return self.matches(route)


def compile_route_pattern(pattern: str) -> RouteMatcher:
    """Compile a path-to-regexp style *pattern* into a :class:`RouteMatcher`.

    Raises:
        ConfigError: If the pattern is malformed or yields an invalid regex.

    """
    tokens = _tokenize(pattern)
    parts: list[str] = []
    keys: list[str | int] = []
    for token in tokens:
        if isinstance(token, str):
            parts.append(re.escape(token))
        else:
            parts.append(_token_to_regex(token))
            keys.append(token.name)

    source = "^" + "".join(parts) + f"{_DELIMITER}?$"
    try:
        regex = re.compile(source, re.IGNORECASE)
    except re.error as exc:
        msg = f"Invalid route pattern {pattern!r}: {exc}"
        raise ConfigError(msg) from exc
    return RouteMatcher(pattern=pattern, regex=regex, keys=tuple(keys))
