"""Load SitemapConfig from routemap.yaml / routemap.toml if present.

Merges file config with keyword overrides. Keyword overrides win.
"""

from __future__ import annotations

import re
import tomllib
from pathlib import Path
from typing import Any

import yaml

from routemap._errors import ConfigError
from routemap.config import SitemapConfig
from routemap.routes.matcher import compile_route_pattern

_CONFIG_KEYS: frozenset[str] = frozenset({
    "output",
    "url_prefix",
    "sitemap_filename",
    "create_robots_file",
    "merge",
    "change_freq",
    "priority",
    "last_mod",
    "ignored_routes",
    "trailing_slash",
    "routes",
    "suppress_log",
    "override_mode",
})


def load_config(root: Path | str, **overrides: object) -> SitemapConfig:
    """Load SitemapConfig from *root*, optionally merging routemap.yaml.

    Looks for routemap.yaml, routemap.yml, or routemap.toml in *root*.  If
    found, loads it and merges *overrides* on top.  Overrides whose value is
    *None* are dropped so that unset CLI flags do not mask file settings.

    Raises:
        ConfigError: If the file cannot be parsed or contains invalid values.

    """
    root = Path(root)
    file_config = _read_routemap_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    if "output" in merged and not isinstance(merged["output"], Path):
        merged["output"] = Path(str(merged["output"]))
    if "ignored_routes" in merged:
        merged["ignored_routes"] = _parse_ignored(merged["ignored_routes"])
    if "routes" in merged and merged["routes"] is not None:
        if not isinstance(merged["routes"], dict | tuple | list):
            msg = "'routes' must be a table of route pattern -> settings"
            raise ConfigError(msg)
    try:
        return SitemapConfig(root=root, **merged)  # type: ignore[arg-type]
    except TypeError as exc:
        msg = f"Invalid routemap configuration: {exc}"
        raise ConfigError(msg) from exc


def _read_routemap_config(root: Path) -> dict[str, Any]:
    """Read routemap config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("routemap.yaml", "routemap.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "routemap.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping at the top level"
        raise ConfigError(msg)
    return _flatten_routemap_section(data, path)


def _parse_toml(path: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_routemap_section(data, path)


def _flatten_routemap_section(data: dict[str, Any], path: Path) -> dict[str, Any]:
    """Extract routemap.* keys into top-level config.

    Keys inside a ``routemap`` section take precedence over the same keys at
    the top level.

    Raises:
        ConfigError: On unknown keys inside the ``routemap`` section.

    """
    result: dict[str, Any] = {
        k: v for k, v in data.items() if k != "routemap" and k in _CONFIG_KEYS
    }
    section = data.get("routemap")
    if isinstance(section, dict):
        unknown = sorted(set(section) - _CONFIG_KEYS)
        if unknown:
            msg = f"Unknown setting(s) in {path}: {', '.join(unknown)}"
            raise ConfigError(msg)
        result.update(section)
    return result


def _parse_ignored(value: object) -> tuple[object, ...]:
    """Turn file-style ignore entries into strings, regexes, and matchers.

    Accepted forms::

        - /admin                  # exact route
        - pattern: /drafts/:slug  # route pattern
        - regex: ^/tmp/           # regular expression (searched)

    Already compiled entries (``re.Pattern``, ``RouteMatcher``) pass through.

    """
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, list | tuple):
        msg = "'ignored_routes' must be a list"
        raise ConfigError(msg)

    entries: list[object] = []
    for item in value:
        if isinstance(item, dict):
            if set(item) == {"pattern"}:
                entries.append(compile_route_pattern(str(item["pattern"])))
            elif set(item) == {"regex"}:
                try:
                    entries.append(re.compile(str(item["regex"])))
                except re.error as exc:
                    msg = f"Invalid ignore regex {item['regex']!r}: {exc}"
                    raise ConfigError(msg) from exc
            else:
                msg = f"Ignore entry {item!r} must have exactly one of 'pattern' or 'regex'"
                raise ConfigError(msg)
        else:
            entries.append(item)
    return tuple(entries)
