"""Routemap configuration.

SitemapConfig is the global configuration object, frozen after creation.
RouteOverride carries the per-route settings layered on top of it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any

from routemap._errors import ConfigError
from routemap._types import ChangeFreq, IgnoreEntry, OverrideMode, Priority

CHANGE_FREQUENCIES: frozenset[str] = frozenset({
    "always",
    "hourly",
    "daily",
    "weekly",
    "monthly",
    "yearly",
    "never",
})

_OVERRIDE_MODES: frozenset[str] = frozenset({"truthy", "presence"})

DEFAULT_PRIORITY = "0.5"


def normalize_priority(value: object) -> Priority | None:
    """Coerce a configured priority into a string or a tuple of strings.

    Numbers (as they come out of YAML/TOML) are converted with ``str()``.

    Raises:
        ConfigError: If the value is neither a scalar nor a list of scalars.

    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        msg = f"Invalid priority {value!r}: expected a string or a list of strings"
        raise ConfigError(msg)
    if isinstance(value, int | float):
        return str(value)
    if isinstance(value, list | tuple):
        items: list[str] = []
        for item in value:
            if isinstance(item, bool) or not isinstance(item, str | int | float):
                msg = f"Invalid priority list entry {item!r}"
                raise ConfigError(msg)
            items.append(str(item))
        return tuple(items)
    msg = f"Invalid priority {value!r}: expected a string or a list of strings"
    raise ConfigError(msg)


def normalize_last_mod(value: object) -> str | None:
    """Coerce a configured ``last_mod`` into an ISO-8601 string.

    Unquoted timestamps in YAML/TOML arrive as ``datetime`` or ``date``
    objects.  Datetimes are formatted like the run timestamp; dates keep
    the ``YYYY-MM-DD`` form.

    Raises:
        ConfigError: If the value is not a string, date, or datetime.

    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, datetime):
        from routemap.export.sitemap import format_timestamp

        return format_timestamp(value)
    if isinstance(value, date):
        return value.isoformat()
    msg = f"Invalid last_mod {value!r}: expected an ISO-8601 timestamp"
    raise ConfigError(msg)


def _check_change_freq(value: str | None, where: str, *, allow_empty: bool = False) -> None:
    if value is None or (allow_empty and value == ""):
        return
    if value not in CHANGE_FREQUENCIES:
        allowed = ", ".join(sorted(CHANGE_FREQUENCIES))
        msg = f"Invalid change_freq {value!r} in {where} (expected one of: {allowed})"
        raise ConfigError(msg)


@dataclass(frozen=True, slots=True)
class RouteOverride:
    """Settings applied to routes matching *pattern*.

    Every field except ``pattern`` is optional; ``None`` means "not set here,
    use the global value".

    Attributes:
        pattern: Route pattern, e.g. ``"/blog/:slug"`` or ``"/docs/(.*)"``.
        url_prefix: Base URL for matching routes.
        trailing_slash: Append a trailing slash to generated URLs.
        sitemap_filename: Sitemap file matching routes are written to.
        merge: Merge into an existing sitemap file if one exists.
        change_freq: Expected change frequency.
        priority: Priority string, or one priority per route depth.
        last_mod: Fixed ISO-8601 modification timestamp.

    """

    pattern: str
    url_prefix: str | None = None
    trailing_slash: bool | None = None
    sitemap_filename: str | None = None
    merge: bool | None = None
    change_freq: ChangeFreq | None = None
    priority: Priority | None = None
    last_mod: str | None = None

    def __post_init__(self) -> None:
        _check_change_freq(
            self.change_freq, f"route override {self.pattern!r}", allow_empty=True,
        )
        object.__setattr__(self, "priority", normalize_priority(self.priority))
        object.__setattr__(self, "last_mod", normalize_last_mod(self.last_mod))

    @classmethod
    def from_mapping(cls, pattern: str, data: Mapping[str, Any]) -> RouteOverride:
        """Build an override from a plain mapping (e.g. a parsed YAML table).

        Raises:
            ConfigError: On unknown keys.

        """
        known = set(cls.__dataclass_fields__) - {"pattern"}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"Unknown setting(s) for route {pattern!r}: {', '.join(unknown)}"
            raise ConfigError(msg)
        return cls(pattern=pattern, **data)


def _override_from_item(item: object) -> RouteOverride:
    """Accept an override given as a list entry: a RouteOverride or a table with ``pattern``."""
    if isinstance(item, RouteOverride):
        return item
    if isinstance(item, Mapping) and isinstance(item.get("pattern"), str):
        data = {k: v for k, v in item.items() if k != "pattern"}
        return RouteOverride.from_mapping(item["pattern"], data)
    msg = f"Route override {item!r} must be a table with a 'pattern' key"
    raise ConfigError(msg)


@dataclass(frozen=True, slots=True)
class SitemapConfig:
    """Global configuration for one sitemap generation run.

    Attributes:
        root: Project root. Always resolved to an absolute path on construction.
        output: Output directory holding the exported site.
        url_prefix: Base URL the routes are joined to.
        sitemap_filename: Default (and primary) sitemap filename.
        create_robots_file: Write a ``robots.txt`` pointing at the sitemap.
        merge: Merge into existing sitemap files instead of replacing them.
        change_freq: Default ``<changefreq>`` value.
        priority: Default priority, or one priority per route depth.
        last_mod: Fixed ``<lastmod>`` value; the run's start time when unset.
        ignored_routes: Routes left out of every sitemap.
        trailing_slash: Append a trailing slash to generated URLs.
        routes: Ordered per-route overrides. The first matching pattern wins.
            A mapping of ``pattern -> settings``, or a list of tables that
            each carry a ``pattern`` key, is accepted and converted.
        suppress_log: Silence status output on stderr.
        override_mode: ``"truthy"`` lets an override win only when its value
            is truthy, so ``False`` or ``""`` never beats a truthy global.
            ``"presence"`` lets any value other than ``None`` win.

    """

    root: Path = field(default_factory=Path.cwd)
    output: Path = field(default_factory=lambda: Path("dist"))
    url_prefix: str = "http://localhost"
    sitemap_filename: str = "sitemap.xml"
    create_robots_file: bool = False
    merge: bool = False
    change_freq: ChangeFreq = "monthly"
    priority: Priority | None = DEFAULT_PRIORITY
    last_mod: str | None = None
    ignored_routes: tuple[IgnoreEntry, ...] = ()
    trailing_slash: bool = False
    routes: tuple[RouteOverride, ...] = ()
    suppress_log: bool = False
    override_mode: OverrideMode = "truthy"

    def __post_init__(self) -> None:
        if not isinstance(self.root, Path):
            object.__setattr__(self, "root", Path(self.root))
        if not isinstance(self.output, Path):
            object.__setattr__(self, "output", Path(self.output))
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())

        _check_change_freq(self.change_freq, "global configuration")
        if self.override_mode not in _OVERRIDE_MODES:
            msg = (
                f"Invalid override_mode {self.override_mode!r} "
                f"(expected 'truthy' or 'presence')"
            )
            raise ConfigError(msg)

        object.__setattr__(self, "priority", normalize_priority(self.priority))
        object.__setattr__(self, "last_mod", normalize_last_mod(self.last_mod))
        object.__setattr__(self, "ignored_routes", tuple(self.ignored_routes))

        routes = self.routes
        if isinstance(routes, Mapping):
            routes = tuple(
                value if isinstance(value, RouteOverride)
                else RouteOverride.from_mapping(pattern, value or {})
                for pattern, value in routes.items()
            )
        else:
            routes = tuple(_override_from_item(item) for item in routes)
        object.__setattr__(self, "routes", routes)

    @property
    def output_path(self) -> Path:
        """Absolute path to output directory."""
        if self.output.is_absolute():
            return self.output
        return self.root / self.output
