"""Host pipeline adapter — register routemap as a post-discovery plugin.

A static-site pipeline that knows its routes calls the plugin once per build::

    plugin = SitemapPlugin(SitemapConfig(url_prefix="https://example.com"))
    plugin(["/", "/about", "/blog/post-1"])

Pipelines that keep plugins in a stage-keyed registry can use
:func:`use_sitemap_plugin` instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from routemap._errors import ConfigError
from routemap.app import run
from routemap.config import SitemapConfig
from routemap.routes.resolver import compile_overrides

if TYPE_CHECKING:
    from collections.abc import MutableMapping, Sequence
    from datetime import datetime

    from routemap.export.records import SitemapResult
    from routemap.observability.collector import BuildCollector

PLUGIN_NAME = "SitemapGenerator"
PLUGIN_STAGE = "route_discovery_done"


class SitemapPlugin:
    """Callable plugin wrapping :func:`routemap.app.run`.

    Args:
        config: Configuration for every invocation; defaults apply if omitted.
        collector: Optional event collector shared across invocations.

    """

    name = PLUGIN_NAME
    stage = PLUGIN_STAGE

    __slots__ = ("_collector", "_config")

    def __init__(
        self,
        config: SitemapConfig | None = None,
        *,
        collector: BuildCollector | None = None,
    ) -> None:
        self._config = config if config is not None else SitemapConfig()
        self._collector = collector

    @property
    def config(self) -> SitemapConfig:
        return self._config

    def __call__(
        self,
        routes: Sequence[str] | None = None,
        *,
        now: datetime | None = None,
    ) -> SitemapResult | None:
        return run(routes, self._config, now=now, collector=self._collector)

    def validate(self) -> list[str]:
        """Return configuration problems that would fail a run (empty if none)."""
        try:
            compile_overrides(self._config)
        except ConfigError as exc:
            return [str(exc)]
        return []


def use_sitemap_plugin(
    registry: MutableMapping[str, dict[str, SitemapPlugin]],
    config: SitemapConfig | None = None,
) -> SitemapPlugin:
    """Register a :class:`SitemapPlugin` in *registry* under its stage and name."""
    plugin = SitemapPlugin(config)
    registry.setdefault(plugin.stage, {})[plugin.name] = plugin
    return plugin
