"""Routemap — sitemap.xml and robots.txt for static-site builds.

Runs once a build pipeline knows its routes: every route is resolved
against per-route overrides, bucketed into one or more sitemap files, and
merged with what a previous build left on disk when asked to.

Quick start::

    import routemap

    config = routemap.SitemapConfig(
        url_prefix="https://example.com",
        create_robots_file=True,
    )
    routemap.run(["/", "/about", "/blog/post-1"], config)

Standalone, reading ``routemap.yaml`` and discovering routes from the
exported HTML::

    routemap.build("my-site/")

"""

__version__ = "0.1.0"
__all__ = [
    "RouteOverride",
    "SitemapConfig",
    "SitemapPlugin",
    "__version__",
    "build",
    "run",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routemap`` fast while providing a clean top-level API.
    """
    if name in ("SitemapConfig", "RouteOverride"):
        from routemap import config

        return getattr(config, name)

    if name in ("run", "build"):
        from routemap import app

        return getattr(app, name)

    if name == "SitemapPlugin":
        from routemap.plugin import SitemapPlugin

        return SitemapPlugin

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
