"""Route discovery — recover clean routes from an exported site.

Inverts the clean-URL convention used by static exporters:

    output/index.html              -> /
    output/about/index.html        -> /about
    output/docs/intro/index.html   -> /docs/intro
    output/search.html             -> /search

Used when no host pipeline hands over a route list (e.g. the ``routemap``
CLI run against an already-built output directory).
"""

from pathlib import Path

# Exported error pages never belong in a sitemap
_SKIPPED_FILES: frozenset[str] = frozenset({"404.html", "500.html"})


def discover_routes(output_dir: Path) -> tuple[str, ...]:
    """Return the sorted routes for every HTML page under *output_dir*.

    Skips error pages and any path with a component starting with ``.`` or
    ``_``.  Returns an empty tuple when *output_dir* does not exist.

    """
    if not output_dir.is_dir():
        return ()

    routes: set[str] = set()
    for html_file in output_dir.rglob("*.html"):
        relative = html_file.relative_to(output_dir)
        if any(part.startswith((".", "_")) for part in relative.parts):
            continue
        if relative.name in _SKIPPED_FILES:
            continue
        routes.add(_file_to_route(relative))

    return tuple(sorted(routes))


def _file_to_route(relative: Path) -> str:
    """Map a path relative to the output root to its route."""
    if relative.name == "index.html":
        parts = relative.parent.parts
    else:
        parts = (*relative.parent.parts, relative.stem)
    return "/" + "/".join(parts)
