"""Sitemap documents — build, read, and write sitemap.xml files.

A sitemap is held in memory as an ordered mapping of location to
:class:`SitemapEntry`.  Writing always replaces the whole file, so merging
with a previous run means loading it first, updating the mapping, and
writing it back out.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, ParseError, SubElement, fromstring, indent, tostring

from routemap._errors import ExportError, SitemapError
from routemap.config import DEFAULT_PRIORITY
from routemap.export.records import ExportedFile

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from routemap._types import Priority

# XML namespace for sitemaps
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


@dataclass(frozen=True, slots=True)
class SitemapEntry:
    """One ``<url>`` element of a sitemap.

    Attributes:
        loc: Absolute URL; unique within one sitemap.
        changefreq: Expected change frequency.
        lastmod: ISO-8601 modification timestamp.
        priority: Priority as a string (e.g. ``"0.5"``).  *None* is written
            as an empty element.

    """

    loc: str
    changefreq: str | None = None
    lastmod: str | None = None
    priority: str | None = None


# ---------------------------------------------------------------------------
# Entry fields
# ---------------------------------------------------------------------------


def build_location(url_prefix: str, route: str, trailing_slash: bool = False) -> str:
    """Join *url_prefix* and *route* with exactly one slash between them.

    ``("https://a.com/", "/x")`` and ``("https://a.com", "x")`` both give
    ``"https://a.com/x"``.  With *trailing_slash*, a ``/`` is appended
    unless the URL already ends in one.

    """
    if url_prefix.endswith("/") and route.startswith("/"):
        loc = url_prefix + route[1:]
    elif not url_prefix.endswith("/") and not route.startswith("/"):
        loc = f"{url_prefix}/{route}"
    else:
        loc = url_prefix + route

    if trailing_slash and not loc.endswith("/"):
        loc += "/"
    return loc


def route_depth(route: str) -> int:
    """Number of path segments in *route* (``"/"`` counts as one)."""
    return len(route.strip("/").split("/"))


def compute_priority(route: str, priority: Priority | None) -> str | None:
    """Priority for *route*.

    A single string is returned as-is.  A sequence is indexed by the route's
    depth (``"/a/b"`` uses index 1); a depth beyond the end of the sequence
    yields *None*.  Without any configured priority the result is ``"0.5"``.

    """
    if isinstance(priority, str):
        return priority
    if priority is not None:
        index = route_depth(route) - 1
        if index < len(priority):
            return priority[index]
        return None
    return DEFAULT_PRIORITY


def format_timestamp(moment: datetime) -> str:
    """Format *moment* as a UTC ISO-8601 string with millisecond precision.

    Naive datetimes are taken to be UTC already.

    >>> format_timestamp(datetime(2024, 5, 1, 12, 30, tzinfo=UTC))
    '2024-05-01T12:30:00.000Z'

    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def generate_sitemap(entries: Mapping[str, SitemapEntry]) -> str:
    """Serialize *entries* to a sitemap XML string.

    Entries are written in mapping order, each with ``loc``, ``changefreq``,
    ``lastmod`` and ``priority`` children in that order.

    """
    urlset = Element("urlset")
    urlset.set("xmlns", SITEMAP_NS)

    for entry in entries.values():
        url_el = SubElement(urlset, "url")
        SubElement(url_el, "loc").text = entry.loc
        SubElement(url_el, "changefreq").text = entry.changefreq
        SubElement(url_el, "lastmod").text = entry.lastmod
        SubElement(url_el, "priority").text = entry.priority

    indent(urlset, space="  ")
    xml = tostring(urlset, encoding="unicode", xml_declaration=False)
    return _XML_DECLARATION + xml + "\n"


def parse_sitemap(xml: str) -> dict[str, SitemapEntry]:
    """Parse a sitemap XML string into an ordered location -> entry mapping.

    Namespaced and namespace-less documents are both accepted.  ``<url>``
    elements without a ``<loc>`` are skipped.

    Raises:
        SitemapError: If the document is not well-formed or is not a
            ``<urlset>``.

    """
    try:
        root = fromstring(xml)
    except ParseError as exc:
        msg = f"Malformed sitemap document: {exc}"
        raise SitemapError(msg) from exc

    if _local_name(root.tag) != "urlset":
        msg = f"Expected a <urlset> root element, found <{_local_name(root.tag)}>"
        raise SitemapError(msg)

    entries: dict[str, SitemapEntry] = {}
    for url_el in root:
        if _local_name(url_el.tag) != "url":
            continue
        fields = {
            _local_name(child.tag): (child.text or "").strip() for child in url_el
        }
        loc = fields.get("loc")
        if not loc:
            continue
        entries[loc] = SitemapEntry(
            loc=loc,
            changefreq=fields.get("changefreq") or None,
            lastmod=fields.get("lastmod") or None,
            priority=fields.get("priority") or None,
        )
    return entries


def _local_name(tag: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix from *tag*."""
    return tag.rsplit("}", 1)[-1]


# ---------------------------------------------------------------------------
# Filesystem
# ---------------------------------------------------------------------------


def load_sitemap(path: Path) -> dict[str, SitemapEntry] | None:
    """Load the sitemap at *path*, or return *None* if there is no file.

    Raises:
        SitemapError: If the file exists but cannot be read or parsed.

    """
    if not path.exists():
        return None
    try:
        xml = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read existing sitemap {path}: {exc}"
        raise SitemapError(msg) from exc
    try:
        return parse_sitemap(xml)
    except SitemapError as exc:
        msg = f"Cannot merge into {path}: {exc}"
        raise SitemapError(msg) from exc


def write_sitemap(
    entries: Mapping[str, SitemapEntry],
    filename: str,
    output_dir: Path,
) -> ExportedFile:
    """Write *entries* to ``output_dir / filename``, replacing any existing file.

    The output directory must already exist.

    Returns:
        An :class:`ExportedFile` record; ``entry_count`` is the number of
        ``<url>`` elements written.

    Raises:
        ExportError: If the file cannot be written.

    """
    t0 = time.perf_counter()
    xml = generate_sitemap(entries)

    sitemap_path = output_dir / filename
    data = xml.encode("utf-8")
    try:
        sitemap_path.write_bytes(data)
    except OSError as exc:
        msg = f"Failed to write sitemap {sitemap_path}: {exc}"
        raise ExportError(msg) from exc
    elapsed = (time.perf_counter() - t0) * 1000

    return ExportedFile(
        source_path=filename,
        output_path=sitemap_path,
        source_type="sitemap",
        entry_count=len(entries),
        size_bytes=len(data),
        duration_ms=elapsed,
    )
