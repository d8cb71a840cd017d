"""Run observability — a queryable record of what a sitemap run did.

Quick Start:
    >>> from routemap.observability import BuildCollector, RouteIgnored
    >>> collector = BuildCollector()
    >>> # routemap.app.run(routes, config, collector=collector)
    >>> ignored = collector.log.query(event_type=RouteIgnored)

"""

from routemap.observability.collector import BuildCollector
from routemap.observability.events import (
    BuildEvent,
    RouteIgnored,
    RouteResolved,
    SitemapEvent,
    now_ns,
)
from routemap.observability.log import EventLog

__all__ = [
    "BuildCollector",
    "BuildEvent",
    "EventLog",
    "RouteIgnored",
    "RouteResolved",
    "SitemapEvent",
    "now_ns",
]
