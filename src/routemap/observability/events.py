"""Event model for sitemap generation runs.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

"""

import time
from dataclasses import dataclass
from typing import Literal


# ---------------------------------------------------------------------------
# Route events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RouteResolved:
    """A route was resolved and placed in a sitemap.

    Attributes:
        route: The route as handed over by the host.
        location: Final absolute URL written to the sitemap.
        filename: Sitemap file the entry belongs to.
        pattern: Override pattern that applied, or *None*.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    route: str
    location: str
    filename: str
    pattern: str | None
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RouteIgnored:
    """A route matched the ignore list and was left out.

    Attributes:
        route: The skipped route.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    route: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# File events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class BuildEvent:
    """A sitemap or robots file was read or written.

    Attributes:
        kind: The type of file action.
        source: Logical file name (e.g. ``"sitemap.xml"``).
        target: Filesystem path that was read or written.
        entry_count: Sitemap entries involved (0 for robots.txt).
        duration_ms: Time taken in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: Literal["load_sitemap", "write_sitemap", "write_robots"]
    source: str
    target: str
    entry_count: int
    duration_ms: float
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type SitemapEvent = RouteResolved | RouteIgnored | BuildEvent


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
