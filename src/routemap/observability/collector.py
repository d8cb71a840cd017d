"""Build collector — records what a sitemap run did into an ``EventLog``.

One collector is passed through a run; the builder and the writers report
to it.  A host pipeline may hand in its own collector to keep events from
several runs in one log.

"""

from __future__ import annotations

from routemap.observability.events import BuildEvent, RouteIgnored, RouteResolved, now_ns
from routemap.observability.log import EventLog


class BuildCollector:
    """Event collector for sitemap generation.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    # ----- Route events -----

    def record_route(
        self,
        route: str,
        location: str,
        filename: str,
        *,
        pattern: str | None = None,
    ) -> None:
        """Record a route placed into a sitemap."""
        self._log.append(
            RouteResolved(
                route=route,
                location=location,
                filename=filename,
                pattern=pattern,
                timestamp_ns=now_ns(),
            )
        )

    def record_ignored(self, route: str) -> None:
        """Record a route skipped by the ignore list."""
        self._log.append(RouteIgnored(route=route, timestamp_ns=now_ns()))

    # ----- File events -----

    def record_build(
        self,
        kind: str,
        source: str,
        target: str,
        *,
        entry_count: int = 0,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a file read or write."""
        self._log.append(
            BuildEvent(
                kind=kind,  # type: ignore[arg-type]
                source=source,
                target=target,
                entry_count=entry_count,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )
