"""Tests for routemap.observability — run events."""

import threading

from routemap.observability.collector import BuildCollector
from routemap.observability.events import BuildEvent, RouteIgnored, RouteResolved, now_ns
from routemap.observability.log import EventLog


def _resolved(route: str, filename: str = "sitemap.xml") -> RouteResolved:
    return RouteResolved(
        route=route,
        location=f"http://localhost{route}",
        filename=filename,
        pattern=None,
        timestamp_ns=now_ns(),
    )


# ---------------------------------------------------------------------------
# EventLog
# ---------------------------------------------------------------------------


class TestEventLog:
    """Tests for the event log store."""

    def test_append_and_len(self) -> None:
        log = EventLog()
        assert len(log) == 0
        log.append(_resolved("/"))
        assert len(log) == 1

    def test_max_events_enforced(self) -> None:
        log = EventLog(max_events=5)
        for i in range(10):
            log.append(_resolved(f"/{i}"))
        assert len(log) == 5

    def test_recent(self) -> None:
        log = EventLog()
        for i in range(5):
            log.append(_resolved(f"/{i}"))
        recent = log.recent(3)
        assert len(recent) == 3
        assert recent[-1].route == "/4"

    def test_query_by_type(self) -> None:
        log = EventLog()
        log.append(_resolved("/a"))
        log.append(RouteIgnored(route="/admin", timestamp_ns=now_ns()))
        log.append(_resolved("/b"))

        results = log.query(event_type=RouteResolved)
        assert len(results) == 2
        assert all(isinstance(r, RouteResolved) for r in results)

    def test_query_newest_first(self) -> None:
        log = EventLog()
        log.append(_resolved("/a"))
        log.append(_resolved("/b"))
        assert [e.route for e in log.query()] == ["/b", "/a"]

    def test_query_by_route(self) -> None:
        log = EventLog()
        log.append(_resolved("/a"))
        log.append(_resolved("/a/b"))
        assert [e.route for e in log.query(route="/a")] == ["/a"]

    def test_query_by_filename(self) -> None:
        log = EventLog()
        log.append(_resolved("/a", "blog.xml"))
        log.append(_resolved("/b"))
        log.append(BuildEvent(
            kind="write_sitemap", source="blog.xml", target="/out/blog.xml",
            entry_count=1, duration_ms=1.0, timestamp_ns=now_ns(),
        ))

        results = log.query(filename="blog.xml")
        assert len(results) == 2

    def test_query_since(self) -> None:
        log = EventLog()
        log.append(RouteIgnored(route="/old", timestamp_ns=100))
        log.append(RouteIgnored(route="/new", timestamp_ns=200))
        assert [e.route for e in log.query(since_ns=150)] == ["/new"]

    def test_query_limit(self) -> None:
        log = EventLog()
        for i in range(10):
            log.append(_resolved(f"/{i}"))
        assert len(log.query(limit=3)) == 3

    def test_clear(self) -> None:
        log = EventLog()
        log.append(_resolved("/a"))
        assert log.clear() == 1
        assert len(log) == 0

    def test_stats(self) -> None:
        log = EventLog(max_events=50)
        log.append(_resolved("/a"))
        log.append(RouteIgnored(route="/admin", timestamp_ns=now_ns()))
        log.append(_resolved("/b"))

        stats = log.stats()
        assert stats["total"] == 3
        assert stats["max_events"] == 50
        assert stats["by_type"] == {"RouteResolved": 2, "RouteIgnored": 1}

    def test_concurrent_appends(self) -> None:
        log = EventLog()

        def worker(n: int) -> None:
            for i in range(100):
                log.append(_resolved(f"/{n}/{i}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(log) == 400


# ---------------------------------------------------------------------------
# BuildCollector
# ---------------------------------------------------------------------------


class TestBuildCollector:
    """Tests for the event collector."""

    def test_default_log(self) -> None:
        collector = BuildCollector()
        assert isinstance(collector.log, EventLog)

    def test_shared_log(self) -> None:
        log = EventLog()
        collector = BuildCollector(log)
        collector.record_ignored("/admin")
        assert len(log) == 1

    def test_record_route(self) -> None:
        collector = BuildCollector()
        collector.record_route(
            "/blog/x", "https://a.com/blog/x", "blog.xml", pattern="/blog/:slug",
        )

        event = collector.log.recent(1)[0]
        assert isinstance(event, RouteResolved)
        assert event.filename == "blog.xml"
        assert event.pattern == "/blog/:slug"
        assert event.timestamp_ns > 0

    def test_record_build(self) -> None:
        collector = BuildCollector()
        collector.record_build(
            "write_sitemap", "sitemap.xml", "/out/sitemap.xml",
            entry_count=3, duration_ms=2.5,
        )

        event = collector.log.recent(1)[0]
        assert isinstance(event, BuildEvent)
        assert event.kind == "write_sitemap"
        assert event.entry_count == 3
        assert event.duration_ms == 2.5
