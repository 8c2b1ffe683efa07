import threading
import time
from datetime import datetime, timedelta, timezone

import pytest
import requests

from mcp_catalog.directory import (
    CatalogCache,
    FetchError,
    HttpContentFetcher,
    LocalFileFetcher,
    ParseError,
    StaticContentFetcher,
)

README = """
A growing set of community-developed servers
[One](https://github.com/user/one) - First server
[Two](https://github.com/user/two) - Second server
"""


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


class ScriptedFetcher:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = 0

    def fetch(self, source):
        self.calls += 1
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def test_first_access_fetches_and_parses():
    clock = FakeClock()
    fetcher = StaticContentFetcher(README)
    cache = CatalogCache(fetcher, "readme", clock=clock)

    assert cache.is_stale()
    snapshot = cache.ensure_fresh()

    assert fetcher.calls == 1
    assert [e.name for e in snapshot.entries] == ["One", "Two"]
    assert snapshot.fetched_at == clock.now
    assert cache.snapshot is snapshot


def test_fresh_snapshot_is_reused_until_ttl_passes():
    clock = FakeClock()
    fetcher = StaticContentFetcher(README)
    cache = CatalogCache(fetcher, "readme", ttl=timedelta(hours=1), clock=clock)

    first = cache.ensure_fresh()
    clock.advance(minutes=60)
    assert cache.ensure_fresh() is first
    assert fetcher.calls == 1

    clock.advance(seconds=1)
    second = cache.ensure_fresh()
    assert fetcher.calls == 2
    assert second is not first
    assert second.fetched_at == clock.now


def test_empty_parse_result_is_refetched_every_time():
    clock = FakeClock()
    fetcher = StaticContentFetcher("no entries here")
    cache = CatalogCache(fetcher, "readme", clock=clock)

    cache.ensure_fresh()
    cache.ensure_fresh()

    assert fetcher.calls == 2


def test_force_refresh_ignores_ttl():
    clock = FakeClock()
    fetcher = StaticContentFetcher(README)
    cache = CatalogCache(fetcher, "readme", clock=clock)

    cache.ensure_fresh()
    clock.advance(seconds=5)
    snapshot = cache.force_refresh()

    assert fetcher.calls == 2
    assert snapshot.fetched_at == clock.now


def test_fetch_failure_keeps_previous_snapshot():
    clock = FakeClock()
    fetcher = ScriptedFetcher([README, FetchError("boom")])
    cache = CatalogCache(fetcher, "readme", clock=clock)

    before = cache.ensure_fresh()
    clock.advance(hours=2)

    with pytest.raises(FetchError, match="boom"):
        cache.ensure_fresh()
    assert cache.snapshot is before


def test_fetch_failure_on_empty_cache_leaves_it_empty():
    cache = CatalogCache(ScriptedFetcher([FetchError("offline")]), "readme")

    with pytest.raises(FetchError):
        cache.force_refresh()
    assert cache.snapshot.is_empty
    assert cache.snapshot.fetched_at is None


def test_parser_exception_is_reported_as_parse_error():
    def exploding_parser(content):
        raise RuntimeError("unexpected")

    cache = CatalogCache(StaticContentFetcher(README), "readme", parser=exploding_parser)

    with pytest.raises(ParseError) as excinfo:
        cache.ensure_fresh()
    assert isinstance(excinfo.value, FetchError)
    assert cache.snapshot.is_empty


def test_independent_caches_do_not_share_state():
    first = CatalogCache(StaticContentFetcher(README), "a")
    second = CatalogCache(StaticContentFetcher("nothing"), "b")

    first.ensure_fresh()

    assert len(first.snapshot.entries) == 2
    assert second.snapshot.is_empty


def test_concurrent_refreshes_share_one_fetch():
    release = threading.Event()

    class SlowFetcher:
        def __init__(self):
            self.calls = 0

        def fetch(self, source):
            self.calls += 1
            release.wait(timeout=5)
            return README

    fetcher = SlowFetcher()
    cache = CatalogCache(fetcher, "readme")
    results = []

    threads = [threading.Thread(target=lambda: results.append(cache.ensure_fresh())) for _ in range(3)]
    for t in threads:
        t.start()
    time.sleep(0.1)
    release.set()
    for t in threads:
        t.join(timeout=5)

    assert fetcher.calls == 1
    assert len(results) == 3
    assert all(r is results[0] for r in results)


class GatedFetcher:
    """Blocks its first fetch until released, then plays back scripted responses."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = 0
        self.started = threading.Event()
        self.release = threading.Event()

    def fetch(self, source):
        self.calls += 1
        if self.calls == 1:
            self.started.set()
            self.release.wait(timeout=5)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def run_two_force_refreshes(cache, fetcher):
    results = {}

    def refresh(key):
        try:
            results[key] = cache.force_refresh()
        except FetchError as exc:
            results[key] = exc

    first = threading.Thread(target=refresh, args=("first",))
    second = threading.Thread(target=refresh, args=("second",))
    first.start()
    assert fetcher.started.wait(timeout=5)
    second.start()
    time.sleep(0.1)
    fetcher.release.set()
    first.join(timeout=5)
    second.join(timeout=5)
    return results


def test_concurrent_force_refreshes_share_one_fetch():
    fetcher = GatedFetcher([README, README])
    cache = CatalogCache(fetcher, "readme")

    results = run_two_force_refreshes(cache, fetcher)

    assert fetcher.calls == 1
    assert results["first"] is results["second"]
    assert [e.name for e in results["second"].entries] == ["One", "Two"]


def test_force_refresh_after_failed_refresh_fetches_again():
    fetcher = GatedFetcher([FetchError("HTTP error! status: 503"), README])
    cache = CatalogCache(fetcher, "readme")

    results = run_two_force_refreshes(cache, fetcher)

    assert fetcher.calls == 2
    assert isinstance(results["first"], FetchError)
    assert [e.name for e in results["second"].entries] == ["One", "Two"]
    assert cache.snapshot is results["second"]


class StubResponse:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400


class StubSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requested = []

    def get(self, url, timeout=None):
        self.requested.append((url, timeout))
        if self.error:
            raise self.error
        return self.response


def test_http_fetcher_returns_body():
    session = StubSession(StubResponse(200, README))
    fetcher = HttpContentFetcher(timeout=3, session=session)

    assert fetcher.fetch("https://example.com/README.md") == README
    assert session.requested == [("https://example.com/README.md", 3)]


def test_http_fetcher_non_success_status():
    fetcher = HttpContentFetcher(session=StubSession(StubResponse(404)))

    with pytest.raises(FetchError, match="404"):
        fetcher.fetch("https://example.com/missing")


def test_http_fetcher_network_error():
    fetcher = HttpContentFetcher(session=StubSession(error=requests.ConnectionError("refused")))

    with pytest.raises(FetchError, match="refused"):
        fetcher.fetch("https://example.com/README.md")


def test_local_file_fetcher(tmp_path):
    readme = tmp_path / "README.md"
    readme.write_text(README, encoding="utf-8")

    assert LocalFileFetcher().fetch(str(readme)) == README
    with pytest.raises(FetchError):
        LocalFileFetcher().fetch(str(tmp_path / "missing.md"))
