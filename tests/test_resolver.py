"""Tests for collecting managed entries and resolving production IPs.

Lookups and sleeps are injected so retry behaviour is checked without
touching the network or the clock.
"""

import socket
from typing import List, Optional

from muko.models import ManagedEntry
from muko.resolver import DomainResolver, RetryPolicy, collect_entries, lookup_host


class ScriptedLookup:
    """Return queued answers in order and record every query."""

    def __init__(self, answers: List[Optional[str]]) -> None:
        self.answers = list(answers)
        self.queries: List[str] = []

    def __call__(self, domain: str) -> Optional[str]:
        self.queries.append(domain)
        return self.answers.pop(0) if self.answers else None


def _resolver(lookup: ScriptedLookup, sleeps: List[float]) -> DomainResolver:
    return DomainResolver(lookup=lookup, sleep=sleeps.append)


PROD_ENTRY = ManagedEntry(ip="127.0.0.1", domain="foo.test", alias="foo", active=False)


class TestCollectEntries:
    """Verify extraction of managed entries from raw lines."""

    def test_file_order_and_filtering(self, sample_lines: list) -> None:
        """Only managed lines are returned, in file order."""
        entries = collect_entries(sample_lines)
        assert [e.domain for e in entries] == ["foo.test", "bar.test"]
        assert [e.active for e in entries] == [True, False]

    def test_malformed_tagged_lines_skipped(self) -> None:
        """Tagged lines failing the grammar are left out of the report."""
        assert collect_entries(["bogus #muko: x", "# just a comment"]) == []


class TestDomainResolver:
    """Verify the bounded retry policy."""

    def test_first_different_answer_accepted(self) -> None:
        """A different address on the first attempt stops retrying."""
        lookup = ScriptedLookup(["93.184.216.34"])
        sleeps: List[float] = []
        entry = _resolver(lookup, sleeps).resolve(PROD_ENTRY)
        assert entry.prod_ip == "93.184.216.34"
        assert lookup.queries == ["foo.test"]
        assert sleeps == []

    def test_retry_until_different_address(self) -> None:
        """Override answers are retried; a later real address wins."""
        lookup = ScriptedLookup(["127.0.0.1", "127.0.0.1", "93.184.216.34"])
        sleeps: List[float] = []
        entry = _resolver(lookup, sleeps).resolve(PROD_ENTRY)
        assert entry.prod_ip == "93.184.216.34"
        assert len(lookup.queries) == 3
        assert sleeps == [0.1, 0.1]

    def test_override_kept_when_nothing_else_resolves(self) -> None:
        """If only the override ever resolves, it is reported provisionally."""
        lookup = ScriptedLookup(["127.0.0.1", None, None])
        entry = _resolver(lookup, []).resolve(PROD_ENTRY)
        assert entry.prod_ip == "127.0.0.1"

    def test_all_attempts_fail(self) -> None:
        """Exhausted retries leave prod_ip absent without raising."""
        lookup = ScriptedLookup([None, None, None])
        sleeps: List[float] = []
        entry = _resolver(lookup, sleeps).resolve(PROD_ENTRY)
        assert entry.prod_ip is None
        assert len(lookup.queries) == 3
        assert sleeps == [0.1, 0.1]

    def test_active_entry_never_resolved(self) -> None:
        """DEV-mode entries must not trigger any lookup."""
        lookup = ScriptedLookup(["93.184.216.34"])
        active = ManagedEntry(ip="127.0.0.1", domain="foo.test", alias="foo")
        entry = _resolver(lookup, []).resolve(active)
        assert entry.prod_ip is None
        assert lookup.queries == []

    def test_custom_policy(self) -> None:
        """The attempt count and delay come from the policy."""
        lookup = ScriptedLookup([])
        sleeps: List[float] = []
        resolver = DomainResolver(
            lookup=lookup, policy=RetryPolicy(max_attempts=5, delay=0.5), sleep=sleeps.append
        )
        resolver.resolve(PROD_ENTRY)
        assert len(lookup.queries) == 5
        assert sleeps == [0.5] * 4

    def test_resolve_does_not_mutate_input(self) -> None:
        """A new entry is returned; the original keeps prod_ip unset."""
        entry = _resolver(ScriptedLookup(["8.8.8.8"]), []).resolve(PROD_ENTRY)
        assert entry is not PROD_ENTRY
        assert PROD_ENTRY.prod_ip is None

    def test_report_isolates_failures(self) -> None:
        """One unresolvable domain does not affect the others."""
        answers = {"a.test": None, "b.test": "10.9.8.7"}
        queries: List[str] = []

        def lookup(domain: str) -> Optional[str]:
            queries.append(domain)
            return answers[domain]

        lines = [
            "#127.0.0.1 a.test #muko: a",
            "127.0.0.1 c.test #muko: c",
            "#127.0.0.1 b.test #muko: b",
        ]
        entries = DomainResolver(lookup=lookup, sleep=lambda _: None).report(lines)
        assert [e.domain for e in entries] == ["a.test", "c.test", "b.test"]
        assert [e.prod_ip for e in entries] == [None, None, "10.9.8.7"]
        assert queries == ["a.test"] * 3 + ["b.test"]


class TestLookupHost:
    """Verify the system resolver wrapper."""

    def test_first_address_returned(self, monkeypatch) -> None:
        """The first getaddrinfo result's address is used."""
        def fake_getaddrinfo(host, port):
            return [
                (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("203.0.113.7", 0)),
                (socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("2001:db8::1", 0, 0, 0)),
            ]

        monkeypatch.setattr(socket, "getaddrinfo", fake_getaddrinfo)
        assert lookup_host("foo.test") == "203.0.113.7"

    def test_resolution_error_returns_none(self, monkeypatch) -> None:
        """Resolver errors are reported as None."""
        def fake_getaddrinfo(host, port):
            raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

        monkeypatch.setattr(socket, "getaddrinfo", fake_getaddrinfo)
        assert lookup_host("nope.invalid") is None

    def test_empty_result_returns_none(self, monkeypatch) -> None:
        """An empty answer list is treated as unresolvable."""
        monkeypatch.setattr(socket, "getaddrinfo", lambda host, port: [])
        assert lookup_host("foo.test") is None
