"""Tests for servicetag_lookup.ip.matcher module."""

import threading

import pytest

from servicetag_lookup.ip.cidr import MalformedInput, RangeMetadata
from servicetag_lookup.ip.matcher import QueryResult, RangeTable, SkippedEntry, build_table


def _meta(name, region=""):
    return RangeMetadata(service_name=name, region=region)


@pytest.fixture
def overlapping_table():
    table, skipped = build_table([
        ("10.0.0.0/8", _meta("Wide")),
        ("10.1.0.0/16", _meta("Narrow", "westus")),
        ("192.168.1.0/24", _meta("Lan")),
        ("2001:db8::/32", _meta("DocV6")),
    ])
    assert skipped == []
    return table


class TestBuildTable:
    def test_scenario_skips_bad_entry(self):
        table, skipped = build_table(["10.0.0.0/8", "bad-cidr", "2001:db8::/32"])

        assert len(table) == 2
        assert len(skipped) == 1
        assert skipped[0].text == "bad-cidr"
        assert isinstance(skipped[0].error, MalformedInput)

        assert table.query("10.5.5.5").matched is True
        assert table.query("2001:db8::1").matched is True
        assert table.query("172.16.0.1").matched is False

    def test_preserves_load_order(self):
        table, _ = build_table(["10.1.0.0/16", "10.0.0.0/8"])
        assert [r.prefix_length for r in table] == [16, 8]

    def test_accepts_pairs_without_metadata(self):
        table, skipped = build_table([("10.0.0.0/8", None)])
        assert len(table) == 1
        assert table.ranges[0].metadata is None
        assert skipped == []

    def test_all_entries_invalid(self):
        table, skipped = build_table(["x", "10.0.0.0/99", "300.0.0.0/8"])
        assert len(table) == 0
        assert len(skipped) == 3

    def test_empty_input(self):
        table, skipped = build_table([])
        assert len(table) == 0
        assert skipped == []

    def test_accepts_generator(self):
        table, _ = build_table(c for c in ["10.0.0.0/8", "11.0.0.0/8"])
        assert len(table) == 2

    def test_skipped_entry_str(self):
        _, skipped = build_table(["10.0.0.0/40"])
        assert str(skipped[0]).startswith("10.0.0.0/40 (")


class TestQuery:
    def test_overlapping_ranges_all_reported_in_order(self, overlapping_table):
        result = overlapping_table.query("10.1.2.3")
        assert result.matched is True
        assert [m.service_name for m in result.matches] == ["Wide", "Narrow"]

    def test_only_wide_range(self, overlapping_table):
        result = overlapping_table.query("10.2.0.1")
        assert [m.service_name for m in result.matches] == ["Wide"]

    def test_boundary_last_address_matches(self, overlapping_table):
        assert overlapping_table.query("192.168.1.255").matched is True

    def test_boundary_next_network_does_not_match(self, overlapping_table):
        assert overlapping_table.query("192.168.2.0").matched is False

    def test_boundary_first_address_matches(self, overlapping_table):
        assert overlapping_table.query("192.168.1.0").matched is True

    def test_ipv6(self, overlapping_table):
        result = overlapping_table.query("2001:db8:ffff::1")
        assert [m.service_name for m in result.matches] == ["DocV6"]

    def test_ipv6_outside(self, overlapping_table):
        assert overlapping_table.query("2001:db9::1").matched is False

    def test_ipv6_query_against_ipv4_table(self):
        table, _ = build_table(["0.0.0.0/0", "10.0.0.0/8"])
        result = table.query("::1")
        assert result.matched is False
        assert result.matches == ()

    def test_ipv4_query_against_ipv6_default_route(self):
        table, _ = build_table(["::/0"])
        assert table.query("10.0.0.1").matched is False

    def test_v4_mapped_v6_not_normalized(self):
        table, _ = build_table(["10.0.0.0/8"])
        assert table.query("::ffff:10.0.0.1").matched is False

    def test_malformed_query(self, overlapping_table):
        result = overlapping_table.query("not-an-ip")
        assert result == QueryResult.empty()
        assert result.matched is False

    def test_non_string_query(self, overlapping_table):
        assert overlapping_table.query(None).matched is False

    def test_query_whitespace_stripped(self, overlapping_table):
        assert overlapping_table.query("  10.1.2.3\n").matched is True

    def test_stored_host_bits_ignored(self):
        table, _ = build_table(["10.1.2.3/8"])
        assert table.query("10.200.0.1").matched is True

    def test_query_host_bits_masked(self):
        table, _ = build_table(["192.168.0.0/20"])
        assert table.query("192.168.15.255").matched is True
        assert table.query("192.168.16.0").matched is False

    def test_zero_prefix_matches_everything_in_family(self):
        table, _ = build_table(["0.0.0.0/0"])
        assert table.query("255.255.255.255").matched is True

    def test_host_route(self):
        table, _ = build_table(["8.8.8.8/32"])
        assert table.query("8.8.8.8").matched is True
        assert table.query("8.8.8.9").matched is False

    def test_duplicate_ranges_both_reported(self):
        table, _ = build_table([("10.0.0.0/8", _meta("A")), ("10.0.0.0/8", _meta("B"))])
        assert [m.service_name for m in table.query("10.0.0.1").matches] == ["A", "B"]

    def test_deterministic(self, overlapping_table):
        first = overlapping_table.query("10.1.2.3")
        for _ in range(5):
            assert overlapping_table.query("10.1.2.3") == first

    def test_contains(self, overlapping_table):
        assert overlapping_table.contains("10.1.2.3") is True
        assert overlapping_table.contains("8.8.8.8") is False

    def test_concurrent_queries(self, overlapping_table):
        results = []

        def worker():
            results.append(overlapping_table.query("10.1.2.3"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r == results[0] for r in results)


class TestRangeTable:
    def test_ranges_is_tuple(self, overlapping_table):
        assert isinstance(overlapping_table.ranges, tuple)

    def test_repr(self, overlapping_table):
        assert repr(overlapping_table) == "RangeTable(4 ranges)"

    def test_no_attribute_assignment(self, overlapping_table):
        with pytest.raises(AttributeError):
            overlapping_table.extra = 1


class TestQueryResult:
    def test_empty_not_matched(self):
        assert QueryResult().matched is False

    def test_is_immutable(self):
        result = QueryResult((_meta("x"),))
        with pytest.raises(AttributeError):
            result.matches = ()

    def test_skipped_entry_fields(self):
        entry = SkippedEntry("x", MalformedInput("x", "bad"))
        assert entry.error.reason == "bad"
