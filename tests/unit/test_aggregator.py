import itertools

import pytest

from mysql_slowlog_report.core.aggregator import Aggregator, Record
from mysql_slowlog_report.core.stats import StatisticsComputer
from mysql_slowlog_report.domain import Metric, QueryEvent, StringField
from mysql_slowlog_report.filters import AdmittedEvent
from mysql_slowlog_report.hosts import DomainStripState, StripDecision, local_host_names

LOCAL_NAMES = local_host_names("db1.example.com")


def admitted(query_text: str, local: bool = False, **fields: object) -> AdmittedEvent:
    values: dict[str, object] = {"host": "web1.example.com", "ip": "10.0.0.11"}
    values.update(fields)
    return AdmittedEvent(event=QueryEvent(query_text=query_text, **values), local=local)  # type: ignore[arg-type]


class TestAggregator:
    @pytest.fixture
    def aggregator(self) -> Aggregator:
        return Aggregator(LOCAL_NAMES, DomainStripState.for_hostname("db1.example.com"))

    def test_same_shape_shares_record(self, aggregator: Aggregator) -> None:
        aggregator.add(admitted("SELECT * FROM t WHERE id = 1;", query_seconds=1.0))
        aggregator.add(admitted("SELECT * FROM t WHERE id = 2;", query_seconds=2.0))

        assert len(aggregator.records) == 1
        record = next(iter(aggregator.records.values()))
        assert record.fingerprint == "SELECT * FROM t WHERE id = N;"
        assert record.count == 2
        assert record.samples[Metric.QUERY_SECONDS] == [1.0, 2.0]

    def test_different_shapes_get_separate_records(self, aggregator: Aggregator) -> None:
        aggregator.add(admitted("SELECT * FROM t WHERE id = 1;"))
        aggregator.add(admitted("SELECT * FROM t WHERE name = 'a';"))

        assert len(aggregator.records) == 2

    def test_string_samples_and_local_flags(self, aggregator: Aggregator) -> None:
        aggregator.add(admitted("SELECT 1;", user="app", database="shop"))
        record = aggregator.add(admitted("SELECT 2;", local=True, host="localhost", user="root"))

        assert record.strings[StringField.USER] == ["app", "root"]
        assert record.strings[StringField.HOST] == ["web1.example.com", "localhost"]
        assert record.strings[StringField.DATABASE] == ["shop", ""]
        assert record.local_flags == [0, 1]

    def test_empty_host_uses_ip(self, aggregator: Aggregator) -> None:
        record = aggregator.add(admitted("SELECT 1;", host="", ip="10.9.9.9"))

        assert record.strings[StringField.HOST] == ["10.9.9.9"]
        assert aggregator.strip_state.decision is StripDecision.KEEP

    def test_empty_host_blocks_stripping_for_good(self, aggregator: Aggregator) -> None:
        aggregator.add(admitted("SELECT 1;", host="", ip="10.9.9.9"))
        aggregator.add(admitted("SELECT 1;", host="web1.example.com"))

        assert aggregator.strip_state.decision is StripDecision.KEEP

    def test_matching_domain_decides_strip(self, aggregator: Aggregator) -> None:
        aggregator.add(admitted("SELECT 1;", host="web1.example.com"))
        aggregator.add(admitted("SELECT 1;", host="db1"))

        assert aggregator.strip_state.decision is StripDecision.STRIP

    def test_later_foreign_host_revises_strip(self, aggregator: Aggregator) -> None:
        aggregator.add(admitted("SELECT 1;", host="web1.example.com"))
        aggregator.add(admitted("SELECT 1;", host="web1.other.org"))
        aggregator.add(admitted("SELECT 1;", host="web2.example.com"))

        assert aggregator.strip_state.decision is StripDecision.KEEP

    def test_event_count_and_time_range(self, aggregator: Aggregator) -> None:
        aggregator.add(admitted("SELECT 1;", timestamp="24/01/05 10:00:00"))
        aggregator.add(admitted("SELECT 1;", timestamp="24/01/05 09:15:02"))
        aggregator.add(admitted("SELECT 1;", timestamp=""))
        aggregator.add(admitted("SELECT 1;", timestamp="24/01/06 00:00:01"))

        assert aggregator.event_count == 4
        assert aggregator.time_range == ("24/01/05 09:15:02", "24/01/06 00:00:01")

    def test_time_range_without_timestamps(self, aggregator: Aggregator) -> None:
        aggregator.add(admitted("SELECT 1;"))
        assert aggregator.time_range == (None, None)


ORDER_EVENTS = [
    admitted(
        "SELECT * FROM t WHERE id = 1;",
        host="web1.example.com",
        user="app",
        database="shop",
        query_seconds=0.5,
        rows_examined=10,
    ),
    admitted(
        "SELECT * FROM t WHERE id = 2;",
        local=True,
        host="db1",
        ip="",
        user="root",
        database="inventory",
        query_seconds=8.0,
        lock_time=0.25,
    ),
    admitted(
        "SELECT * FROM t WHERE id = 3;",
        host="web9.other.org",
        ip="10.0.0.99",
        user="app",
        database="shop",
        query_seconds=1.25,
        rows_examined=40,
    ),
    admitted(
        "SELECT * FROM t WHERE id = 4;",
        host="web1.example.com",
        user="report",
        database="crm",
        query_seconds=3.0,
        rows_sent=7,
    ),
]


class TestArrivalOrder:
    @staticmethod
    def summarize_in_order(events: tuple[AdmittedEvent, ...]) -> tuple[object, ...]:
        aggregator = Aggregator(LOCAL_NAMES, DomainStripState.for_hostname("db1.example.com"))
        for event in events:
            aggregator.add(event)
        (record,) = aggregator.records.values()
        summary = StatisticsComputer(aggregator.strip_state).summarize(record)
        return (
            summary.count,
            dict(summary.stats),
            summary.local,
            summary.databases,
            summary.hosts,
            summary.users,
            summary.ips,
            aggregator.strip_state.decision,
        )

    def test_order_does_not_change_summary(self) -> None:
        expected = self.summarize_in_order(tuple(ORDER_EVENTS))

        for ordering in itertools.permutations(ORDER_EVENTS):
            assert self.summarize_in_order(ordering) == expected

    def test_summary_values(self) -> None:
        count, stats, local, databases, hosts, users, ips, decision = self.summarize_in_order(
            tuple(ORDER_EVENTS)
        )

        assert count == 4
        assert stats[Metric.QUERY_SECONDS].total == 12.75
        assert local == 1
        assert databases == ("crm", "inventory", "shop")
        assert hosts == ("db1", "web1.example.com", "web9.other.org")
        assert users == ("app", "report", "root")
        assert ips == ("", "10.0.0.11", "10.0.0.99")
        assert decision is StripDecision.KEEP


class TestRecordConstancy:
    def test_single_event_is_constant(self) -> None:
        record = Record(fingerprint="SELECT N;", query_example="SELECT 1;")
        record.add(QueryEvent(query_text="SELECT 1;"), host="h", local=False)

        assert record.is_constant is True
        assert record.query_example == "SELECT 1;"

    def test_differing_text_is_not_constant(self) -> None:
        record = Record(fingerprint="SELECT N;", query_example="SELECT 1;")
        record.add(QueryEvent(query_text="SELECT 1;"), host="h", local=False)
        record.add(QueryEvent(query_text="SELECT 2;"), host="h", local=False)

        assert record.is_constant is False
        assert list(record.queries) == ["SELECT 1;", "SELECT 2;"]

    def test_flag_reflects_latest_comparison_only(self) -> None:
        # Last write wins: a later match with the example resets the flag.
        record = Record(fingerprint="SELECT N;", query_example="SELECT 1;")
        for text in ("SELECT 1;", "SELECT 2;", "SELECT 1;"):
            record.add(QueryEvent(query_text=text), host="h", local=False)

        assert record.is_constant is True
        assert list(record.queries) == ["SELECT 1;", "SELECT 2;"]
