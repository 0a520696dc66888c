import math
import statistics
from collections.abc import Iterable, Sequence

from mysql_slowlog_report.core.aggregator import Record
from mysql_slowlog_report.domain import FieldStats, QuerySummary, StringField
from mysql_slowlog_report.hosts import DomainStripState

P95 = 95


def percentile(samples: Sequence[float], percent: float) -> float | None:
    """Nearest-rank percentile.

    Undefined (``None``) when ``percent`` falls below the first bin, which is
    always the case for a single sample.
    """
    count = len(samples)
    if not count or percent > 100 or percent < 100 / count:
        return None
    rank = math.ceil(percent * count / 100)
    return sorted(samples)[rank - 1]


def summarize_samples(samples: Sequence[float]) -> FieldStats:
    return FieldStats(
        min=min(samples),
        median=statistics.median(samples),
        p95=percentile(samples, P95) or 0,
        max=max(samples),
        total=sum(samples),
    )


def distinct_sorted(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(set(values)))


class StatisticsComputer:
    """Turns finished records into read-only summaries."""

    def __init__(self, strip_state: DomainStripState | None = None) -> None:
        self._strip_state = strip_state or DomainStripState()

    def summarize(self, record: Record) -> QuerySummary:
        hosts = distinct_sorted(record.strings[StringField.HOST])
        return QuerySummary(
            fingerprint=record.fingerprint,
            count=record.count,
            stats={
                metric: summarize_samples(samples)
                for metric, samples in record.samples.items()
            },
            query_example=record.query_example,
            is_constant=record.is_constant,
            local=max(record.local_flags, default=0),
            databases=distinct_sorted(record.strings[StringField.DATABASE]),
            hosts=tuple(self._strip_state.strip(host) for host in hosts),
            users=distinct_sorted(record.strings[StringField.USER]),
            ips=distinct_sorted(record.strings[StringField.IP]),
            queries=tuple(record.queries),
        )

    def summarize_all(self, records: Iterable[Record]) -> list[QuerySummary]:
        return [self.summarize(record) for record in records]
