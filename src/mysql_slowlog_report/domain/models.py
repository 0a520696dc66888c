"""Core domain models for slow-log aggregation and reporting."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum

from mysql_slowlog_report.exceptions import UnknownFieldError


class Metric(StrEnum):
    """Numeric fields of a slow-log entry, named as they appear in field identifiers."""

    QUERY_SECONDS = "Query_seconds"
    LOCK_TIME = "Lock_time"
    ROWS_SENT = "Rows_sent"
    ROWS_EXAMINED = "Rows_examined"

    @property
    def attribute(self) -> str:
        return self.value.lower()


class Statistic(StrEnum):
    MIN = "min"
    MEDIAN = "median"
    P95 = "p95"
    MAX = "max"
    TOTAL = "total"


class StringField(StrEnum):
    DATABASE = "database"
    HOST = "host"
    USER = "user"
    IP = "ip"


@dataclass(frozen=True, slots=True)
class QueryEvent:
    """One slow statement together with the header values in effect for it."""

    query_text: str
    timestamp: str = ""
    user: str = ""
    host: str = ""
    ip: str = ""
    database: str = ""
    query_seconds: float = 0.0
    lock_time: float = 0.0
    rows_sent: int = 0
    rows_examined: int = 0

    def metric(self, metric: Metric) -> float:
        return getattr(self, metric.attribute)

    def string(self, string_field: StringField) -> str:
        return getattr(self, string_field.value)


_SCALAR_FIELDS = frozenset({"score", "count", "local"})


@dataclass(frozen=True, slots=True)
class FieldRef:
    """A rankable or weightable field of a summary.

    Valid names are ``score``, ``count``, ``local`` and ``<Metric>_<Statistic>``
    such as ``Query_seconds_p95``.
    """

    name: str
    metric: Metric | None = None
    statistic: Statistic | None = None

    @classmethod
    def parse(cls, name: str) -> "FieldRef":
        if name in _SCALAR_FIELDS:
            return cls(name)
        metric_name, _, statistic_name = name.rpartition("_")
        try:
            return cls(name, Metric(metric_name), Statistic(statistic_name))
        except ValueError:
            raise UnknownFieldError(name) from None

    def __str__(self) -> str:
        return self.name


SCORE = FieldRef("score")
COUNT = FieldRef("count")
LOCAL = FieldRef("local")


@dataclass(frozen=True, slots=True)
class FieldStats:
    min: float
    median: float
    p95: float
    max: float
    total: float

    @property
    def collapsed(self) -> float | None:
        """Return the single value when every sample was equal."""
        if self.min == self.max:
            return self.min
        return None


@dataclass(frozen=True, slots=True)
class QuerySummary:
    """Read-only statistics for one fingerprint."""

    fingerprint: str
    count: int
    stats: Mapping[Metric, FieldStats]
    query_example: str
    is_constant: bool
    local: int = 0
    databases: tuple[str, ...] = ()
    hosts: tuple[str, ...] = ()
    users: tuple[str, ...] = ()
    ips: tuple[str, ...] = ()
    queries: tuple[str, ...] = ()
    score: float = 0.0

    def value(self, ref: FieldRef) -> float:
        """Return the numeric value of ``ref``; absent values count as 0."""
        if ref.metric is not None and ref.statistic is not None:
            stats = self.stats.get(ref.metric)
            if stats is None:
                return 0
            return getattr(stats, ref.statistic.value)
        if ref.name == "count":
            return self.count
        if ref.name == "local":
            return self.local
        if ref.name == "score":
            return self.score
        return 0

    @property
    def distinct_queries_text(self) -> str:
        if self.is_constant:
            return self.query_example
        return "\n".join(self.queries)


@dataclass(frozen=True, slots=True)
class Report:
    """Ranked summaries plus metadata about the whole run."""

    entries: tuple[QuerySummary, ...] = field(default_factory=tuple)
    fingerprint_count: int = 0
    event_count: int = 0
    first_seen: str | None = None
    last_seen: str | None = None
    sort_field: str = "score"

    @property
    def is_empty(self) -> bool:
        return not self.entries
