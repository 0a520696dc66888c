from collections.abc import Collection
from dataclasses import dataclass, field

from mysql_slowlog_report.core.normalizer import fingerprint
from mysql_slowlog_report.domain import Metric, QueryEvent, StringField
from mysql_slowlog_report.filters import AdmittedEvent
from mysql_slowlog_report.hosts import DomainStripState


@dataclass(slots=True)
class Record:
    """Append-only samples for one fingerprint."""

    fingerprint: str
    query_example: str
    count: int = 0
    is_constant: bool = True
    samples: dict[Metric, list[float]] = field(
        default_factory=lambda: {metric: [] for metric in Metric}
    )
    strings: dict[StringField, list[str]] = field(
        default_factory=lambda: {string_field: [] for string_field in StringField}
    )
    local_flags: list[int] = field(default_factory=list)
    queries: dict[str, None] = field(default_factory=dict)

    def add(self, event: QueryEvent, host: str, local: bool) -> None:
        for metric in Metric:
            self.samples[metric].append(event.metric(metric))
        for string_field in StringField:
            value = host if string_field is StringField.HOST else event.string(string_field)
            self.strings[string_field].append(value)
        self.local_flags.append(1 if local else 0)
        self.queries.setdefault(event.query_text, None)
        if self.count:
            # Reflects the latest comparison only.
            self.is_constant = event.query_text == self.query_example
        self.count += 1


class Aggregator:
    """Folds admitted events into per-fingerprint records."""

    def __init__(
        self,
        local_names: Collection[str],
        strip_state: DomainStripState | None = None,
    ) -> None:
        self._local_names = frozenset(local_names)
        self._strip_state = strip_state or DomainStripState()
        self._records: dict[str, Record] = {}
        self._event_count = 0
        self._first_seen: str | None = None
        self._last_seen: str | None = None

    @property
    def records(self) -> dict[str, Record]:
        return self._records

    @property
    def strip_state(self) -> DomainStripState:
        return self._strip_state

    @property
    def event_count(self) -> int:
        return self._event_count

    @property
    def time_range(self) -> tuple[str | None, str | None]:
        return self._first_seen, self._last_seen

    def add(self, admitted: AdmittedEvent) -> Record:
        event = admitted.event
        host = event.host
        if not host:
            host = event.ip
            self._strip_state.keep_permanently()
        else:
            self._strip_state.observe(host, self._local_names)

        key = fingerprint(event.query_text)
        record = self._records.get(key)
        if record is None:
            record = self._records[key] = Record(fingerprint=key, query_example=event.query_text)
        record.add(event, host=host, local=admitted.local)

        self._event_count += 1
        self._track_timestamp(event.timestamp)
        return record

    def _track_timestamp(self, timestamp: str) -> None:
        # Fixed-width YY/MM/DD HH:MM:SS compares correctly as text.
        if not timestamp:
            return
        if self._first_seen is None or timestamp < self._first_seen:
            self._first_seen = timestamp
        if self._last_seen is None or timestamp > self._last_seen:
            self._last_seen = timestamp
