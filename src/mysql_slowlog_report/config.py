"""Run configuration handed to the core by the command-line layer."""

import re
import socket
from collections.abc import Mapping
from dataclasses import dataclass, field

from mysql_slowlog_report.domain import SCORE, FieldRef
from mysql_slowlog_report.exceptions import ConfigurationConflictError, UnknownFieldError

DEFAULT_WEIGHTS: Mapping[str, float] = {
    "count": 2.5,
    "local": -2.5,
    "Lock_time_total": 0.25,
    "Rows_examined_p95": 0.25,
    "Query_seconds_p95": 1.5,
    "Query_seconds_total": 2.0,
}


def parse_list(value: str | None) -> tuple[str, ...]:
    """Split a comma-separated option value, dropping empty items."""
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True, slots=True)
class FilterConfig:
    include_local: bool = True
    include_remote: bool = True
    show_hosts: tuple[str, ...] = ()
    hide_hosts: tuple[str, ...] = ()
    show_users: tuple[str, ...] = ()
    hide_users: tuple[str, ...] = ()
    show_databases: tuple[str, ...] = ()
    hide_databases: tuple[str, ...] = ()
    query_pattern: str | None = None
    hostname: str = field(default_factory=socket.getfqdn)

    def __post_init__(self) -> None:
        for dimension in ("hosts", "users", "databases"):
            if getattr(self, f"show_{dimension}") and getattr(self, f"hide_{dimension}"):
                raise ConfigurationConflictError(
                    f"show_{dimension} and hide_{dimension} are mutually exclusive"
                )
        if self.query_pattern is not None:
            try:
                re.compile(self.query_pattern)
            except re.error as exc:
                raise ConfigurationConflictError(
                    f"Invalid query pattern {self.query_pattern!r}: {exc}"
                ) from exc


@dataclass(frozen=True, slots=True)
class ReportConfig:
    filters: FilterConfig = field(default_factory=FilterConfig)
    sort_field: str = "score"
    squelch: float = 0.0
    top: int = 0
    weights: Mapping[str, float] = field(default_factory=lambda: dict(DEFAULT_WEIGHTS))

    def __post_init__(self) -> None:
        if self.squelch and self.top:
            raise ConfigurationConflictError("squelch and top are mutually exclusive")
        if self.top < 0:
            raise ConfigurationConflictError(f"top must not be negative, got {self.top}")
        try:
            FieldRef.parse(self.sort_field)
        except UnknownFieldError as exc:
            raise UnknownFieldError(self.sort_field, "sort field") from exc
        for name in self.weights:
            if name == SCORE.name:
                raise UnknownFieldError(name, "weight field")
            try:
                FieldRef.parse(name)
            except UnknownFieldError as exc:
                raise UnknownFieldError(name, "weight field") from exc

    @property
    def sort_ref(self) -> FieldRef:
        return FieldRef.parse(self.sort_field)

    @property
    def weight_refs(self) -> dict[FieldRef, float]:
        return {FieldRef.parse(name): weight for name, weight in self.weights.items()}
