from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from mysql_slowlog_report.domain import QueryEvent


@dataclass(frozen=True, slots=True)
class AdmittedEvent:
    """An event that passed every admission check."""

    event: QueryEvent
    local: bool


@runtime_checkable
class AdmissionCheck(Protocol):
    """Protocol for a single admission rule."""

    @property
    def name(self) -> str:
        ...

    def allows(self, event: QueryEvent) -> bool:
        ...
