from typing import Protocol, Self, runtime_checkable

from mysql_slowlog_report.domain import QueryEvent


@runtime_checkable
class EventInput(Protocol):
    """Protocol for async sources of slow-log events."""

    def __aiter__(self) -> Self:
        ...

    async def __anext__(self) -> QueryEvent:
        ...
