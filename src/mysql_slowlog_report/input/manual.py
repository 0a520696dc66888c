from typing import Sequence

from mysql_slowlog_report.domain import QueryEvent


class ManualInput:
    """Manual input source for programmatically feeding events."""

    def __init__(self, events: Sequence[QueryEvent]) -> None:
        self._events: tuple[QueryEvent, ...] = tuple(events)
        self._index: int = 0

    def __aiter__(self) -> "ManualInput":
        return self

    async def __anext__(self) -> QueryEvent:
        if self._index >= len(self._events):
            raise StopAsyncIteration
        event = self._events[self._index]
        self._index += 1
        return event
