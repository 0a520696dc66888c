from collections.abc import Iterator, Sequence
from pathlib import Path

from mysql_slowlog_report.domain import QueryEvent
from mysql_slowlog_report.input.slowlog.parser import SlowLogScanner


class SlowLogInput:
    """Input adapter that reads one or more slow-query log files as a single stream."""

    def __init__(
        self,
        file_paths: str | Path | Sequence[str | Path],
        scanner: SlowLogScanner | None = None,
    ) -> None:
        if isinstance(file_paths, str | Path):
            file_paths = [file_paths]
        self._file_paths = tuple(Path(path) for path in file_paths)
        self._scanner = scanner or SlowLogScanner()
        self._lines: list[str] | None = None
        self._events: Iterator[QueryEvent] | None = None

    @classmethod
    def from_lines(
        cls,
        lines: list[str],
        scanner: SlowLogScanner | None = None,
    ) -> "SlowLogInput":
        """Create adapter from pre-loaded lines (for testing)."""
        instance = cls.__new__(cls)
        instance._file_paths = ()
        instance._scanner = scanner or SlowLogScanner()
        instance._lines = lines
        instance._events = None
        return instance

    @property
    def file_paths(self) -> tuple[Path, ...]:
        return self._file_paths

    def __aiter__(self) -> "SlowLogInput":
        return self

    async def __anext__(self) -> QueryEvent:
        if self._events is None:
            lines = self._lines if self._lines is not None else self._read_lines()
            self._events = self._scanner.scan(lines)

        event = next(self._events, None)
        if event is None:
            raise StopAsyncIteration
        return event

    def _read_lines(self) -> Iterator[str]:
        for path in self._file_paths:
            if not path.exists():
                raise FileNotFoundError(f"Slow log file not found: {path}")
        for path in self._file_paths:
            with open(path, encoding="utf-8", errors="replace") as log_file:
                yield from log_file
