import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from mysql_slowlog_report.domain import QueryEvent

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HeaderState:
    """Last-seen header values.

    MySQL only writes a header line when its value changed, so every field
    persists until a header of the same kind replaces it.
    """

    timestamp: str = ""
    user: str = ""
    host: str = ""
    ip: str = ""
    query_seconds: float = 0.0
    lock_time: float = 0.0
    rows_sent: int = 0
    rows_examined: int = 0
    database: str = ""
    body: list[str] = field(default_factory=list)


class SlowLogScanner:
    """Line-oriented state machine turning slow-log text into ``QueryEvent``s."""

    NOISE_PATTERNS = (
        re.compile(r"^\S.*started with:$"),
        re.compile(r"^Tcp port: \d+"),
        re.compile(r"^Time\s+Id\s+Command\s+Argument$"),
    )

    TIME_PATTERN = re.compile(
        r"^# Time: (?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})\s+"
        r"(?P<hh>\d{1,2}):(?P<mi>\d{2}):(?P<ss>\d{2})"
    )
    ISO_TIME_PATTERN = re.compile(
        r"^# Time: \d{2}(?P<yy>\d{2})-(?P<mm>\d{2})-(?P<dd>\d{2})T"
        r"(?P<hh>\d{2}):(?P<mi>\d{2}):(?P<ss>\d{2})"
    )
    USER_HOST_PATTERN = re.compile(
        r"^# User@Host:\s*(?P<user>[^\s\[]*)(?:\[(?P<bracket_user>[^\]]*)\])?\s*@\s*"
        r"(?P<host>[^\s\[]*)\s*(?:\[(?P<ip>[^\]]*)\])?"
    )
    COST_PATTERN = re.compile(
        r"^# Query_time:\s*(?P<query_time>[\d.]+)\s+Lock_time:\s*(?P<lock_time>[\d.]+)\s+"
        r"Rows_sent:\s*(?P<rows_sent>\d+)\s+Rows_examined:\s*(?P<rows_examined>\d+)"
    )
    USE_PATTERN = re.compile(r"^use\s+`?(?P<database>[^`;\s]+)`?;\s*$", re.IGNORECASE)
    SET_PATTERN = re.compile(r"^set\s.*;\s*$", re.IGNORECASE)

    def __init__(self) -> None:
        self._state = HeaderState()

    @property
    def state(self) -> HeaderState:
        return self._state

    def scan(self, lines: Iterable[str]) -> Iterator[QueryEvent]:
        for line in lines:
            event = self.feed(line)
            if event is not None:
                yield event
        self.finish()

    def feed(self, line: str) -> QueryEvent | None:
        """Consume one line. Returns an event when the line ends a statement."""
        line = line.rstrip("\r\n")
        state = self._state

        if self._is_noise(line):
            return None

        match = self.TIME_PATTERN.match(line) or self.ISO_TIME_PATTERN.match(line)
        if match:
            state.timestamp = self._format_timestamp(match)
            return None

        match = self.USER_HOST_PATTERN.match(line)
        if match:
            state.user = match.group("user") or match.group("bracket_user") or ""
            state.host = match.group("host") or ""
            state.ip = match.group("ip") or ""
            return None

        match = self.COST_PATTERN.match(line)
        if match:
            state.query_seconds = float(match.group("query_time"))
            state.lock_time = float(match.group("lock_time"))
            state.rows_sent = int(match.group("rows_sent"))
            state.rows_examined = int(match.group("rows_examined"))
            return None

        match = self.USE_PATTERN.match(line)
        if match:
            state.database = match.group("database")
            return None

        if self.SET_PATTERN.match(line) or not line.rstrip().endswith(";"):
            state.body.append(line + "\n")
            return None

        query_text = "".join(state.body) + line
        state.body.clear()
        return QueryEvent(
            query_text=query_text,
            timestamp=state.timestamp,
            user=state.user,
            host=state.host,
            ip=state.ip,
            database=state.database,
            query_seconds=state.query_seconds,
            lock_time=state.lock_time,
            rows_sent=state.rows_sent,
            rows_examined=state.rows_examined,
        )

    def finish(self) -> None:
        if self._state.body:
            logger.debug(
                "Discarding %d unterminated line(s) at end of input", len(self._state.body)
            )
            self._state.body.clear()

    def _is_noise(self, line: str) -> bool:
        if not line.strip():
            return True
        return any(pattern.match(line) for pattern in self.NOISE_PATTERNS)

    @staticmethod
    def _format_timestamp(match: re.Match[str]) -> str:
        return (
            f"{match.group('yy')}/{match.group('mm')}/{match.group('dd')} "
            f"{int(match.group('hh')):02d}:{match.group('mi')}:{match.group('ss')}"
        )
