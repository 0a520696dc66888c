from typing import Protocol, runtime_checkable

from mysql_slowlog_report.domain import Report


@runtime_checkable
class ReportOutput(Protocol):
    """Protocol for report destinations."""

    @property
    def name(self) -> str:
        ...

    async def send(self, report: Report) -> None:
        ...
