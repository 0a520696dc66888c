import json
from typing import Any

from aiobotocore.session import get_session

from mysql_slowlog_report.domain import FieldStats, QuerySummary, Report


class SqsReportOutput:
    """Publishes the ranked report as one JSON message."""

    def __init__(self, queue_url: str, region: str = "us-east-1") -> None:
        self._queue_url = queue_url
        self._region = region
        self._session = get_session()

    @property
    def name(self) -> str:
        return "sqs"

    async def send(self, report: Report) -> None:
        async with self._session.create_client("sqs", region_name=self._region) as client:
            await client.send_message(
                QueueUrl=self._queue_url,
                MessageBody=json.dumps(self._report_payload(report)),
            )

    def _report_payload(self, report: Report) -> dict[str, Any]:
        return {
            "sort_field": report.sort_field,
            "fingerprint_count": report.fingerprint_count,
            "event_count": report.event_count,
            "first_seen": report.first_seen,
            "last_seen": report.last_seen,
            "is_empty": report.is_empty,
            "entries": [self._entry_payload(summary) for summary in report.entries],
        }

    def _entry_payload(self, summary: QuerySummary) -> dict[str, Any]:
        return {
            "fingerprint": summary.fingerprint,
            "score": summary.score,
            "count": summary.count,
            "local": summary.local,
            "is_constant": summary.is_constant,
            "queries": summary.distinct_queries_text,
            "stats": {
                metric.value: self._stats_payload(stats)
                for metric, stats in summary.stats.items()
            },
            "databases": list(summary.databases),
            "hosts": list(summary.hosts),
            "users": list(summary.users),
            "ips": list(summary.ips),
        }

    @staticmethod
    def _stats_payload(stats: FieldStats) -> dict[str, float]:
        # Equal samples collapse to one value, as on the console.
        if stats.collapsed is not None:
            return {"value": stats.collapsed}
        return {
            "min": stats.min,
            "median": stats.median,
            "p95": stats.p95,
            "max": stats.max,
            "total": stats.total,
        }
