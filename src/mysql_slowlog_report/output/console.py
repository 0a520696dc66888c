from mysql_slowlog_report.domain import FieldStats, Metric, QuerySummary, Report

NO_RESULTS_MESSAGE = "No problem queries found."


class ConsoleReportOutput:
    """Console output adapter for reports."""

    def __init__(self, prefix: str = "[SLOWLOG]", preview_length: int = 80) -> None:
        self._prefix = prefix
        self._preview_length = preview_length

    @property
    def name(self) -> str:
        return "console"

    async def send(self, report: Report) -> None:
        if report.is_empty:
            print(f"{self._prefix} {NO_RESULTS_MESSAGE}")
            return

        print(
            f"{self._prefix} {len(report.entries)} of {report.fingerprint_count} "
            f"fingerprint(s) by {report.sort_field}, "
            f"{report.first_seen or '?'} to {report.last_seen or '?'}"
        )
        for position, summary in enumerate(report.entries, start=1):
            self._print_summary(position, summary)

    def _print_summary(self, position: int, summary: QuerySummary) -> None:
        print(
            f"{position:>3}. score={summary.score:.2f} count={summary.count} "
            f"hosts={','.join(summary.hosts)} users={','.join(summary.users)} "
            f"databases={','.join(summary.databases)}"
        )
        for metric in Metric:
            stats = summary.stats.get(metric)
            if stats is not None:
                print(f"     {metric.value}: {self._format_stats(stats)}")

        preview = " ".join(summary.query_example.split())
        if len(preview) > self._preview_length:
            preview = preview[: self._preview_length] + "..."
        marker = "" if summary.is_constant else " (varies)"
        print(f"     {preview}{marker}")

    @staticmethod
    def _format_stats(stats: FieldStats) -> str:
        if stats.collapsed is not None:
            return f"{stats.collapsed:g}"
        return (
            f"min {stats.min:g} / median {stats.median:g} / p95 {stats.p95:g} / "
            f"max {stats.max:g} / total {stats.total:g}"
        )
