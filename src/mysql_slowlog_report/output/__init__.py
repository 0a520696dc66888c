from mysql_slowlog_report.output.base import ReportOutput
from mysql_slowlog_report.output.console import ConsoleReportOutput
from mysql_slowlog_report.output.sqs import SqsReportOutput

__all__ = ["ReportOutput", "ConsoleReportOutput", "SqsReportOutput"]
