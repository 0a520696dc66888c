from mysql_slowlog_report.input.base import EventInput
from mysql_slowlog_report.input.manual import ManualInput
from mysql_slowlog_report.input.slowlog import HeaderState, SlowLogInput, SlowLogScanner

__all__ = [
    "EventInput",
    "ManualInput",
    "SlowLogInput",
    "SlowLogScanner",
    "HeaderState",
]
