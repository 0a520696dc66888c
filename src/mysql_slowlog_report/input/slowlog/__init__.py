from mysql_slowlog_report.input.slowlog.adapter import SlowLogInput
from mysql_slowlog_report.input.slowlog.parser import HeaderState, SlowLogScanner

__all__ = ["SlowLogInput", "SlowLogScanner", "HeaderState"]
