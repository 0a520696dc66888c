__version__ = "0.1.0"

from mysql_slowlog_report.config import (
    DEFAULT_WEIGHTS,
    FilterConfig,
    ReportConfig,
    parse_list,
)
from mysql_slowlog_report.core import (
    Aggregator,
    Scorer,
    SlowLogReportPipeline,
    StatisticsComputer,
    fingerprint,
    rank,
)
from mysql_slowlog_report.domain import (
    FieldRef,
    FieldStats,
    Metric,
    QueryEvent,
    QuerySummary,
    Report,
    Statistic,
    StringField,
)
from mysql_slowlog_report.exceptions import (
    ConfigurationConflictError,
    SlowLogReportError,
    UnknownFieldError,
)
from mysql_slowlog_report.filters import AdmissionFilter
from mysql_slowlog_report.input import EventInput, ManualInput, SlowLogInput, SlowLogScanner
from mysql_slowlog_report.output import ConsoleReportOutput, ReportOutput

__all__ = [
    "__version__",
    "SlowLogReportPipeline",
    "ReportConfig",
    "FilterConfig",
    "DEFAULT_WEIGHTS",
    "parse_list",
    "QueryEvent",
    "QuerySummary",
    "Report",
    "FieldRef",
    "FieldStats",
    "Metric",
    "Statistic",
    "StringField",
    "SlowLogReportError",
    "ConfigurationConflictError",
    "UnknownFieldError",
    "EventInput",
    "ManualInput",
    "SlowLogInput",
    "SlowLogScanner",
    "AdmissionFilter",
    "Aggregator",
    "StatisticsComputer",
    "Scorer",
    "fingerprint",
    "rank",
    "ReportOutput",
    "ConsoleReportOutput",
]
