from mysql_slowlog_report.filters.admission import AdmissionFilter
from mysql_slowlog_report.filters.base import AdmissionCheck, AdmittedEvent
from mysql_slowlog_report.filters.checks import (
    LocalityCheck,
    MembershipCheck,
    QueryPatternCheck,
)

__all__ = [
    "AdmissionCheck",
    "AdmittedEvent",
    "AdmissionFilter",
    "LocalityCheck",
    "MembershipCheck",
    "QueryPatternCheck",
]
