"""Domain models for slow-log aggregation and reporting."""

from mysql_slowlog_report.domain.models import (
    COUNT,
    LOCAL,
    SCORE,
    FieldRef,
    FieldStats,
    Metric,
    QueryEvent,
    QuerySummary,
    Report,
    Statistic,
    StringField,
)

__all__ = [
    "COUNT",
    "LOCAL",
    "SCORE",
    "FieldRef",
    "FieldStats",
    "Metric",
    "QueryEvent",
    "QuerySummary",
    "Report",
    "Statistic",
    "StringField",
]
