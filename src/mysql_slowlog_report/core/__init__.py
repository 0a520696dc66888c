from mysql_slowlog_report.core.aggregator import Aggregator, Record
from mysql_slowlog_report.core.normalizer import fingerprint
from mysql_slowlog_report.core.pipeline import SlowLogReportPipeline
from mysql_slowlog_report.core.ranking import rank
from mysql_slowlog_report.core.scoring import Scorer
from mysql_slowlog_report.core.stats import StatisticsComputer, percentile

__all__ = [
    "Aggregator",
    "Record",
    "fingerprint",
    "SlowLogReportPipeline",
    "rank",
    "Scorer",
    "StatisticsComputer",
    "percentile",
]
