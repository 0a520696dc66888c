import logging
from collections.abc import Sequence

from mysql_slowlog_report.config import ReportConfig
from mysql_slowlog_report.core.aggregator import Aggregator
from mysql_slowlog_report.core.ranking import rank
from mysql_slowlog_report.core.scoring import Scorer
from mysql_slowlog_report.core.stats import StatisticsComputer
from mysql_slowlog_report.domain import Report
from mysql_slowlog_report.filters import AdmissionFilter
from mysql_slowlog_report.hosts import DomainStripState, local_host_names
from mysql_slowlog_report.input import EventInput
from mysql_slowlog_report.output import ReportOutput

logger = logging.getLogger(__name__)


class SlowLogReportPipeline:
    def __init__(
        self,
        input_source: EventInput,
        config: ReportConfig | None = None,
        outputs: Sequence[ReportOutput] = (),
    ) -> None:
        self._input = input_source
        self._config = config or ReportConfig()
        self._outputs = tuple(outputs)

        hostname = self._config.filters.hostname
        local_names = local_host_names(hostname)
        self._filter = AdmissionFilter.from_config(self._config.filters, local_names)
        self._aggregator = Aggregator(local_names, DomainStripState.for_hostname(hostname))

    @property
    def aggregator(self) -> Aggregator:
        return self._aggregator

    async def run(self) -> Report:
        scanned = 0
        async for event in self._input:
            scanned += 1
            admitted = self._filter.admit(event)
            if admitted is not None:
                self._aggregator.add(admitted)

        report = self.build_report()
        logger.info(
            "Scanned %d statements, admitted %d, %d fingerprints, reporting %d",
            scanned,
            report.event_count,
            report.fingerprint_count,
            len(report.entries),
        )
        for output in self._outputs:
            await output.send(report)
        return report

    def build_report(self) -> Report:
        records = self._aggregator.records
        summaries = StatisticsComputer(self._aggregator.strip_state).summarize_all(
            records.values()
        )
        scored = Scorer(self._config.weight_refs).apply(summaries)
        entries = rank(
            scored,
            self._config.sort_ref,
            squelch=self._config.squelch,
            top=self._config.top,
        )
        first_seen, last_seen = self._aggregator.time_range
        return Report(
            entries=tuple(entries),
            fingerprint_count=len(records),
            event_count=self._aggregator.event_count,
            first_seen=first_seen,
            last_seen=last_seen,
            sort_field=self._config.sort_field,
        )
