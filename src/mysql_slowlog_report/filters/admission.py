import logging
from collections.abc import Collection

from mysql_slowlog_report.config import FilterConfig
from mysql_slowlog_report.domain import QueryEvent, StringField
from mysql_slowlog_report.filters.base import AdmissionCheck, AdmittedEvent
from mysql_slowlog_report.filters.checks import (
    LocalityCheck,
    MembershipCheck,
    QueryPatternCheck,
)
from mysql_slowlog_report.hosts import local_host_names

logger = logging.getLogger(__name__)


class AdmissionFilter:
    """Ordered chain of admission checks; the first failing check rejects."""

    def __init__(self, locality: LocalityCheck) -> None:
        self._locality = locality
        self._checks: list[AdmissionCheck] = [locality]

    @classmethod
    def from_config(
        cls, config: FilterConfig, local_names: Collection[str] | None = None
    ) -> "AdmissionFilter":
        if local_names is None:
            local_names = local_host_names(config.hostname)
        admission = cls(
            LocalityCheck(local_names, config.include_local, config.include_remote)
        )
        dimensions = (
            (StringField.HOST, config.show_hosts, config.hide_hosts),
            (StringField.USER, config.show_users, config.hide_users),
            (StringField.DATABASE, config.show_databases, config.hide_databases),
        )
        for string_field, shown, _ in dimensions:
            if shown:
                admission.register(MembershipCheck(string_field, shown, show=True))
        for string_field, _, hidden in dimensions:
            if hidden:
                admission.register(MembershipCheck(string_field, hidden, show=False))
        if config.query_pattern is not None:
            admission.register(QueryPatternCheck(config.query_pattern))
        return admission

    def register(self, check: AdmissionCheck) -> None:
        self._checks.append(check)

    @property
    def checks(self) -> tuple[AdmissionCheck, ...]:
        return tuple(self._checks)

    def admit(self, event: QueryEvent) -> AdmittedEvent | None:
        for check in self._checks:
            if not check.allows(event):
                logger.debug("Rejected by %s: %.60r", check.name, event.query_text)
                return None
        return AdmittedEvent(event=event, local=self._locality.is_local(event))
