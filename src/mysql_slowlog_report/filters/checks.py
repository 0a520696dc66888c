import re
from collections.abc import Collection

from mysql_slowlog_report.domain import QueryEvent, StringField


class LocalityCheck:
    name: str = "locality"

    def __init__(
        self,
        local_names: Collection[str],
        include_local: bool = True,
        include_remote: bool = True,
    ) -> None:
        self._local_names = frozenset(local_names)
        self._include_local = include_local
        self._include_remote = include_remote

    def is_local(self, event: QueryEvent) -> bool:
        return event.host in self._local_names

    def allows(self, event: QueryEvent) -> bool:
        if self.is_local(event):
            return self._include_local
        return self._include_remote


class MembershipCheck:
    """Show-list (``show=True``) or hide-list check on one string field."""

    def __init__(self, string_field: StringField, values: Collection[str], show: bool) -> None:
        self._field = string_field
        self._values = frozenset(values)
        self._show = show

    @property
    def name(self) -> str:
        kind = "show" if self._show else "hide"
        return f"{kind}_{self._field.value}"

    def allows(self, event: QueryEvent) -> bool:
        return (event.string(self._field) in self._values) == self._show


class QueryPatternCheck:
    name: str = "query_pattern"

    _flags = re.IGNORECASE | re.MULTILINE | re.DOTALL

    def __init__(self, pattern: str) -> None:
        self._pattern = re.compile(pattern, self._flags)

    def allows(self, event: QueryEvent) -> bool:
        return self._pattern.search(event.query_text) is not None
