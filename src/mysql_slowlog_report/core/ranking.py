from collections.abc import Iterable

from mysql_slowlog_report.domain import FieldRef, QuerySummary


def rank(
    summaries: Iterable[QuerySummary],
    sort_field: FieldRef,
    squelch: float = 0.0,
    top: int = 0,
) -> list[QuerySummary]:
    """Drop summaries below ``squelch``, sort descending, keep the first ``top``.

    Equal values are ordered by fingerprint.
    """
    selected = list(summaries)
    if squelch:
        selected = [summary for summary in selected if summary.value(sort_field) >= squelch]
    selected.sort(key=lambda summary: (-summary.value(sort_field), summary.fingerprint))
    if top:
        selected = selected[:top]
    return selected
