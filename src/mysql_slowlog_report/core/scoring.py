from collections.abc import Iterable, Mapping
from dataclasses import replace

from mysql_slowlog_report.domain import FieldRef, QuerySummary

BASE_SCORE = 1.0


class Scorer:
    """Weighted linear score over summary fields."""

    def __init__(self, weights: Mapping[FieldRef, float]) -> None:
        self._weights = dict(weights)

    @property
    def weights(self) -> dict[FieldRef, float]:
        return dict(self._weights)

    def score(self, summary: QuerySummary) -> float:
        return BASE_SCORE + sum(
            weight * summary.value(ref) for ref, weight in self._weights.items()
        )

    def apply(self, summaries: Iterable[QuerySummary]) -> list[QuerySummary]:
        return [replace(summary, score=self.score(summary)) for summary in summaries]
