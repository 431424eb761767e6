"""Shared metric result types and helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from ..models import CategorySet, ContentItem
from ..vectors import match_count


@dataclass(frozen=True)
class MetricResult:
    """Common shape of every metric: a 0-100 score, its grade and a health flag."""

    name: str
    score: float
    grade: str
    is_healthy: bool


@dataclass(frozen=True)
class MentionTable:
    """Per-item, per-category mention counts computed once per measurement."""

    category_ids: Tuple[str, ...]
    rows: Tuple[Tuple[int, ...], ...]

    @classmethod
    def build(cls, categories: CategorySet, corpus: Sequence[ContentItem]) -> "MentionTable":
        members = list(categories)
        rows = tuple(
            tuple(match_count(item.text, category) for category in members) for item in corpus
        )
        return cls(category_ids=tuple(category.id for category in members), rows=rows)

    @property
    def item_count(self) -> int:
        return len(self.rows)

    def totals(self) -> Dict[str, int]:
        totals = {category_id: 0 for category_id in self.category_ids}
        for row in self.rows:
            for category_id, count in zip(self.category_ids, row):
                totals[category_id] += count
        return totals

    def present(self, row: Tuple[int, ...]) -> List[str]:
        return [category_id for category_id, count in zip(self.category_ids, row) if count > 0]


def clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


def coefficient_of_variation(values: Iterable[float]) -> Tuple[float, bool]:
    """Return ``(cv, defined)`` using the population standard deviation.

    An empty sample or a zero mean has no meaningful CV; it is reported as 1.0
    (maximally unbalanced) with ``defined`` set to False.
    """
    sample = list(values)
    if not sample:
        return 1.0, False
    mean = sum(sample) / len(sample)
    if mean <= 0:
        return 1.0, False
    variance = sum((value - mean) ** 2 for value in sample) / len(sample)
    return math.sqrt(variance) / mean, True


__all__ = ["MentionTable", "MetricResult", "clamp_score", "coefficient_of_variation"]
