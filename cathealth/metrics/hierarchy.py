"""Hierarchy integrity: child categories must actually receive mentions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..grading import score_to_grade
from ..models import CategorySet
from .base import MentionTable, MetricResult, clamp_score


@dataclass(frozen=True)
class HierarchyResult(MetricResult):
    applicable: bool
    child_count: int
    populated_children: Tuple[str, ...]
    empty_children: Tuple[str, ...]
    required: int


def measure_hierarchy(
    categories: CategorySet, table: MentionTable, *, min_children: int = 3
) -> HierarchyResult:
    """Count children with non-zero mentions against a cardinality bar.

    A parent with fewer than ``min_children`` children fails however well
    they are populated. A flat category set (no children at all) passes.
    """
    totals = table.totals()
    children = categories.children()
    populated = tuple(child.id for child in children if totals.get(child.id, 0) > 0)
    empty = tuple(child.id for child in children if totals.get(child.id, 0) == 0)
    required = min_children if children else 0

    if not children or required == 0:
        score = 100.0
        healthy = True
    else:
        score = clamp_score(min(1.0, len(populated) / required) * 100)
        healthy = len(populated) >= required

    return HierarchyResult(
        name="hierarchy",
        score=score,
        grade=score_to_grade(score),
        is_healthy=healthy,
        applicable=bool(children),
        child_count=len(children),
        populated_children=populated,
        empty_children=empty,
        required=required,
    )


__all__ = ["HierarchyResult", "measure_hierarchy"]
