"""Fraction of the corpus matched by at least one category."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ..grading import score_to_grade
from .base import MentionTable, MetricResult, clamp_score


@dataclass(frozen=True)
class CoverageResult(MetricResult):
    total_content: int
    covered_content: int
    uncovered_content: int
    category_matches: Dict[str, int]
    content_distribution: Dict[str, float]


def measure_coverage(table: MentionTable, *, threshold: float = 0.60) -> CoverageResult:
    matches = {category_id: 0 for category_id in table.category_ids}
    covered = 0
    for row in table.rows:
        present = table.present(row)
        for category_id in present:
            matches[category_id] += 1
        if present:
            covered += 1

    total = table.item_count
    ratio = covered / total if total else 0.0
    distribution = {
        category_id: (count / total if total else 0.0) for category_id, count in matches.items()
    }
    score = clamp_score(ratio * 100)
    return CoverageResult(
        name="coverage",
        score=score,
        grade=score_to_grade(score),
        is_healthy=total > 0 and ratio >= threshold,
        total_content=total,
        covered_content=covered,
        uncovered_content=total - covered,
        category_matches=matches,
        content_distribution=distribution,
    )


__all__ = ["CoverageResult", "measure_coverage"]
