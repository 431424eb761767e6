"""Category health: distribution, co-occurrence independence and subject fit.

The composite score weighs even distribution highest (0.4), followed by
statistical independence (0.3) and keyword fit to the subject matter (0.3).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..grading import score_to_grade
from ..models import Category, CategorySet, ContentItem
from .base import MentionTable, MetricResult, clamp_score, coefficient_of_variation

DISTRIBUTION_WEIGHT = 0.4
INDEPENDENCE_WEIGHT = 0.3
SUBJECT_FIT_WEIGHT = 0.3

HEALTHY_DISTRIBUTION_CV = 0.5
HEALTHY_CORRELATION = 0.3
HIGH_CORRELATION = 0.5
KEYWORDLESS_FIT = 0.5


@dataclass(frozen=True)
class CategoryHealthResult(MetricResult):
    distribution_score: float
    distribution_cv: float
    independence_score: float
    average_correlation: float
    high_correlations: Tuple[Tuple[str, str, float], ...]
    subject_fit_score: float
    fits: Dict[str, float]


def measure_category_health(
    categories: CategorySet,
    corpus: Sequence[ContentItem],
    table: MentionTable,
    *,
    threshold: float = 70.0,
) -> CategoryHealthResult:
    distribution_cv = _distribution_cv(categories, table)
    distribution_score = max(0.0, 100.0 - distribution_cv * 100)

    average_correlation, high = _independence(table)
    independence_score = max(0.0, 100.0 - average_correlation * 100)

    fits = {category.id: _subject_fit(category, corpus) for category in categories}
    average_fit = sum(fits.values()) / len(fits) if fits else 0.0
    subject_fit_score = clamp_score(average_fit * 100)

    score = clamp_score(
        distribution_score * DISTRIBUTION_WEIGHT
        + independence_score * INDEPENDENCE_WEIGHT
        + subject_fit_score * SUBJECT_FIT_WEIGHT
    )
    return CategoryHealthResult(
        name="category_health",
        score=score,
        grade=score_to_grade(score),
        is_healthy=score >= threshold,
        distribution_score=distribution_score,
        distribution_cv=distribution_cv,
        independence_score=independence_score,
        average_correlation=average_correlation,
        high_correlations=high,
        subject_fit_score=subject_fit_score,
        fits=fits,
    )


def tree_depth(category: Category, categories: CategorySet) -> int:
    children = categories.children_of(category.id)
    if not children:
        return 1
    return 1 + max(tree_depth(child, categories) for child in children)


def _distribution_cv(categories: CategorySet, table: MentionTable) -> float:
    totals = table.totals()
    per_node = [
        totals.get(category.id, 0) / (2 ** (tree_depth(category, categories) - 1))
        for category in categories
    ]
    cv, _ = coefficient_of_variation(per_node)
    return cv


def _independence(table: MentionTable) -> Tuple[float, Tuple[Tuple[str, str, float], ...]]:
    ids = table.category_ids
    size = len(ids)
    cooccurrence = [[0] * size for _ in range(size)]
    for row in table.rows:
        present = [index for index, count in enumerate(row) if count > 0]
        for i in present:
            for j in present:
                cooccurrence[i][j] += 1

    correlations: List[float] = []
    high: List[Tuple[str, str, float]] = []
    for i in range(size):
        for j in range(size):
            if i == j:
                continue
            diagonal = cooccurrence[i][i] * cooccurrence[j][j]
            correlation = cooccurrence[i][j] / math.sqrt(diagonal) if diagonal > 0 else 0.0
            correlations.append(correlation)
            if i < j and correlation > HIGH_CORRELATION:
                high.append((ids[i], ids[j], correlation))

    average = sum(correlations) / len(correlations) if correlations else 0.0
    high.sort(key=lambda entry: entry[2], reverse=True)
    return average, tuple(high)


def _subject_fit(category: Category, corpus: Sequence[ContentItem]) -> float:
    keywords = [keyword.lower() for keyword in category.keywords]
    if not keywords:
        return KEYWORDLESS_FIT
    if not corpus:
        return 0.0
    overlap = 0
    for item in corpus:
        words = item.text.split()
        overlap += sum(
            1 for keyword in keywords if any(keyword in word or word in keyword for word in words)
        )
    return overlap / (len(keywords) * len(corpus))


__all__ = ["CategoryHealthResult", "measure_category_health", "tree_depth"]
