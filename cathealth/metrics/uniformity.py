"""Balance of mention density across categories."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Tuple

from ..grading import score_to_grade
from ..models import Category, CategorySet
from .base import MentionTable, MetricResult, clamp_score, coefficient_of_variation

OVERLOAD_FACTOR = 2.0
UNDERREPRESENTED_FACTOR = 0.3


@dataclass(frozen=True)
class DensityOutlier:
    category_id: str
    mentions_per_node: float
    factor: float


@dataclass(frozen=True)
class SubdivisionRecommendation:
    category_id: str
    mentions_per_node: float
    suggested_subcategories: int
    steps: Tuple[str, ...]


@dataclass(frozen=True)
class UniformityResult(MetricResult):
    mention_counts: Dict[str, int]
    node_counts: Dict[str, int]
    mentions_per_node: Dict[str, float]
    coefficient_of_variation: float
    cv_defined: bool
    balance: float
    target_mentions_per_node: float
    overloaded: Tuple[DensityOutlier, ...]
    underrepresented: Tuple[DensityOutlier, ...]
    subdivisions: Tuple[SubdivisionRecommendation, ...]


def node_count(category: Category, categories: CategorySet) -> int:
    """Estimate the number of conceptual sub-units in ``category``.

    Each direct child counts once as a child and again through its own
    estimate; a leaf with more than three keywords gets one node per three.
    """
    children = categories.children_of(category.id)
    if children:
        return 1 + sum(1 + node_count(child, categories) for child in children)
    if len(category.keywords) > 3:
        return 1 + math.ceil(len(category.keywords) / 3)
    return 1


def measure_uniformity(
    categories: CategorySet,
    table: MentionTable,
    *,
    threshold: float = 0.80,
    target: float = 10.0,
) -> UniformityResult:
    mentions = table.totals()
    nodes: Dict[str, int] = {}
    per_node: Dict[str, float] = {}
    for category in categories:
        nodes[category.id] = node_count(category, categories)
        per_node[category.id] = mentions.get(category.id, 0) / nodes[category.id]

    cv, defined = coefficient_of_variation(per_node.values())
    balance = 1.0 - min(1.0, cv)

    overloaded = []
    underrepresented = []
    for category_id, density in per_node.items():
        if density > target * OVERLOAD_FACTOR:
            overloaded.append(DensityOutlier(category_id, density, density / target))
        elif density < target * UNDERREPRESENTED_FACTOR:
            underrepresented.append(DensityOutlier(category_id, density, target / (density + 0.1)))

    score = clamp_score(balance * 100)
    return UniformityResult(
        name="uniformity",
        score=score,
        grade=score_to_grade(score),
        is_healthy=balance >= threshold,
        mention_counts=mentions,
        node_counts=nodes,
        mentions_per_node=per_node,
        coefficient_of_variation=cv,
        cv_defined=defined,
        balance=balance,
        target_mentions_per_node=target,
        overloaded=tuple(overloaded),
        underrepresented=tuple(underrepresented),
        subdivisions=tuple(_recommend_subdivision(outlier, target) for outlier in overloaded),
    )


def _recommend_subdivision(outlier: DensityOutlier, target: float) -> SubdivisionRecommendation:
    suggested = math.ceil(outlier.mentions_per_node / target)
    return SubdivisionRecommendation(
        category_id=outlier.category_id,
        mentions_per_node=outlier.mentions_per_node,
        suggested_subcategories=suggested,
        steps=(
            f'Identify main themes in "{outlier.category_id}"',
            f"Create {suggested} focused subcategories",
            f"Redistribute keywords to reach about {target:g} mentions per subcategory",
        ),
    )


__all__ = [
    "DensityOutlier",
    "SubdivisionRecommendation",
    "UniformityResult",
    "measure_uniformity",
    "node_count",
]
