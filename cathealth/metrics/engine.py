"""Runs every metric over one (categories, corpus) pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..config import HealthConfig
from ..logging import get_logger
from ..models import CategorySet, ContentItem, as_corpus
from .alignment import AlignmentResult, measure_alignment
from .base import MentionTable
from .category_health import CategoryHealthResult, measure_category_health
from .coverage import CoverageResult, measure_coverage
from .hierarchy import HierarchyResult, measure_hierarchy
from .orthogonality import OrthogonalityResult, measure_orthogonality
from .uniformity import UniformityResult, measure_uniformity


@dataclass(frozen=True)
class MetricSnapshot:
    """Immutable result of one Metric Engine run."""

    orthogonality: OrthogonalityResult
    coverage: CoverageResult
    uniformity: UniformityResult
    hierarchy: HierarchyResult
    category_health: CategoryHealthResult
    cosine_alignment: AlignmentResult

    @property
    def core(self) -> Dict[str, bool]:
        return {
            "orthogonality": self.orthogonality.is_healthy,
            "coverage": self.coverage.is_healthy,
            "uniformity": self.uniformity.is_healthy,
            "hierarchy": self.hierarchy.is_healthy,
        }

    @property
    def all_rules_pass(self) -> bool:
        """True when all four core metrics are healthy (the loop's stop condition)."""
        return all(self.core.values())

    def failing(self) -> List[str]:
        return [name for name, healthy in self.core.items() if not healthy]

    def scores(self) -> Dict[str, float]:
        return {
            "orthogonality": self.orthogonality.score,
            "coverage": self.coverage.score,
            "uniformity": self.uniformity.score,
            "hierarchy": self.hierarchy.score,
            "category_health": self.category_health.score,
            "cosine_alignment": self.cosine_alignment.score,
        }


class MetricEngine:
    """Computes a :class:`MetricSnapshot`; never mutates its inputs."""

    def __init__(self, config: Optional[HealthConfig] = None) -> None:
        self.config = config or HealthConfig()
        self.logger = get_logger("metrics")

    def measure(
        self,
        categories: CategorySet | Iterable,
        corpus: Iterable[ContentItem | str],
    ) -> MetricSnapshot:
        category_set = CategorySet.coerce(categories)
        items = as_corpus(corpus)
        thresholds = self.config.thresholds
        table = MentionTable.build(category_set, items)

        snapshot = MetricSnapshot(
            orthogonality=measure_orthogonality(category_set, threshold=thresholds.orthogonality),
            coverage=measure_coverage(table, threshold=thresholds.coverage),
            uniformity=measure_uniformity(
                category_set,
                table,
                threshold=thresholds.uniformity,
                target=self.config.uniformity_target,
            ),
            hierarchy=measure_hierarchy(
                category_set, table, min_children=thresholds.hierarchy_children
            ),
            category_health=measure_category_health(
                category_set, items, table, threshold=thresholds.category_health
            ),
            cosine_alignment=measure_alignment(
                category_set, items, threshold=thresholds.cosine_alignment
            ),
        )
        self.logger.debug(
            "Measured %d categories over %d items: %s",
            len(category_set),
            len(items),
            ", ".join(f"{name}={score:.1f}" for name, score in snapshot.scores().items()),
        )
        return snapshot


__all__ = ["MetricEngine", "MetricSnapshot"]
