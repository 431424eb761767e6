"""Human-readable improvement advice derived from a metric snapshot."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, List, Tuple

from .metrics.engine import MetricSnapshot

_PRIORITY_ORDER = {"critical": 4, "high": 3, "medium": 2, "low": 1}
_MAX_ITEMS = 3


@dataclass(frozen=True)
class Recommendation:
    priority: str
    area: str
    issue: str
    action: str
    steps: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["steps"] = list(self.steps)
        return data


def build_recommendations(snapshot: MetricSnapshot) -> List[Recommendation]:
    recommendations: List[Recommendation] = []

    orthogonality = snapshot.orthogonality
    if not orthogonality.is_healthy:
        recommendations.append(
            Recommendation(
                priority="critical",
                area="orthogonality",
                issue=f"Categories are too correlated ({orthogonality.score:.1f}% orthogonality)",
                action="Redesign categories to be more semantically distinct",
                steps=(
                    "Review highly correlated category pairs",
                    "Merge overlapping categories or split them into distinct aspects",
                    "Update category keywords to reduce semantic overlap",
                ),
            )
        )
        for pair in orthogonality.correlated_pairs[:_MAX_ITEMS]:
            recommendations.append(
                Recommendation(
                    priority="high" if pair.severity == "high" else "medium",
                    area="orthogonality",
                    issue=(
                        f'Categories "{pair.category_a}" and "{pair.category_b}" are highly '
                        f"correlated ({pair.similarity * 100:.1f}%)"
                    ),
                    action="Redesign these categories to be more independent",
                    steps=(
                        "Review keyword overlap between these categories",
                        "Consider merging if they serve similar purposes",
                        "Or split each into more specific subcategories",
                    ),
                )
            )

    uniformity = snapshot.uniformity
    if not uniformity.is_healthy:
        recommendations.append(
            Recommendation(
                priority="high",
                area="uniformity",
                issue=(
                    "Uneven category coverage "
                    f"({uniformity.coefficient_of_variation * 100:.1f}% variation)"
                ),
                action="Rebalance categories for more uniform mention distribution",
                steps=(
                    "Subdivide overloaded categories",
                    "Expand or merge underrepresented categories",
                    "Adjust category keywords to achieve balance",
                ),
            )
        )
        for subdivision in uniformity.subdivisions[:_MAX_ITEMS]:
            recommendations.append(
                Recommendation(
                    priority="medium",
                    area="subdivision",
                    issue=f'Category "{subdivision.category_id}" needs subdivision',
                    action=f"Split into {subdivision.suggested_subcategories} subcategories",
                    steps=subdivision.steps,
                )
            )

    coverage = snapshot.coverage
    if not coverage.is_healthy:
        recommendations.append(
            Recommendation(
                priority="high",
                area="coverage",
                issue=f"Poor content coverage ({coverage.score:.1f}%)",
                action="Expand category definitions to better match the content",
                steps=(
                    "Analyze uncovered content for common themes",
                    "Add new categories for uncovered areas",
                    "Expand keywords for existing categories",
                ),
            )
        )

    hierarchy = snapshot.hierarchy
    if not hierarchy.is_healthy:
        recommendations.append(
            Recommendation(
                priority="medium",
                area="hierarchy",
                issue=(
                    f"Only {len(hierarchy.populated_children)} of {hierarchy.child_count} "
                    "child categories receive mentions"
                ),
                action="Add more specific keywords to child categories",
            )
        )

    # sorted() is stable, so equal priorities keep their insertion order.
    return sorted(recommendations, key=lambda item: _PRIORITY_ORDER[item.priority], reverse=True)


__all__ = ["Recommendation", "build_recommendations"]
