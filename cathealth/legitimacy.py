"""Legitimacy and reproducibility verdict over a metric snapshot.

Legitimacy tolerates one failing check out of five, which makes it a looser
bar than :attr:`MetricSnapshot.all_rules_pass`. Both predicates are exposed so
consumers can pick the one matching their needs.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

from .config import HealthConfig
from .metrics.engine import MetricSnapshot

MIN_LEGITIMATE_CHECKS = 4
REPRODUCIBILITY_BASELINE = 80
SMALL_CORPUS = 10
ADEQUATE_CORPUS = 20
UNSTABLE_CV = 0.5
MAX_CORRELATED_PAIRS = 3
OPTIMAL_CATEGORY_RANGE = (3, 12)


@dataclass(frozen=True)
class StatisticalValidity:
    sample_size_adequate: bool
    category_count_optimal: bool
    mention_distribution_valid: bool


@dataclass(frozen=True)
class LegitimacyVerdict:
    is_legitimate: bool
    confidence: float
    validation_checks: Dict[str, bool]
    critical_issues: List[str]
    reproducibility_score: int
    statistical_validity: StatisticalValidity
    consistency_issues: List[str] = field(default_factory=list)

    @property
    def passing_checks(self) -> int:
        return sum(1 for passed in self.validation_checks.values() if passed)

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["confidence"] = round(self.confidence, 2)
        return data


class LegitimacyAssessor:
    """Runs the five hard checks and derives confidence and reproducibility."""

    def __init__(self, config: Optional[HealthConfig] = None) -> None:
        self.config = config or HealthConfig()

    def assess(self, snapshot: MetricSnapshot) -> LegitimacyVerdict:
        thresholds = self.config.thresholds
        checks = {
            "orthogonality_passed": snapshot.orthogonality.is_healthy,
            "uniformity_passed": snapshot.uniformity.is_healthy,
            "coverage_passed": snapshot.coverage.is_healthy,
            "category_health_passed": snapshot.category_health.score >= thresholds.category_health,
            "cosine_alignment_passed": snapshot.cosine_alignment.score >= thresholds.cosine_alignment,
        }
        passing = sum(1 for passed in checks.values() if passed)

        issues: List[str] = []
        if not checks["orthogonality_passed"]:
            issues.append(
                "Categories are not sufficiently independent "
                f"(orthogonality < {thresholds.orthogonality:.0%})"
            )
        if not checks["uniformity_passed"]:
            issues.append(
                f"Category coverage is too uneven (uniformity < {thresholds.uniformity:.0%})"
            )
        if not checks["coverage_passed"]:
            issues.append(
                "Categories do not adequately cover the content "
                f"(coverage < {thresholds.coverage:.0%})"
            )

        low, high = OPTIMAL_CATEGORY_RANGE
        category_count = len(snapshot.uniformity.mentions_per_node)
        validity = StatisticalValidity(
            sample_size_adequate=snapshot.coverage.total_content >= ADEQUATE_CORPUS,
            category_count_optimal=low <= category_count <= high,
            mention_distribution_valid=snapshot.uniformity.coefficient_of_variation < UNSTABLE_CV,
        )

        return LegitimacyVerdict(
            is_legitimate=passing >= MIN_LEGITIMATE_CHECKS,
            confidence=passing / len(checks) * 100,
            validation_checks=checks,
            critical_issues=issues,
            reproducibility_score=reproducibility_score(snapshot),
            statistical_validity=validity,
            consistency_issues=consistency_issues(snapshot),
        )


def reproducibility_score(snapshot: MetricSnapshot) -> int:
    score = REPRODUCIBILITY_BASELINE
    if snapshot.coverage.total_content < SMALL_CORPUS:
        score -= 20
    if snapshot.uniformity.coefficient_of_variation > UNSTABLE_CV:
        score -= 15
    if len(snapshot.orthogonality.correlated_pairs) > MAX_CORRELATED_PAIRS:
        score -= 10
    return max(0, score)


def consistency_issues(snapshot: MetricSnapshot) -> List[str]:
    """Flag metric combinations that are individually fine but suspicious together."""
    issues: List[str] = []
    if snapshot.coverage.score > 80 and snapshot.uniformity.score < 50:
        issues.append("High coverage but low uniformity suggests uneven category distribution")
    if snapshot.orthogonality.score > 80 and snapshot.cosine_alignment.score < 40:
        issues.append("High orthogonality but poor alignment suggests categories may not fit content")
    return issues


__all__ = [
    "LegitimacyAssessor",
    "LegitimacyVerdict",
    "StatisticalValidity",
    "consistency_issues",
    "reproducibility_score",
]
