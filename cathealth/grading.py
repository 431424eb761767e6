"""Letter grades and the weighted composite process health score."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Dict, Optional

from .config import GradingWeights

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .metrics.engine import MetricSnapshot

_GRADE_FLOORS = (
    (90.0, "A"),
    (80.0, "B"),
    (70.0, "C"),
    (60.0, "D"),
)


def score_to_grade(score: float) -> str:
    for floor, grade in _GRADE_FLOORS:
        if score >= floor:
            return grade
    return "F"


@dataclass(frozen=True)
class Grades:
    """Per-metric grades plus the overall weighted grade."""

    orthogonality: str
    uniformity: str
    coverage: str
    category_health: str
    cosine_alignment: str
    overall: str
    overall_score: float

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["overall_score"] = round(self.overall_score, 2)
        return data


def grade_snapshot(
    snapshot: "MetricSnapshot", weights: Optional[GradingWeights] = None
) -> Grades:
    """Grade every metric of ``snapshot`` and combine them into one composite."""
    weights = weights or GradingWeights()
    scores = {
        "orthogonality": snapshot.orthogonality.score,
        "uniformity": snapshot.uniformity.score,
        "coverage": snapshot.coverage.score,
        "category_health": snapshot.category_health.score,
        "cosine_alignment": snapshot.cosine_alignment.score,
    }
    overall_score = sum(scores[name] * getattr(weights, name) for name in scores)
    return Grades(
        orthogonality=score_to_grade(scores["orthogonality"]),
        uniformity=score_to_grade(scores["uniformity"]),
        coverage=score_to_grade(scores["coverage"]),
        category_health=score_to_grade(scores["category_health"]),
        cosine_alignment=score_to_grade(scores["cosine_alignment"]),
        overall=score_to_grade(overall_score),
        overall_score=overall_score,
    )


__all__ = ["Grades", "grade_snapshot", "score_to_grade"]
