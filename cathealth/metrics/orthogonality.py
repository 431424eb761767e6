"""Pairwise semantic independence of category keyword vectors."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Tuple

from ..grading import score_to_grade
from ..models import CategorySet
from ..vectors import build_category_vector, cosine_similarity
from .base import MetricResult, clamp_score

CORRELATION_THRESHOLD = 0.5
HIGH_SEVERITY_THRESHOLD = 0.7


@dataclass(frozen=True)
class PairScore:
    category_a: str
    category_b: str
    similarity: float

    @property
    def orthogonality(self) -> float:
        return 1.0 - self.similarity


@dataclass(frozen=True)
class CorrelatedPair:
    category_a: str
    category_b: str
    similarity: float
    severity: str


@dataclass(frozen=True)
class OrthogonalityResult(MetricResult):
    average_orthogonality: float
    pairs: Tuple[PairScore, ...]
    correlated_pairs: Tuple[CorrelatedPair, ...]
    independent_pairs: int


def measure_orthogonality(categories: CategorySet, *, threshold: float = 0.70) -> OrthogonalityResult:
    vectors = {category.id: build_category_vector(category) for category in categories}

    pairs = []
    correlated = []
    independent = 0
    for first, second in combinations(list(categories), 2):
        similarity = cosine_similarity(vectors[first.id], vectors[second.id])
        pairs.append(PairScore(first.id, second.id, similarity))
        if similarity > CORRELATION_THRESHOLD:
            severity = "high" if similarity > HIGH_SEVERITY_THRESHOLD else "medium"
            correlated.append(CorrelatedPair(first.id, second.id, similarity, severity))
        else:
            independent += 1

    if pairs:
        average = sum(pair.orthogonality for pair in pairs) / len(pairs)
    else:
        average = 1.0
    score = clamp_score(average * 100)
    return OrthogonalityResult(
        name="orthogonality",
        score=score,
        grade=score_to_grade(score),
        is_healthy=average >= threshold,
        average_orthogonality=average,
        pairs=tuple(pairs),
        correlated_pairs=tuple(correlated),
        independent_pairs=independent,
    )


__all__ = ["CorrelatedPair", "OrthogonalityResult", "PairScore", "measure_orthogonality"]
