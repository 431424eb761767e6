"""Cosine alignment between category definitions and the content they classify."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Dict, List, Sequence

from ..grading import score_to_grade
from ..models import CategorySet, ContentItem
from ..vectors import build_alignment_vector, build_content_vector, cosine_similarity
from .base import MetricResult, clamp_score

FIT_WEIGHT = 0.7
INDEPENDENCE_WEIGHT = 0.3


@dataclass(frozen=True)
class AlignmentResult(MetricResult):
    alignments: Dict[str, Dict[str, float]]
    overall_fit: float
    average_category_similarity: float


def measure_alignment(
    categories: CategorySet, corpus: Sequence[ContentItem], *, threshold: float = 60.0
) -> AlignmentResult:
    """Score how well categories fit the corpus while staying distinct.

    Alignment is computed separately for each content kind present (commits,
    documents) and averaged, so a corpus without documents is not penalised.
    """
    kinds: List[str] = sorted({item.kind for item in corpus})
    content_vectors = {
        kind: build_content_vector(item for item in corpus if item.kind == kind) for kind in kinds
    }
    category_vectors = {category.id: build_alignment_vector(category) for category in categories}

    alignments: Dict[str, Dict[str, float]] = {kind: {} for kind in kinds}
    for kind, content_vector in content_vectors.items():
        for category_id, vector in category_vectors.items():
            alignments[kind][category_id] = cosine_similarity(vector, content_vector)

    per_kind = [
        sum(values.values()) / len(values) for values in alignments.values() if values
    ]
    overall_fit = sum(per_kind) / len(per_kind) if per_kind else 0.0

    similarities = [
        cosine_similarity(category_vectors[a], category_vectors[b])
        for a, b in combinations(list(category_vectors), 2)
    ]
    average_similarity = sum(similarities) / len(similarities) if similarities else 0.0

    score = clamp_score(
        (overall_fit * FIT_WEIGHT + (1.0 - average_similarity) * INDEPENDENCE_WEIGHT) * 100
    )
    return AlignmentResult(
        name="cosine_alignment",
        score=score,
        grade=score_to_grade(score),
        is_healthy=score >= threshold,
        alignments=alignments,
        overall_fit=overall_fit,
        average_category_similarity=average_similarity,
    )


__all__ = ["AlignmentResult", "measure_alignment"]
