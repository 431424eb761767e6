"""Tests for cathealth.legitimacy."""

from __future__ import annotations

from typing import List

import pytest

from cathealth.legitimacy import LegitimacyAssessor, consistency_issues, reproducibility_score
from cathealth.metrics.engine import MetricEngine
from cathealth.models import Category, CategorySet, ContentItem


def test_loop_predicate_and_legitimacy_are_distinct(
    disjoint_categories: CategorySet, balanced_corpus: List[ContentItem]
) -> None:
    snapshot = MetricEngine().measure(disjoint_categories, balanced_corpus)

    verdict = LegitimacyAssessor().assess(snapshot)

    assert snapshot.all_rules_pass
    assert verdict.validation_checks == {
        "orthogonality_passed": True,
        "uniformity_passed": True,
        "coverage_passed": True,
        "category_health_passed": True,
        "cosine_alignment_passed": False,
    }
    assert verdict.passing_checks == 4
    assert verdict.is_legitimate
    assert verdict.confidence == pytest.approx(80.0)
    assert verdict.critical_issues == []


def test_statistical_validity_and_reproducibility(
    disjoint_categories: CategorySet, balanced_corpus: List[ContentItem]
) -> None:
    snapshot = MetricEngine().measure(disjoint_categories, balanced_corpus)

    verdict = LegitimacyAssessor().assess(snapshot)

    # Nine items is below the small-corpus floor of ten.
    assert verdict.reproducibility_score == 60
    assert reproducibility_score(snapshot) == 60
    assert not verdict.statistical_validity.sample_size_adequate
    assert verdict.statistical_validity.category_count_optimal
    assert verdict.statistical_validity.mention_distribution_valid
    assert verdict.consistency_issues == []


def test_failing_metrics_produce_critical_issues(disjoint_categories: CategorySet) -> None:
    snapshot = MetricEngine().measure(disjoint_categories, [])

    verdict = LegitimacyAssessor().assess(snapshot)

    assert not verdict.is_legitimate
    assert not verdict.validation_checks["coverage_passed"]
    assert not verdict.validation_checks["uniformity_passed"]
    assert len(verdict.critical_issues) == 2
    assert any("cover" in issue for issue in verdict.critical_issues)
    # Empty corpus (-20) and undefined variation reported as 1.0 (-15).
    assert verdict.reproducibility_score == 45
    assert not verdict.statistical_validity.mention_distribution_valid


def test_high_coverage_with_low_uniformity_is_inconsistent() -> None:
    categories = CategorySet(
        [
            Category(id="a", name="Alpha", keywords=["disk"]),
            Category(id="b", name="Bravo", keywords=["socket"]),
        ]
    )
    corpus = [ContentItem(f"disk change {index}") for index in range(9)] + [ContentItem("socket")]

    snapshot = MetricEngine().measure(categories, corpus)

    assert any("uneven" in issue for issue in consistency_issues(snapshot))


def test_to_dict_is_plain_data(
    disjoint_categories: CategorySet, balanced_corpus: List[ContentItem]
) -> None:
    verdict = LegitimacyAssessor().assess(
        MetricEngine().measure(disjoint_categories, balanced_corpus)
    )

    data = verdict.to_dict()

    assert data["confidence"] == 80.0
    assert data["statistical_validity"]["category_count_optimal"] is True
