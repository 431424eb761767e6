"""Tests for cathealth.metrics.category_health."""

from __future__ import annotations

from typing import List

import pytest

from cathealth.metrics.base import MentionTable
from cathealth.metrics.category_health import measure_category_health, tree_depth
from cathealth.models import Category, CategorySet, ContentItem, as_corpus


def _measure(categories: CategorySet, corpus: List[ContentItem]):
    return measure_category_health(categories, corpus, MentionTable.build(categories, corpus))


def test_tree_depth(nested_categories: CategorySet) -> None:
    assert tree_depth(nested_categories.get("core"), nested_categories) == 2
    assert tree_depth(nested_categories.get("core.plan"), nested_categories) == 1


def test_balanced_independent_categories(
    disjoint_categories: CategorySet, balanced_corpus: List[ContentItem]
) -> None:
    result = _measure(disjoint_categories, balanced_corpus)

    assert result.distribution_score == pytest.approx(100.0)
    assert result.independence_score == pytest.approx(100.0)
    assert result.high_correlations == ()
    assert result.fits == pytest.approx({"storage": 1 / 3, "network": 1 / 3, "graphics": 1 / 3})
    assert result.score == pytest.approx(40.0 + 30.0 + 10.0)
    assert result.is_healthy


def test_cooccurring_categories_lower_independence(disjoint_categories: CategorySet) -> None:
    corpus = as_corpus(["disk socket", "disk socket", "pixel"])

    result = _measure(disjoint_categories, corpus)

    assert result.independence_score < 100.0
    assert result.high_correlations == (("storage", "network", pytest.approx(1.0)),)


def test_keywordless_category_gets_neutral_fit() -> None:
    categories = CategorySet(
        [
            Category(id="a", name="Alpha"),
            Category(id="b", name="Bravo", keywords=["disk"]),
        ]
    )

    result = _measure(categories, [])

    assert result.fits == {"a": 0.5, "b": 0.0}
    assert 0.0 <= result.score <= 100.0
