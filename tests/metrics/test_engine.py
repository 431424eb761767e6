"""Tests for cathealth.metrics.engine."""

from __future__ import annotations

import copy
from typing import List

from cathealth.config import HealthConfig, Thresholds
from cathealth.metrics.engine import MetricEngine
from cathealth.models import CategorySet, ContentItem


def test_measure_is_idempotent_and_read_only(
    disjoint_categories: CategorySet, balanced_corpus: List[ContentItem]
) -> None:
    before = copy.deepcopy([category.keywords for category in disjoint_categories])
    engine = MetricEngine()

    first = engine.measure(disjoint_categories, balanced_corpus)
    second = engine.measure(disjoint_categories, balanced_corpus)

    assert first == second
    assert [category.keywords for category in disjoint_categories] == before


def test_scores_stay_in_range(nested_categories: CategorySet) -> None:
    corpus = ["core engine lexer", "optimizer optimizer optimizer", "unrelated"]

    snapshot = MetricEngine().measure(nested_categories, corpus)

    for name, score in snapshot.scores().items():
        assert 0.0 <= score <= 100.0, name


def test_balanced_input_passes_all_core_rules(
    disjoint_categories: CategorySet, balanced_corpus: List[ContentItem]
) -> None:
    snapshot = MetricEngine().measure(list(disjoint_categories), balanced_corpus)

    assert snapshot.all_rules_pass
    assert snapshot.failing() == []
    assert set(snapshot.core) == {"orthogonality", "coverage", "uniformity", "hierarchy"}


def test_thresholds_come_from_config(
    disjoint_categories: CategorySet, balanced_corpus: List[ContentItem]
) -> None:
    strict = HealthConfig(thresholds=Thresholds(coverage=1.0, uniformity=1.0, orthogonality=1.0))
    snapshot = MetricEngine(strict).measure(disjoint_categories, balanced_corpus[:8])

    assert snapshot.coverage.is_healthy
    assert snapshot.failing() == ["uniformity"]
