"""Tests for cathealth.convergence."""

from __future__ import annotations

import logging
from typing import List

import pytest

from cathealth.config import HealthConfig
from cathealth.convergence import ConvergenceLoop, LoopState
from cathealth.models import Category, CategorySet, ContentItem
from cathealth.remediation import ExpandKeywords, MergeOrSplitSuggestion
from cathealth.validators import MalformedCategoryGraphError


def _correlated_pair() -> CategorySet:
    return CategorySet(
        [
            Category(id="auth-core", name="Auth Core", keywords=["token", "session"]),
            Category(id="core-auth", name="Core Auth", keywords=["token", "session"]),
        ]
    )


def _five_categories() -> CategorySet:
    return CategorySet(
        [
            Category(id="storage", name="Storage", keywords=["disk"]),
            Category(id="network", name="Network", keywords=["socket"]),
            Category(id="graphics", name="Graphics", keywords=["pixel"]),
            Category(id="billing", name="Billing", keywords=["invoice"]),
            Category(id="search", name="Search", keywords=["index"]),
        ]
    )


def test_balanced_input_converges_immediately(
    disjoint_categories: CategorySet, balanced_corpus: List[ContentItem]
) -> None:
    result = ConvergenceLoop(disjoint_categories, balanced_corpus).run()

    assert result.state is LoopState.CONVERGED
    assert result.converged
    report = result.report
    assert len(report.iterations) == 1
    assert report.iterations[0].iteration == 1
    assert report.iterations[0].actions_applied == ()
    assert report.metrics.coverage.score == pytest.approx(100.0)
    assert report.metrics.orthogonality.score == pytest.approx(100.0)
    assert report.metrics.uniformity.score == pytest.approx(100.0)
    assert report.recommendations == []
    assert report.advice == []
    assert [category.keywords for category in disjoint_categories] == [["disk"], ["socket"], ["pixel"]]


def test_converged_run_can_still_fall_short_of_legitimacy(
    disjoint_categories: CategorySet, balanced_corpus: List[ContentItem]
) -> None:
    result = ConvergenceLoop(disjoint_categories, balanced_corpus).run()

    # The loop stops on the four core rules; legitimacy also weighs alignment.
    assert result.report.metrics.all_rules_pass
    assert not result.report.legitimacy.validation_checks["cosine_alignment_passed"]
    assert result.report.legitimacy.is_legitimate


def test_identical_categories_exhaust_with_merge_suggestions() -> None:
    categories = _correlated_pair()

    result = ConvergenceLoop(categories, ["token refresh", "session expiry"]).run()

    assert result.state is LoopState.EXHAUSTED
    assert len(result.report.iterations) == 5
    for record in result.report.iterations:
        assert not record.snapshot.orthogonality.is_healthy
        assert len(record.actions_applied) == 1
        suggestion = record.actions_applied[0]
        assert isinstance(suggestion, MergeOrSplitSuggestion)
        assert suggestion.similarity == pytest.approx(1.0)
        assert suggestion.severity == "high"
    assert result.report.metrics.orthogonality.score == pytest.approx(0.0, abs=1e-9)
    assert categories.get("auth-core").keywords == ["token", "session"]
    assert isinstance(result.report.recommendations[0], MergeOrSplitSuggestion)


def test_empty_corpus_exhausts_after_expanding_keywords() -> None:
    categories = _five_categories()

    result = ConvergenceLoop(categories, []).run()

    assert result.state is LoopState.EXHAUSTED
    iterations = result.report.iterations
    assert [record.iteration for record in iterations] == [1, 2, 3, 4, 5]
    for record in iterations:
        expanded = [
            action.category_id
            for action in record.actions_applied
            if isinstance(action, ExpandKeywords)
        ]
        assert expanded == categories.ids()
        assert record.snapshot.coverage.score == 0.0
    # Untagged categories have no domain vocabulary to add.
    assert all(
        action.add == ()
        for record in iterations
        for action in record.actions_applied
        if isinstance(action, ExpandKeywords)
    )
    # Mutations land on the caller's categories.
    assert len(categories.get("storage").keywords) > 1


def test_iteration_budget_comes_from_config() -> None:
    result = ConvergenceLoop(_correlated_pair(), ["token"], HealthConfig(max_iterations=2)).run()

    assert result.state is LoopState.EXHAUSTED
    assert len(result.report.iterations) == 2


def test_step_drives_one_iteration_at_a_time(
    disjoint_categories: CategorySet, balanced_corpus: List[ContentItem]
) -> None:
    loop = ConvergenceLoop(disjoint_categories, balanced_corpus)
    assert loop.state is LoopState.RUNNING
    assert loop.iteration == 0

    record = loop.step()

    assert record.iteration == 1
    assert loop.state is LoopState.CONVERGED
    with pytest.raises(RuntimeError):
        loop.step()
    assert loop.run().state is LoopState.CONVERGED


def test_report_requires_an_iteration(disjoint_categories: CategorySet) -> None:
    with pytest.raises(RuntimeError):
        ConvergenceLoop(disjoint_categories, []).report()


def test_validate_rejects_malformed_graph() -> None:
    categories = [Category(id="a", name="Alpha", keywords=["x"], depth=1, parent_id="ghost")]
    loop = ConvergenceLoop(categories, ["x"], validate=True)

    with pytest.raises(MalformedCategoryGraphError):
        loop.run()
    assert loop.iteration == 0


def test_exhaustion_is_logged_as_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="cathealth"):
        ConvergenceLoop(_correlated_pair(), ["token"], HealthConfig(max_iterations=1)).run()

    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "exhausted" in warnings[0].getMessage()
    assert any("Iteration 1/1" in record.getMessage() for record in caplog.records)


def test_report_to_dict(disjoint_categories: CategorySet, balanced_corpus: List[ContentItem]) -> None:
    data = ConvergenceLoop(disjoint_categories, balanced_corpus).run().to_dict()

    assert data["state"] == "converged"
    assert set(data["scores"]) == {
        "orthogonality",
        "coverage",
        "uniformity",
        "hierarchy",
        "category_health",
        "cosine_alignment",
    }
    assert data["grades"]["orthogonality"] == "A"
    assert data["legitimacy"]["is_legitimate"] is True
    assert data["iterations"] == [
        {
            "iteration": 1,
            "all_rules_pass": True,
            "scores": data["scores"],
            "actions": [],
        }
    ]
