"""Bounded measure, assess and repair loop over one category set."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .config import HealthConfig
from .grading import Grades, grade_snapshot
from .legitimacy import LegitimacyAssessor, LegitimacyVerdict
from .logging import get_logger
from .metrics.engine import MetricEngine, MetricSnapshot
from .models import Category, CategorySet, ContentItem, as_corpus
from .recommendations import Recommendation, build_recommendations
from .remediation import Action, RemediationPlanner
from .validators import validate_categories


class LoopState(str, Enum):
    RUNNING = "running"
    CONVERGED = "converged"
    EXHAUSTED = "exhausted"

    @property
    def terminal(self) -> bool:
        return self is not LoopState.RUNNING


@dataclass(frozen=True)
class IterationRecord:
    """One measured iteration and the actions applied after it."""

    iteration: int
    snapshot: MetricSnapshot
    actions_applied: Tuple[Action, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        return {
            "iteration": self.iteration,
            "all_rules_pass": self.snapshot.all_rules_pass,
            "scores": {name: round(score, 2) for name, score in self.snapshot.scores().items()},
            "actions": [action.to_dict() for action in self.actions_applied],
        }


@dataclass
class HealthReport:
    metrics: MetricSnapshot
    grades: Grades
    legitimacy: LegitimacyVerdict
    recommendations: List[Action] = field(default_factory=list)
    advice: List[Recommendation] = field(default_factory=list)
    iterations: List[IterationRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "scores": {name: round(score, 2) for name, score in self.metrics.scores().items()},
            "grades": self.grades.to_dict(),
            "legitimacy": self.legitimacy.to_dict(),
            "recommendations": [action.to_dict() for action in self.recommendations],
            "advice": [item.to_dict() for item in self.advice],
            "iterations": [record.to_dict() for record in self.iterations],
        }


@dataclass
class ConvergenceResult:
    state: LoopState
    report: HealthReport

    @property
    def converged(self) -> bool:
        return self.state is LoopState.CONVERGED

    def to_dict(self) -> Dict[str, object]:
        data = self.report.to_dict()
        data["state"] = self.state.value
        return data


class ConvergenceLoop:
    """Drives the metric engine, legitimacy assessor and remediation planner.

    The loop owns ``categories`` for the duration of a run and mutates it in
    place between iterations. It stops as soon as all four core metrics are
    healthy (``CONVERGED``) or after ``config.max_iterations`` iterations
    (``EXHAUSTED``). Exhaustion is an ordinary outcome and is reported through
    the returned state, never raised.
    """

    def __init__(
        self,
        categories: CategorySet | Iterable[Category],
        corpus: Iterable[ContentItem | str],
        config: Optional[HealthConfig] = None,
        *,
        engine: Optional[MetricEngine] = None,
        assessor: Optional[LegitimacyAssessor] = None,
        planner: Optional[RemediationPlanner] = None,
        validate: bool = False,
    ) -> None:
        self.config = config or HealthConfig()
        self.categories = CategorySet.coerce(categories)
        self.corpus = as_corpus(corpus)
        self.engine = engine or MetricEngine(self.config)
        self.assessor = assessor or LegitimacyAssessor(self.config)
        self.planner = planner or RemediationPlanner(self.config)
        self.validate = validate
        self.logger = get_logger("convergence")

        self.state = LoopState.RUNNING
        self.iteration = 0
        self.history: List[IterationRecord] = []
        self._last_verdict: Optional[LegitimacyVerdict] = None

    @property
    def max_iterations(self) -> int:
        return self.config.max_iterations

    def step(self) -> IterationRecord:
        """Run a single iteration and advance the loop state."""
        if self.state.terminal:
            raise RuntimeError(f"Convergence loop already finished ({self.state.value})")
        if self.iteration == 0 and self.validate:
            validate_categories(self.categories)

        self.iteration += 1
        snapshot = self.engine.measure(self.categories, self.corpus)
        self._last_verdict = self.assessor.assess(snapshot)
        self.logger.info(
            "Iteration %d/%d: %s",
            self.iteration,
            self.max_iterations,
            ", ".join(f"{name}={score:.1f}" for name, score in snapshot.scores().items()),
        )

        if snapshot.all_rules_pass:
            record = IterationRecord(self.iteration, snapshot)
            self.history.append(record)
            self.state = LoopState.CONVERGED
            self.logger.info("Converged after %d iteration(s)", self.iteration)
            return record

        self.logger.info("Failing rules: %s", ", ".join(snapshot.failing()))
        actions = self.planner.remediate(snapshot, self.categories)
        record = IterationRecord(self.iteration, snapshot, tuple(actions))
        self.history.append(record)
        if self.iteration >= self.max_iterations:
            self.state = LoopState.EXHAUSTED
            self.logger.warning(
                "Iteration budget exhausted after %d iteration(s); still failing: %s",
                self.iteration,
                ", ".join(snapshot.failing()),
            )
        return record

    def run(self) -> ConvergenceResult:
        """Iterate until converged or out of budget and return the final report."""
        for _ in range(self.iteration, self.max_iterations):
            if self.state.terminal:
                break
            self.step()
        return ConvergenceResult(self.state, self.report())

    def report(self) -> HealthReport:
        if not self.history or self._last_verdict is None:
            raise RuntimeError("No iteration has run yet")
        snapshot = self.history[-1].snapshot
        return HealthReport(
            metrics=snapshot,
            grades=grade_snapshot(snapshot, self.config.weights),
            legitimacy=self._last_verdict,
            recommendations=self.planner.suggest(snapshot, self.categories),
            advice=build_recommendations(snapshot),
            iterations=list(self.history),
        )


__all__ = [
    "ConvergenceLoop",
    "ConvergenceResult",
    "HealthReport",
    "IterationRecord",
    "LoopState",
]
