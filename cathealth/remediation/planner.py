"""Selects and applies category mutations for failing metrics."""

from __future__ import annotations

import copy
import math
from typing import List, Optional

from ..config import HealthConfig
from ..logging import get_logger
from ..metrics.engine import MetricSnapshot
from ..models import CategorySet
from .actions import (
    Action,
    EnhanceChildKeywords,
    ExpandKeywords,
    MergeOrSplitSuggestion,
    RedistributeKeywords,
)
from .vocabulary import child_keywords, domain_keywords, expansion_keywords

MAX_DOMAIN_KEYWORDS = 5
TRUNCATE_RATIO = 0.7
MIN_KEPT_KEYWORDS = 3


class RemediationPlanner:
    """Turns failing metrics into keyword mutations.

    Fixes run in a fixed order (hierarchy, uniformity, coverage, then
    orthogonality suggestions) and each step sees the keyword sets left by the
    previous one. Orthogonality only yields suggestions because merging or
    splitting would change the number of categories.
    """

    def __init__(self, config: Optional[HealthConfig] = None) -> None:
        self.config = config or HealthConfig()
        self.logger = get_logger("remediation")

    def remediate(self, snapshot: MetricSnapshot, categories: CategorySet) -> List[Action]:
        """Apply fixes for every failing metric to ``categories`` in place."""
        actions: List[Action] = []
        if not snapshot.hierarchy.is_healthy:
            actions.extend(self._enhance_children(categories))
        if not snapshot.uniformity.is_healthy:
            actions.extend(self._redistribute(snapshot, categories))
        if not snapshot.coverage.is_healthy:
            actions.extend(self._expand(categories))
        if not snapshot.orthogonality.is_healthy:
            actions.extend(self._suggest_merges(snapshot))
        for action in actions:
            self.logger.debug("Remediation action: %s", action)
        return actions

    def suggest(self, snapshot: MetricSnapshot, categories: CategorySet) -> List[Action]:
        """Return the actions :meth:`remediate` would take, leaving ``categories`` untouched."""
        return self.remediate(snapshot, copy.deepcopy(categories))

    def _enhance_children(self, categories: CategorySet) -> List[Action]:
        actions: List[Action] = []
        for category in categories.children():
            added = category.add_keywords(child_keywords(category.theme))
            if added:
                actions.append(EnhanceChildKeywords(category.id, tuple(added)))
        return actions

    def _redistribute(self, snapshot: MetricSnapshot, categories: CategorySet) -> List[Action]:
        actions: List[Action] = []
        for outlier in snapshot.uniformity.underrepresented:
            category = categories.get(outlier.category_id)
            if category is None:
                continue
            added = category.add_keywords(expansion_keywords(category.theme))
            if added:
                actions.append(RedistributeKeywords(category.id, add=tuple(added)))
        for outlier in snapshot.uniformity.overloaded:
            category = categories.get(outlier.category_id)
            if category is None:
                continue
            keep = max(MIN_KEPT_KEYWORDS, math.floor(len(category.keywords) * TRUNCATE_RATIO))
            removed = category.keywords[keep:]
            if removed:
                category.keywords = category.keywords[:keep]
                actions.append(RedistributeKeywords(category.id, remove=tuple(removed)))
        return actions

    def _expand(self, categories: CategorySet) -> List[Action]:
        # One action per top-level category, even when nothing is left to add.
        actions: List[Action] = []
        for category in categories.top_level():
            candidates = [
                word for word in domain_keywords(category.theme) if not category.has_keyword(word)
            ]
            added = category.add_keywords(candidates[:MAX_DOMAIN_KEYWORDS])
            actions.append(ExpandKeywords(category.id, tuple(added)))
        return actions

    @staticmethod
    def _suggest_merges(snapshot: MetricSnapshot) -> List[Action]:
        return [
            MergeOrSplitSuggestion(pair.category_a, pair.category_b, pair.similarity, pair.severity)
            for pair in snapshot.orthogonality.correlated_pairs
        ]


__all__ = ["RemediationPlanner"]
