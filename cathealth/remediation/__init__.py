"""Remediation actions and the planner that applies them."""

from .actions import (
    Action,
    EnhanceChildKeywords,
    ExpandKeywords,
    MergeOrSplitSuggestion,
    RedistributeKeywords,
)
from .planner import RemediationPlanner

__all__ = [
    "Action",
    "EnhanceChildKeywords",
    "ExpandKeywords",
    "MergeOrSplitSuggestion",
    "RedistributeKeywords",
    "RemediationPlanner",
]
