"""Core validation data structures for category ingestion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Sequence

from ..models import CategorySet


@dataclass
class ValidationIssue:
    """Represents a single problem found in a category definition."""

    category_id: str
    code: str
    detail: str
    fatal: bool = True


class ValidationError(RuntimeError):
    """Raised when validation fails for one or more categories."""

    def __init__(self, message: str, issues: Sequence[ValidationIssue]) -> None:
        super().__init__(message)
        self.issues = list(issues)


class MalformedCategoryGraphError(ValidationError):
    """Raised when parent references form a cycle, dangle or disagree with depth."""


class Validator(Protocol):
    """Protocol implemented by category validators."""

    name: str

    def validate(self, categories: CategorySet) -> List[ValidationIssue]:
        """Run validation and return any issues."""


def summarise(issues: Sequence[ValidationIssue], *, limit: int = 5) -> str:
    shown = "; ".join(f"{issue.category_id}: {issue.detail}" for issue in issues[:limit])
    remainder = len(issues) - limit
    if remainder > 0:
        shown += f" (+{remainder} more)"
    return shown
