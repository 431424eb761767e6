"""Validator guarding the category forest before a convergence run."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set

from ..models import Category, CategorySet
from .base import (
    MalformedCategoryGraphError,
    ValidationError,
    ValidationIssue,
    Validator,
    summarise,
)


class CategoryGraphValidator(Validator):
    """Checks ids, parent references, depths and keyword sets."""

    name = "category_graph"

    def validate(self, categories: CategorySet) -> List[ValidationIssue]:
        issues: List[ValidationIssue] = []
        by_id: Dict[str, Category] = {}
        for category in categories:
            if category.id in by_id:
                issues.append(
                    ValidationIssue(category.id, "duplicate_id", "category id is used more than once")
                )
                continue
            by_id[category.id] = category

        for category in by_id.values():
            issues.extend(self._check_parent(category, by_id))
            if not category.keywords:
                issues.append(
                    ValidationIssue(
                        category.id, "empty_keywords", "category has no keywords", fatal=False
                    )
                )
            if category.weight <= 0:
                issues.append(
                    ValidationIssue(
                        category.id,
                        "non_positive_weight",
                        f"weight must be positive (got {category.weight})",
                        fatal=False,
                    )
                )

        issues.extend(self._check_cycles(by_id))
        return issues

    @staticmethod
    def _check_parent(category: Category, by_id: Dict[str, Category]) -> List[ValidationIssue]:
        if category.parent_id is None:
            if category.depth != 0:
                return [
                    ValidationIssue(
                        category.id,
                        "depth_mismatch",
                        f"top-level category must have depth 0 (got {category.depth})",
                    )
                ]
            return []
        parent = by_id.get(category.parent_id)
        if parent is None:
            return [
                ValidationIssue(
                    category.id,
                    "dangling_parent",
                    f"parent '{category.parent_id}' does not exist",
                )
            ]
        if category.depth != parent.depth + 1:
            return [
                ValidationIssue(
                    category.id,
                    "depth_mismatch",
                    f"depth {category.depth} does not follow parent depth {parent.depth}",
                )
            ]
        return []

    @staticmethod
    def _check_cycles(by_id: Dict[str, Category]) -> List[ValidationIssue]:
        issues: List[ValidationIssue] = []
        reported: Set[str] = set()
        for start in by_id:
            seen: List[str] = []
            current: Optional[str] = start
            while current is not None and current in by_id:
                if current in seen:
                    cycle = seen[seen.index(current):]
                    key = min(cycle)
                    if key not in reported:
                        reported.add(key)
                        issues.append(
                            ValidationIssue(
                                key, "parent_cycle", "parent chain loops: " + " -> ".join(cycle)
                            )
                        )
                    break
                seen.append(current)
                current = by_id[current].parent_id
        return issues


def validate_categories(
    categories: CategorySet | Iterable[Category], *, strict: bool = False
) -> List[ValidationIssue]:
    """Raise on a malformed category graph and return the non-fatal issues.

    With ``strict`` the non-fatal issues (empty keywords, non-positive weight)
    raise :class:`ValidationError` as well.
    """
    issues = CategoryGraphValidator().validate(CategorySet.coerce(categories))
    fatal = [issue for issue in issues if issue.fatal]
    if fatal:
        raise MalformedCategoryGraphError(
            f"Malformed category graph: {summarise(fatal)}", fatal
        )
    if strict and issues:
        raise ValidationError(f"Category validation failed: {summarise(issues)}", issues)
    return issues


__all__ = ["CategoryGraphValidator", "validate_categories"]
