"""Validation package for category definitions supplied by collaborators."""

from .base import (
    MalformedCategoryGraphError,
    ValidationError,
    ValidationIssue,
    Validator,
)
from .category_graph import CategoryGraphValidator, validate_categories

__all__ = [
    "CategoryGraphValidator",
    "MalformedCategoryGraphError",
    "ValidationError",
    "ValidationIssue",
    "Validator",
    "validate_categories",
]
