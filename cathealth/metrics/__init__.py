"""Metric computations over categories and a content corpus."""

from .alignment import AlignmentResult, measure_alignment
from .base import MentionTable, MetricResult
from .category_health import CategoryHealthResult, measure_category_health
from .coverage import CoverageResult, measure_coverage
from .engine import MetricEngine, MetricSnapshot
from .hierarchy import HierarchyResult, measure_hierarchy
from .orthogonality import CorrelatedPair, OrthogonalityResult, measure_orthogonality
from .uniformity import UniformityResult, measure_uniformity, node_count

__all__ = [
    "AlignmentResult",
    "CategoryHealthResult",
    "CorrelatedPair",
    "CoverageResult",
    "HierarchyResult",
    "MentionTable",
    "MetricEngine",
    "MetricResult",
    "MetricSnapshot",
    "OrthogonalityResult",
    "UniformityResult",
    "measure_alignment",
    "measure_category_health",
    "measure_coverage",
    "measure_hierarchy",
    "measure_orthogonality",
    "measure_uniformity",
    "node_count",
]
