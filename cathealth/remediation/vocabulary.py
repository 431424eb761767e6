"""Fixed topical vocabularies keyed by :class:`Theme`."""

from __future__ import annotations

from typing import Dict, Tuple

from ..models import Theme

# Generic domain terms added to top-level categories when coverage is low.
DOMAIN_KEYWORDS: Dict[Theme, Tuple[str, ...]] = {
    Theme.ANALYSIS: (
        "analyze", "study", "examine", "inspect", "assess", "evaluate",
        "review", "check", "test", "validate", "verify", "measure",
    ),
    Theme.PATENT: (
        "patent", "intellectual", "property", "invention", "claim", "filing",
        "application", "legal", "protection", "innovation",
    ),
    Theme.STRATEGY: (
        "strategy", "plan", "roadmap", "vision", "mission", "goal", "objective",
        "target", "direction", "approach",
    ),
    Theme.IMPLEMENTATION: (
        "implement", "build", "create", "develop", "code", "software", "system",
        "application", "program", "execute",
    ),
    Theme.VISUALIZATION: (
        "visual", "display", "show", "render", "chart", "graph", "plot",
        "diagram", "report", "dashboard",
    ),
    Theme.MEASUREMENT: (
        "asymmetry", "orthogonal", "correlation", "triangle", "diagonal",
        "variance", "coherence",
    ),
    Theme.DOCUMENTATION: (
        "intent", "specification", "mvp", "architecture", "vision", "promise",
        "expectation",
    ),
    Theme.TECHNICAL: (
        "configuration", "environment", "setup", "deployment", "infrastructure",
        "maintenance",
    ),
}
# Unmapped themes, GENERAL included, contribute no domain terms.
DEFAULT_DOMAIN_KEYWORDS: Tuple[str, ...] = ()

# Terms that lift underrepresented categories when uniformity is low.
EXPANSION_KEYWORDS: Dict[Theme, Tuple[str, ...]] = {
    Theme.ANALYSIS: ("method", "technique", "approach", "procedure", "process"),
    Theme.PATENT: ("license", "copyright", "trademark", "rights", "ownership"),
    Theme.STRATEGY: ("tactic", "method", "approach", "framework", "methodology"),
    Theme.IMPLEMENTATION: ("development", "construction", "building", "creation", "deployment"),
    Theme.VISUALIZATION: ("presentation", "display", "rendering", "drawing", "plotting"),
}
DEFAULT_EXPANSION_KEYWORDS: Tuple[str, ...] = ("enhanced", "improved", "advanced", "optimized")

# Distinctive terms for child categories when the hierarchy is not populated.
CHILD_KEYWORDS: Dict[Theme, Tuple[str, ...]] = {
    Theme.RESEARCH: (
        "study", "investigate", "explore", "research", "discovery", "findings",
        "results", "evidence",
    ),
    Theme.DATA: (
        "data", "dataset", "information", "statistics", "metrics", "numbers",
        "values", "measurements",
    ),
    Theme.FILING: ("file", "document", "submit", "application", "form", "paperwork", "submission"),
    Theme.MATH: ("math", "mathematical", "equation", "formula", "calculation", "compute", "numeric"),
    Theme.ACADEMIC: (
        "academic", "university", "scholar", "paper", "publication", "journal", "conference",
    ),
    Theme.BUSINESS: (
        "business", "commercial", "enterprise", "corporate", "company", "market", "revenue",
    ),
    Theme.CORE: ("core", "engine", "main", "primary", "central", "fundamental", "base", "essential"),
    Theme.TOOLS: ("tool", "utility", "cli", "command", "script", "program", "executable"),
    Theme.MATRIX: ("matrix", "grid", "table", "array", "structure", "layout", "arrangement"),
    Theme.VISUALIZATION: ("visual", "graphic", "image", "picture", "diagram", "illustration", "display"),
}
DEFAULT_CHILD_KEYWORDS: Tuple[str, ...] = ("specific", "detailed", "focused", "specialized")


def domain_keywords(theme: Theme) -> Tuple[str, ...]:
    return DOMAIN_KEYWORDS.get(theme, DEFAULT_DOMAIN_KEYWORDS)


def expansion_keywords(theme: Theme) -> Tuple[str, ...]:
    return EXPANSION_KEYWORDS.get(theme, DEFAULT_EXPANSION_KEYWORDS)


def child_keywords(theme: Theme) -> Tuple[str, ...]:
    return CHILD_KEYWORDS.get(theme, DEFAULT_CHILD_KEYWORDS)


__all__ = ["child_keywords", "domain_keywords", "expansion_keywords"]
