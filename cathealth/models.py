"""Core data models shared across cathealth components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional


class Theme(str, Enum):
    """Coarse topical tag that keys remediation vocabularies."""

    GENERAL = "general"
    ANALYSIS = "analysis"
    PATENT = "patent"
    STRATEGY = "strategy"
    IMPLEMENTATION = "implementation"
    VISUALIZATION = "visualization"
    MEASUREMENT = "measurement"
    DOCUMENTATION = "documentation"
    TECHNICAL = "technical"
    RESEARCH = "research"
    DATA = "data"
    FILING = "filing"
    MATH = "math"
    ACADEMIC = "academic"
    BUSINESS = "business"
    CORE = "core"
    TOOLS = "tools"
    MATRIX = "matrix"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "Theme":
        """Resolve a free-text label, falling back to ``GENERAL``."""
        if not label:
            return cls.GENERAL
        normalized = label.strip().lower()
        for theme in cls:
            if theme.value == normalized:
                return theme
        return cls.GENERAL


@dataclass
class Category:
    """Keyword-defined bucket used to classify content items."""

    id: str
    name: str
    keywords: List[str] = field(default_factory=list)
    weight: float = 1.0
    depth: int = 0
    parent_id: Optional[str] = None
    theme: Theme = Theme.GENERAL
    symbol: Optional[str] = None
    description: str = ""

    def __post_init__(self) -> None:
        initial = list(self.keywords)
        self.keywords = []
        self.add_keywords(initial)

    @property
    def is_child(self) -> bool:
        return self.depth > 0

    def has_keyword(self, word: str) -> bool:
        lowered = word.strip().lower()
        return any(existing.lower() == lowered for existing in self.keywords)

    def add_keywords(self, words: Iterable[str]) -> List[str]:
        """Append keywords not already present; return the ones actually added."""
        added: List[str] = []
        for word in words:
            cleaned = word.strip()
            if not cleaned or self.has_keyword(cleaned):
                continue
            self.keywords.append(cleaned)
            added.append(cleaned)
        return added

    def remove_keywords(self, words: Iterable[str]) -> None:
        drop = {word.strip().lower() for word in words}
        self.keywords = [word for word in self.keywords if word.lower() not in drop]


@dataclass(frozen=True)
class ContentItem:
    """Read-only text surface from a commit message or document excerpt."""

    text: str
    kind: str = "commit"

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", self.text.lower())


class CategorySet:
    """Ordered, id-keyed collection mutated in place between loop iterations."""

    def __init__(self, categories: Iterable[Category] = ()) -> None:
        self._items: List[Category] = list(categories)
        self._by_id: Dict[str, Category] = {}
        for category in self._items:
            self._by_id.setdefault(category.id, category)

    @classmethod
    def coerce(cls, categories: "CategorySet | Iterable[Category]") -> "CategorySet":
        if isinstance(categories, CategorySet):
            return categories
        return cls(categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    def get(self, category_id: str) -> Optional[Category]:
        return self._by_id.get(category_id)

    def ids(self) -> List[str]:
        return [category.id for category in self._items]

    def top_level(self) -> List[Category]:
        return [category for category in self._items if category.depth == 0]

    def children(self) -> List[Category]:
        return [category for category in self._items if category.is_child]

    def children_of(self, category_id: str) -> List[Category]:
        return [category for category in self._items if category.parent_id == category_id]


def as_corpus(items: Iterable["ContentItem | str"]) -> List[ContentItem]:
    """Wrap plain strings as commit content items."""
    corpus: List[ContentItem] = []
    for item in items:
        corpus.append(item if isinstance(item, ContentItem) else ContentItem(text=str(item)))
    return corpus


__all__ = ["Category", "CategorySet", "ContentItem", "Theme", "as_corpus"]
