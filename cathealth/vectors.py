"""Bag-of-words vectors and match counting for categories and content."""

from __future__ import annotations

import math
import re
from collections import Counter
from functools import lru_cache
from typing import Dict, Iterable, List, Mapping

from .models import Category, ContentItem

CategoryVector = Dict[str, float]

NAME_WEIGHT = 3.0
KEYWORD_WEIGHT = 2.0

# Alignment vectors favour the name more heavily and fold in the description.
ALIGNMENT_NAME_WEIGHT = 5.0
ALIGNMENT_KEYWORD_WEIGHT = 3.0
ALIGNMENT_DESCRIPTION_WEIGHT = 1.0

_NON_WORD = re.compile(r"[^a-zA-Z0-9\s]")
_STOPWORDS = {
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "this", "that", "is", "are", "was", "were", "be", "been",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "can",
}


def build_category_vector(category: Category) -> CategoryVector:
    """Return the L2-normalised term vector of a category's name and keywords.

    A category without any tokens yields an empty (zero) vector.
    """
    vector: Dict[str, float] = {}
    for token in category.name.lower().split():
        vector[token] = vector.get(token, 0.0) + NAME_WEIGHT
    for keyword in category.keywords:
        for token in keyword.lower().split():
            vector[token] = vector.get(token, 0.0) + KEYWORD_WEIGHT
    return _normalise(vector)


def build_alignment_vector(category: Category) -> CategoryVector:
    vector: Dict[str, float] = {}
    _accumulate(vector, category.name, ALIGNMENT_NAME_WEIGHT)
    for keyword in category.keywords:
        _accumulate(vector, keyword, ALIGNMENT_KEYWORD_WEIGHT)
    if category.description:
        _accumulate(vector, category.description, ALIGNMENT_DESCRIPTION_WEIGHT)
    return _normalise(vector)


def build_content_vector(items: Iterable[ContentItem]) -> CategoryVector:
    """Term frequencies over the filtered tokens of ``items``."""
    counts: Counter[str] = Counter()
    for item in items:
        counts.update(token for token in tokenize(item.text) if _is_significant(token))
    total = sum(counts.values())
    if total == 0:
        return {}
    return {token: count / total for token, count in counts.items()}


def cosine_similarity(vector_a: Mapping[str, float], vector_b: Mapping[str, float]) -> float:
    """Cosine similarity of two sparse vectors; 0.0 when either has zero norm."""
    # Sorted shared keys keep the summation order, and thus the result, symmetric.
    shared = sorted(vector_a.keys() & vector_b.keys())
    dot = sum(vector_a[key] * vector_b[key] for key in shared)
    norm_a = math.sqrt(sum(value * value for value in vector_a.values()))
    norm_b = math.sqrt(sum(value * value for value in vector_b.values()))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (norm_a * norm_b)


def match_count(text: str, category: Category) -> int:
    """Count name, symbol and whole-word keyword mentions of ``category`` in ``text``."""
    lowered = text.lower()
    count = 0
    name = category.name.lower()
    if name and name in lowered:
        count += 1
    if category.symbol and category.symbol.lower() in lowered:
        count += 1
    for keyword in category.keywords:
        count += len(_keyword_pattern(keyword.lower()).findall(lowered))
    return count


def tokenize(text: str) -> List[str]:
    return _NON_WORD.sub(" ", text.lower()).split()


@lru_cache(maxsize=4096)
def _keyword_pattern(keyword: str) -> "re.Pattern[str]":
    return re.compile(rf"(?<!\w){re.escape(keyword)}(?!\w)")


def _accumulate(vector: Dict[str, float], text: str, weight: float) -> None:
    for token in tokenize(text):
        if _is_significant(token):
            vector[token] = vector.get(token, 0.0) + weight


def _is_significant(token: str) -> bool:
    return len(token) > 2 and token not in _STOPWORDS


def _normalise(vector: Dict[str, float]) -> CategoryVector:
    norm = math.sqrt(sum(value * value for value in vector.values()))
    if norm == 0:
        return vector
    return {token: value / norm for token, value in vector.items()}


__all__ = [
    "CategoryVector",
    "build_alignment_vector",
    "build_category_vector",
    "build_content_vector",
    "cosine_similarity",
    "match_count",
    "tokenize",
]
