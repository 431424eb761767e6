from __future__ import annotations

from typing import List

import pytest

from cathealth.models import Category, CategorySet, ContentItem


@pytest.fixture
def disjoint_categories() -> CategorySet:
    """Three flat categories whose names and keywords share no tokens."""
    return CategorySet(
        [
            Category(id="storage", name="Storage", keywords=["disk"]),
            Category(id="network", name="Network", keywords=["socket"]),
            Category(id="graphics", name="Graphics", keywords=["pixel"]),
        ]
    )


@pytest.fixture
def balanced_corpus() -> List[ContentItem]:
    """Nine commits, three per category, each naming exactly one keyword once."""
    texts = [
        "disk quota raised",
        "disk cache flushed",
        "disk layout changed",
        "socket timeout raised",
        "socket buffer resized",
        "socket pool drained",
        "pixel shader tuned",
        "pixel grid aligned",
        "pixel format fixed",
    ]
    return [ContentItem(text) for text in texts]


@pytest.fixture
def nested_categories() -> CategorySet:
    """One parent with three children, each child keyed on its own term."""
    return CategorySet(
        [
            Category(id="core", name="Core", keywords=["engine"]),
            Category(id="core.parse", name="Parsing", keywords=["lexer"], depth=1, parent_id="core"),
            Category(id="core.plan", name="Planning", keywords=["optimizer"], depth=1, parent_id="core"),
            Category(id="core.exec", name="Execution", keywords=["runtime"], depth=1, parent_id="core"),
        ]
    )
