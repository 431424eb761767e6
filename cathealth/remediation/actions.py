"""Category mutation actions emitted by the remediation planner."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar, Dict, Tuple


@dataclass(frozen=True)
class Action:
    """Base class; ``mutates`` tells whether applying it changes keywords."""

    kind: ClassVar[str] = "action"
    mutates: ClassVar[bool] = True

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {"kind": self.kind}
        for key, value in asdict(self).items():
            data[key] = list(value) if isinstance(value, tuple) else value
        return data


@dataclass(frozen=True)
class EnhanceChildKeywords(Action):
    kind: ClassVar[str] = "enhance_child_keywords"

    category_id: str
    add: Tuple[str, ...]


@dataclass(frozen=True)
class RedistributeKeywords(Action):
    kind: ClassVar[str] = "redistribute_keywords"

    category_id: str
    add: Tuple[str, ...] = ()
    remove: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ExpandKeywords(Action):
    kind: ClassVar[str] = "expand_keywords"

    category_id: str
    add: Tuple[str, ...]


@dataclass(frozen=True)
class MergeOrSplitSuggestion(Action):
    """Recommendation only: merging or splitting changes category cardinality."""

    kind: ClassVar[str] = "merge_or_split"
    mutates: ClassVar[bool] = False

    category_a: str
    category_b: str
    similarity: float
    severity: str


__all__ = [
    "Action",
    "EnhanceChildKeywords",
    "ExpandKeywords",
    "MergeOrSplitSuggestion",
    "RedistributeKeywords",
]
