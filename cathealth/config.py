"""Configuration loading for cathealth (.cathealth.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

_CONFIG_NAME = ".cathealth.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed or is out of range."""


@dataclass
class Thresholds:
    """Pass/fail bars for the health metrics and legitimacy checks."""

    orthogonality: float = 0.70
    coverage: float = 0.60
    uniformity: float = 0.80
    hierarchy_children: int = 3
    category_health: float = 70.0
    cosine_alignment: float = 60.0


@dataclass
class GradingWeights:
    """Weights of the composite process health score."""

    orthogonality: float = 0.25
    uniformity: float = 0.25
    coverage: float = 0.20
    category_health: float = 0.15
    cosine_alignment: float = 0.15


@dataclass
class HealthConfig:
    """Represents the settings defined in .cathealth.yml."""

    root: Optional[Path] = None
    thresholds: Thresholds = field(default_factory=Thresholds)
    weights: GradingWeights = field(default_factory=GradingWeights)
    uniformity_target: float = 10.0
    max_iterations: int = 5


def load_config(config_path: Path) -> HealthConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return HealthConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{_CONFIG_NAME} must contain a mapping at the root")

    config = HealthConfig(root=root)

    threshold_data = _as_dict(data.get("thresholds"))
    thresholds = config.thresholds
    for name in ("orthogonality", "coverage", "uniformity"):
        value = _as_float(threshold_data.get(name))
        if value is None:
            continue
        if not 0.0 <= value <= 1.0:
            raise ConfigError(f"thresholds.{name} must be between 0 and 1 (got {value})")
        setattr(thresholds, name, value)
    for name in ("category_health", "cosine_alignment"):
        value = _as_float(threshold_data.get(name))
        if value is None:
            continue
        if not 0.0 <= value <= 100.0:
            raise ConfigError(f"thresholds.{name} must be between 0 and 100 (got {value})")
        setattr(thresholds, name, value)
    children = _as_int(threshold_data.get("hierarchy_children"))
    if children is not None:
        if children < 0:
            raise ConfigError("thresholds.hierarchy_children must not be negative")
        thresholds.hierarchy_children = children

    uniformity_data = _as_dict(data.get("uniformity"))
    target = _as_float(uniformity_data.get("target_mentions_per_node"))
    if target is not None:
        if target <= 0:
            raise ConfigError("uniformity.target_mentions_per_node must be positive")
        config.uniformity_target = target

    loop_data = _as_dict(data.get("loop"))
    max_iterations = _as_int(loop_data.get("max_iterations"))
    if max_iterations is not None:
        if max_iterations < 1:
            raise ConfigError("loop.max_iterations must be at least 1")
        config.max_iterations = max_iterations

    grading_data = _as_dict(data.get("grading"))
    weight_data = _as_dict(grading_data.get("weights"))
    for name in ("orthogonality", "uniformity", "coverage", "category_health", "cosine_alignment"):
        value = _as_float(weight_data.get(name))
        if value is None:
            continue
        if value < 0:
            raise ConfigError(f"grading.weights.{name} must not be negative")
        setattr(config.weights, name, value)

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / _CONFIG_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None
