from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Literal, Mapping

import numpy as np

logger = logging.getLogger(__name__)

Dimension = Literal[
    "academics",
    "leadership",
    "community",
    "need",
    "innovation",
    "research",
    "adversity",
]

DIMENSIONS: tuple[Dimension, ...] = (
    "academics",
    "leadership",
    "community",
    "need",
    "innovation",
    "research",
    "adversity",
)

DIMENSION_LABELS: dict[Dimension, str] = {
    "academics": "Academics",
    "leadership": "Leadership",
    "community": "Community Impact",
    "need": "Financial Need",
    "innovation": "Innovation",
    "research": "Research",
    "adversity": "Adversity / Resilience",
}

_DIMENSION_INDEX: dict[str, int] = {name: index for index, name in enumerate(DIMENSIONS)}


def dimension_index(dimension: str) -> int:
    """Canonical position of a dimension; the tie-break order used everywhere."""

    return _DIMENSION_INDEX[dimension]


def is_dimension(value: Any) -> bool:
    return isinstance(value, str) and value in _DIMENSION_INDEX


def complete_vector(vector: Mapping[str, float] | None) -> dict[Dimension, float]:
    """Return all 7 dimensions in canonical order; missing keys read as 0.0."""

    values = vector or {}
    return {name: float(values.get(name, 0.0)) for name in DIMENSIONS}


def vector_to_array(vector: Mapping[str, float] | None) -> np.ndarray:
    values = vector or {}
    return np.array([float(values.get(name, 0.0)) for name in DIMENSIONS], dtype=float)


def array_to_vector(values: np.ndarray) -> dict[Dimension, float]:
    return {name: float(values[index]) for index, name in enumerate(DIMENSIONS)}


def normalize_dimension_list(values: Iterable[Any] | None) -> tuple[Dimension, ...]:
    """Known dimensions only, lower-cased, first occurrence kept."""

    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]

    seen: list[Dimension] = []
    for item in values:
        if item is None:
            continue
        name = str(item).strip().lower()
        if is_dimension(name) and name not in seen:
            seen.append(name)  # type: ignore[arg-type]
    return tuple(seen)


def _coerce_float(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(numeric):
        return 0.0
    return numeric


def sanitize_features(payload: Mapping[str, Any] | None) -> dict[Dimension, float]:
    """Ingestion-side cleanup of a student feature vector: known keys, finite, clamped to [0, 1]."""

    raw = payload or {}
    features: dict[Dimension, float] = {}
    for name in DIMENSIONS:
        value = _coerce_float(raw.get(name))
        clamped = min(max(value, 0.0), 1.0)
        if clamped != value:
            logger.debug("Clamped feature %s from %r to %.3f", name, raw.get(name), clamped)
        features[name] = clamped
    return features


def sanitize_weights(payload: Mapping[str, Any] | None) -> dict[Dimension, float]:
    """Ingestion-side cleanup of a scholarship weight vector: known keys, finite, non-negative."""

    raw = payload or {}
    weights: dict[Dimension, float] = {}
    for name in DIMENSIONS:
        value = _coerce_float(raw.get(name))
        if value < 0.0:
            logger.debug("Clamped negative weight %s=%r to 0.0", name, raw.get(name))
            value = 0.0
        weights[name] = value
    return weights
