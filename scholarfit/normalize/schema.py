from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from scholarfit.normalize.dimensions import (
    DIMENSIONS,
    Dimension,
    normalize_dimension_list,
    sanitize_features,
    sanitize_weights,
)

PRIORITY_BASE_WEIGHT = 0.05
PRIORITY_LEAD_WEIGHT = 0.22
PRIORITY_STEP = 0.04
PRIORITY_FLOOR_WEIGHT = 0.08


def weights_from_priorities(priorities: Iterable[str] | None) -> dict[Dimension, float]:
    """Fallback weight vector for scholarships that only declare a priority list.

    Every dimension starts at 0.05; the i-th priority is lifted to
    max(0.22 - 0.04 * i, 0.08).
    """

    weights: dict[Dimension, float] = {name: PRIORITY_BASE_WEIGHT for name in DIMENSIONS}
    for index, name in enumerate(normalize_dimension_list(priorities)):
        emphasis = max(PRIORITY_LEAD_WEIGHT - index * PRIORITY_STEP, PRIORITY_FLOOR_WEIGHT)
        weights[name] = max(weights[name], emphasis)
    return weights


def _require_id(payload: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = payload.get(key)
        if value is not None and str(value).strip():
            return str(value).strip()
    raise ValueError(f"Record payload is missing a non-empty id (looked for {', '.join(keys)}).")


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_id_tuple(values: Any) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    ids: list[str] = []
    for item in values:
        text = _optional_text(item)
        if text:
            ids.append(text)
    return tuple(ids)


@dataclass(frozen=True, slots=True)
class ScholarshipRecord:
    """Scholarship as seen by the fit engine: identity, weight vector and priority list."""

    scholarship_id: str
    name: str
    weights: Mapping[str, float]
    category: Optional[str] = None
    priorities: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> ScholarshipRecord:
        scholarship_id = _require_id(payload, "scholarship_id", "id")
        priorities = normalize_dimension_list(payload.get("priorities"))
        raw_weights = payload.get("weights")
        # An explicit mapping, even an empty one, is kept: {} reads as all-zero weights.
        if raw_weights is not None:
            weights = sanitize_weights(raw_weights)
        else:
            weights = weights_from_priorities(priorities)
        return cls(
            scholarship_id=scholarship_id,
            name=_optional_text(payload.get("name")) or scholarship_id,
            weights=weights,
            category=_optional_text(payload.get("category") or payload.get("type")),
            priorities=priorities,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "scholarship_id": self.scholarship_id,
            "name": self.name,
            "category": self.category,
            "weights": dict(self.weights),
            "priorities": list(self.priorities),
        }


@dataclass(frozen=True, slots=True)
class StudentRecord:
    """Student as seen by the fit engine: identity, feature vector, upstream recommendations."""

    student_id: str
    name: str
    features: Mapping[str, float]
    recommended_scholarship_ids: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> StudentRecord:
        student_id = _require_id(payload, "student_id", "id")
        return cls(
            student_id=student_id,
            name=_optional_text(payload.get("name")) or student_id,
            features=sanitize_features(payload.get("features")),
            recommended_scholarship_ids=_as_id_tuple(
                payload.get("recommended_scholarship_ids", payload.get("recommendedScholarshipIds"))
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "student_id": self.student_id,
            "name": self.name,
            "features": dict(self.features),
            "recommended_scholarship_ids": list(self.recommended_scholarship_ids),
        }
