from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from scholarfit.normalize.dimensions import (
    DIMENSION_LABELS,
    DIMENSIONS,
    Dimension,
    complete_vector,
    dimension_index,
)

PERCENT_SCALE = 100.0


@dataclass(frozen=True, slots=True)
class DimensionContribution:
    dimension: Dimension
    student_value: float
    weight: float
    contribution: float
    gap: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "dimension": self.dimension,
            "student_value": self.student_value,
            "weight": self.weight,
            "contribution": self.contribution,
            "gap": self.gap,
        }


def explain_contributions(
    features: Mapping[str, float] | None,
    weights: Mapping[str, float] | None,
) -> list[DimensionContribution]:
    """Per-dimension breakdown of a fit, strongest contribution first.

    contribution = student_value * weight, gap = weight - student_value.
    Equal contributions fall back to canonical dimension order so repeated
    calls always produce the same sequence.
    """

    student = complete_vector(features)
    scholarship = complete_vector(weights)
    rows = [
        DimensionContribution(
            dimension=name,
            student_value=student[name],
            weight=scholarship[name],
            contribution=student[name] * scholarship[name],
            gap=scholarship[name] - student[name],
        )
        for name in DIMENSIONS
    ]
    return sorted(rows, key=lambda row: (-row.contribution, dimension_index(row.dimension)))


def weight_profile(weights: Mapping[str, float] | None) -> list[tuple[Dimension, str, float]]:
    scholarship = complete_vector(weights)
    rows = [(name, DIMENSION_LABELS[name], scholarship[name]) for name in DIMENSIONS]
    return sorted(rows, key=lambda row: (-row[2], dimension_index(row[0])))


def profile_overlay(
    features: Mapping[str, float] | None,
    weights: Mapping[str, float] | None,
) -> list[dict[str, Any]]:
    """Student vs scholarship shape as percentages, canonical order, unrounded."""

    student = complete_vector(features)
    scholarship = complete_vector(weights)
    return [
        {
            "dimension": name,
            "label": DIMENSION_LABELS[name],
            "student": PERCENT_SCALE * student[name],
            "scholarship": PERCENT_SCALE * scholarship[name],
        }
        for name in DIMENSIONS
    ]
