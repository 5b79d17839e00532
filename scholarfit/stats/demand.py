from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from scholarfit.normalize.dimensions import (
    DIMENSIONS,
    Dimension,
    complete_vector,
    dimension_index,
    normalize_dimension_list,
)
from scholarfit.normalize.schema import ScholarshipRecord
from scholarfit.rank.fit_scoring import round_for_display

PERCENT_SCALE = 100.0
FREQUENCY_DISPLAY_DIGITS = 2


@dataclass(frozen=True, slots=True)
class DemandGap:
    dimension: Dimension
    demand: float
    student_level: float
    gap: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "dimension": self.dimension,
            "demand": self.demand,
            "student_level": self.student_level,
            "gap": self.gap,
        }


def demand_frequency(corpus: Sequence[ScholarshipRecord]) -> dict[Dimension, float]:
    """Share of scholarships (0-100) that list each dimension as a priority.

    Driven by priority lists only; numeric weights play no part.
    """

    counter: Counter[str] = Counter()
    for scholarship in corpus:
        counter.update(normalize_dimension_list(scholarship.priorities))

    total = max(1, len(corpus))
    return {name: PERCENT_SCALE * counter[name] / total for name in DIMENSIONS}


def display_frequencies(frequencies: Mapping[str, float]) -> dict[str, float]:
    return {
        name: float(round_for_display(value, FREQUENCY_DISPLAY_DIGITS))
        for name, value in frequencies.items()
    }


def top_demand_dimension(corpus: Sequence[ScholarshipRecord]) -> Dimension:
    frequencies = demand_frequency(corpus)
    return min(DIMENSIONS, key=lambda name: (-frequencies[name], dimension_index(name)))


def improvement_gaps(
    features: Mapping[str, float] | None,
    corpus: Sequence[ScholarshipRecord],
) -> list[DemandGap]:
    """Where corpus demand outpaces the student, most-demanded dimension first."""

    frequencies = demand_frequency(corpus)
    student = complete_vector(features)
    ordered = sorted(DIMENSIONS, key=lambda name: (-frequencies[name], dimension_index(name)))

    gaps: list[DemandGap] = []
    for name in ordered:
        student_level = PERCENT_SCALE * student[name]
        gaps.append(
            DemandGap(
                dimension=name,
                demand=frequencies[name],
                student_level=student_level,
                gap=max(0.0, frequencies[name] - student_level),
            )
        )
    return gaps
