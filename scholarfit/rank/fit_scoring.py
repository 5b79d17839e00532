from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd

from scholarfit.normalize.dimensions import DIMENSIONS, Dimension, vector_to_array
from scholarfit.normalize.schema import ScholarshipRecord, StudentRecord
from scholarfit.rank.weights import DEFAULT_SCORING_CONFIG, ScoringConfig
from scholarfit.rank.winner_tilt import normalize_unit_sum, tilt_to_winners

SCORE_SCALE = 100.0

CORPUS_SCORE_COLUMNS = [
    "scholarship_id",
    "name",
    "category",
    "personality_fit",
    "winner_fit",
    "overall_fit",
]


def round_for_display(value: float, ndigits: int = 0) -> float | int:
    """Half-up rounding for display values. Only call this at the output boundary.

    NaN and infinities have no rounded form and come back unchanged as floats.
    """

    if not math.isfinite(value):
        return float(value)
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if ndigits <= 0:
        return int(rounded)
    return float(rounded)


@dataclass(frozen=True, slots=True)
class FitResult:
    personality_fit: float
    winner_fit: float
    overall_fit: float
    top_contributors: tuple[Dimension, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "personality_fit": self.personality_fit,
            "winner_fit": self.winner_fit,
            "overall_fit": self.overall_fit,
            "top_contributors": list(self.top_contributors),
        }

    def to_display(self) -> dict[str, Any]:
        return {
            "personality_fit": round_for_display(self.personality_fit),
            "winner_fit": round_for_display(self.winner_fit),
            "overall_fit": round_for_display(self.overall_fit),
            "top_contributors": list(self.top_contributors),
        }


def _weighted_fit(weights: np.ndarray, features: np.ndarray) -> float:
    return float(SCORE_SCALE * np.dot(weights, features))


def score_fit(
    features: Mapping[str, float] | None,
    weights: Mapping[str, float] | None,
    config: ScoringConfig | None = None,
) -> FitResult:
    """Score one student feature vector against one scholarship weight vector.

    personality_fit is the full weighted sum, winner_fit the same sum over the
    winner-tilted weights, overall_fit their blend. Nothing is rounded here.
    """

    active_config = config or DEFAULT_SCORING_CONFIG
    if active_config.weight_normalization == "unit_sum":
        weights = normalize_unit_sum(weights)

    feature_values = vector_to_array(features)
    weight_values = vector_to_array(weights)
    tilted = tilt_to_winners(weights, top_n=active_config.winner_top_n)
    tilted_values = vector_to_array(tilted)

    personality_fit = _weighted_fit(weight_values, feature_values)
    winner_fit = _weighted_fit(tilted_values, feature_values)
    blend = active_config.blend
    overall_fit = blend.personality * personality_fit + blend.winner * winner_fit

    ranked = sorted(
        (name for name in DIMENSIONS if tilted[name] > 0.0),
        key=lambda name: -tilted[name],
    )
    return FitResult(
        personality_fit=personality_fit,
        winner_fit=winner_fit,
        overall_fit=overall_fit,
        top_contributors=tuple(ranked),
    )


def score_scholarship(
    student: StudentRecord,
    scholarship: ScholarshipRecord,
    config: ScoringConfig | None = None,
) -> FitResult:
    return score_fit(student.features, scholarship.weights, config)


def score_corpus(
    student: StudentRecord,
    corpus: Sequence[ScholarshipRecord],
    config: ScoringConfig | None = None,
) -> pd.DataFrame:
    rows: list[dict[str, Any]] = []
    for scholarship in corpus:
        fit = score_scholarship(student, scholarship, config)
        rows.append(
            {
                "scholarship_id": scholarship.scholarship_id,
                "name": scholarship.name,
                "category": scholarship.category,
                "personality_fit": fit.personality_fit,
                "winner_fit": fit.winner_fit,
                "overall_fit": fit.overall_fit,
            }
        )
    return pd.DataFrame(rows, columns=CORPUS_SCORE_COLUMNS)
