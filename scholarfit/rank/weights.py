from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Mapping

from scholarfit.normalize.dimensions import DIMENSIONS

WEIGHT_TOLERANCE = 1e-6
WEIGHT_NORMALIZATION_MODES = ("raw", "unit_sum")

WeightNormalization = Literal["raw", "unit_sum"]


@dataclass(frozen=True, slots=True)
class FitBlendWeights:
    """`personality` weights the full-vector fit, `winner` the top-n tilted fit."""

    personality: float
    winner: float

    def __post_init__(self) -> None:
        for field_name in ("personality", "winner"):
            value = float(getattr(self, field_name))
            if not math.isfinite(value):
                raise ValueError(f"Blend weight '{field_name}' must be finite.")
            if value < 0.0 or value > 1.0:
                raise ValueError(f"Blend weight '{field_name}' must be between 0.0 and 1.0.")

        total = self.personality + self.winner
        if not math.isclose(total, 1.0, abs_tol=WEIGHT_TOLERANCE):
            raise ValueError(
                "Blend weights must sum to 1.0 "
                f"(received {total:.6f}, tolerance={WEIGHT_TOLERANCE})."
            )

    @classmethod
    def baseline(cls) -> FitBlendWeights:
        return cls(personality=0.60, winner=0.40)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> FitBlendWeights:
        values = payload or {}
        baseline = cls.baseline()
        return cls(
            personality=float(values.get("personality", baseline.personality)),
            winner=float(values.get("winner", baseline.winner)),
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "personality": self.personality,
            "winner": self.winner,
        }


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    """Knobs for scoring and ranking.

    `weight_normalization="raw"` scores against weights exactly as supplied, so
    personality fit is unbounded above when a weight vector sums past 1.
    `"unit_sum"` rescales every weight vector to sum to 1 first, keeping all
    scores inside [0, 100].
    """

    blend: FitBlendWeights = field(default_factory=FitBlendWeights.baseline)
    winner_top_n: int = 3
    weight_normalization: WeightNormalization = "raw"
    min_declared_recommendations: int = 3

    def __post_init__(self) -> None:
        for field_name in ("winner_top_n", "min_declared_recommendations"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field_name} must be an integer (received {value!r}).")

        if not 1 <= self.winner_top_n <= len(DIMENSIONS):
            raise ValueError(
                f"winner_top_n must be between 1 and {len(DIMENSIONS)} (received {self.winner_top_n})."
            )
        if self.weight_normalization not in WEIGHT_NORMALIZATION_MODES:
            raise ValueError(
                f"Unsupported weight_normalization '{self.weight_normalization}'. "
                f"Expected one of {', '.join(WEIGHT_NORMALIZATION_MODES)}."
            )
        if self.min_declared_recommendations < 1:
            raise ValueError("min_declared_recommendations must be at least 1.")

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> ScoringConfig:
        values = payload or {}
        defaults = cls()
        return cls(
            blend=FitBlendWeights.from_mapping(values.get("blend")),
            winner_top_n=values.get("winner_top_n", defaults.winner_top_n),
            weight_normalization=str(
                values.get("weight_normalization", defaults.weight_normalization)
            ).strip().lower(),  # type: ignore[arg-type]
            min_declared_recommendations=values.get(
                "min_declared_recommendations", defaults.min_declared_recommendations
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "blend": self.blend.to_dict(),
            "winner_top_n": self.winner_top_n,
            "weight_normalization": self.weight_normalization,
            "min_declared_recommendations": self.min_declared_recommendations,
        }


DEFAULT_SCORING_CONFIG = ScoringConfig()


def load_scoring_config(path: Path | str | None) -> ScoringConfig:
    """Read a JSON override file; `None` yields the defaults."""

    if path is None:
        return DEFAULT_SCORING_CONFIG

    resolved_path = Path(path)
    payload = json.loads(resolved_path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Scoring config in '{resolved_path}' must be a JSON object.")
    return ScoringConfig.from_mapping(payload)
