from __future__ import annotations

from typing import Mapping

import numpy as np

from scholarfit.normalize.dimensions import DIMENSIONS, Dimension, array_to_vector, vector_to_array

DEFAULT_WINNER_TOP_N = 3


def _top_indices(values: np.ndarray, n: int) -> np.ndarray:
    # Stable sort on the negated weights keeps canonical order among equal weights.
    return np.argsort(-values, kind="stable")[: max(n, 0)]


def top_weighted_dimensions(weights: Mapping[str, float] | None, n: int = DEFAULT_WINNER_TOP_N) -> list[Dimension]:
    values = vector_to_array(weights)
    return [DIMENSIONS[index] for index in _top_indices(values, n)]


def tilt_to_winners(
    weights: Mapping[str, float] | None,
    top_n: int = DEFAULT_WINNER_TOP_N,
) -> dict[Dimension, float]:
    """Keep only the `top_n` heaviest dimensions, renormalized to sum to 1.

    Models what past winners were actually judged on. A vector whose top
    weights sum to zero comes back all-zero, which scores as "no signal".
    """

    values = vector_to_array(weights)
    tilted = np.zeros(len(DIMENSIONS), dtype=float)
    chosen = _top_indices(values, top_n)
    total = float(values[chosen].sum())
    if total <= 0.0:
        return array_to_vector(tilted)

    tilted[chosen] = values[chosen] / total
    return array_to_vector(tilted)


def normalize_unit_sum(weights: Mapping[str, float] | None) -> dict[Dimension, float]:
    values = vector_to_array(weights)
    total = float(values.sum())
    if total <= 0.0:
        return array_to_vector(np.zeros(len(DIMENSIONS), dtype=float))
    return array_to_vector(values / total)
