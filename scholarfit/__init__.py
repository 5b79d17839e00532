"""Deterministic fit scoring and recommendation for students and scholarships."""

from scholarfit.explain.contributions import (
    DimensionContribution,
    explain_contributions,
    profile_overlay,
    weight_profile,
)
from scholarfit.normalize.dimensions import (
    DIMENSION_LABELS,
    DIMENSIONS,
    Dimension,
    sanitize_features,
    sanitize_weights,
)
from scholarfit.normalize.schema import ScholarshipRecord, StudentRecord, weights_from_priorities
from scholarfit.rank.fit_scoring import (
    FitResult,
    round_for_display,
    score_corpus,
    score_fit,
    score_scholarship,
)
from scholarfit.rank.recommend import RankedScholarship, recommend
from scholarfit.rank.weights import (
    DEFAULT_SCORING_CONFIG,
    FitBlendWeights,
    ScoringConfig,
    load_scoring_config,
)
from scholarfit.rank.winner_tilt import normalize_unit_sum, tilt_to_winners, top_weighted_dimensions
from scholarfit.stats.demand import (
    DemandGap,
    demand_frequency,
    display_frequencies,
    improvement_gaps,
    top_demand_dimension,
)

__all__ = [
    "DEFAULT_SCORING_CONFIG",
    "DIMENSIONS",
    "DIMENSION_LABELS",
    "DemandGap",
    "Dimension",
    "DimensionContribution",
    "FitBlendWeights",
    "FitResult",
    "RankedScholarship",
    "ScholarshipRecord",
    "ScoringConfig",
    "StudentRecord",
    "demand_frequency",
    "display_frequencies",
    "explain_contributions",
    "improvement_gaps",
    "load_scoring_config",
    "normalize_unit_sum",
    "profile_overlay",
    "recommend",
    "round_for_display",
    "sanitize_features",
    "sanitize_weights",
    "score_corpus",
    "score_fit",
    "score_scholarship",
    "tilt_to_winners",
    "top_demand_dimension",
    "top_weighted_dimensions",
    "weight_profile",
    "weights_from_priorities",
]
