"""Descriptive aggregates over a scholarship corpus."""

from scholarfit.stats.demand import (
    DemandGap,
    demand_frequency,
    display_frequencies,
    improvement_gaps,
    top_demand_dimension,
)

__all__ = [
    "DemandGap",
    "demand_frequency",
    "display_frequencies",
    "improvement_gaps",
    "top_demand_dimension",
]
