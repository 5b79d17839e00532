"""Reference corpus and audit helpers for checking engine output offline."""

from scholarfit.eval.demo_data import CATEGORY_SHAPES, get_demo_scholarships, get_demo_students
from scholarfit.eval.metrics import alignment_summary, coverage_at_k, ranked_ids, ranking_stability

__all__ = [
    "CATEGORY_SHAPES",
    "alignment_summary",
    "coverage_at_k",
    "get_demo_scholarships",
    "get_demo_students",
    "ranked_ids",
    "ranking_stability",
]
