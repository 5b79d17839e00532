from __future__ import annotations

from typing import Any, Mapping, Sequence

import pandas as pd

from scholarfit.rank.recommend import RankedScholarship


def ranked_ids(ranked: Sequence[RankedScholarship]) -> list[str]:
    return [item.scholarship.scholarship_id for item in ranked]


def _first_divergence(
    ranked_one: Sequence[RankedScholarship],
    ranked_two: Sequence[RankedScholarship],
) -> dict[str, Any] | None:
    for position, (item_one, item_two) in enumerate(zip(ranked_one, ranked_two), start=1):
        same_entry = (
            item_one.scholarship.scholarship_id == item_two.scholarship.scholarship_id
            and item_one.source == item_two.source
        )
        # Fits compare exactly, not approximately.
        if not same_entry or item_one.overall_fit != item_two.overall_fit:
            return {
                "position": position,
                "run_one": item_one.to_dict(),
                "run_two": item_two.to_dict(),
            }
    if len(ranked_one) != len(ranked_two):
        return {
            "position": min(len(ranked_one), len(ranked_two)) + 1,
            "run_one_length": len(ranked_one),
            "run_two_length": len(ranked_two),
        }
    return None


def ranking_stability(
    run_one: Mapping[str, Sequence[RankedScholarship]],
    run_two: Mapping[str, Sequence[RankedScholarship]],
) -> dict[str, Any]:
    """Compare two `recommend` runs keyed by student id.

    Order, source and overall fit must all agree; the first differing position
    per student is reported and any difference raises `AssertionError`.
    """

    mismatches: list[dict[str, Any]] = []
    for student_id in sorted(set(run_one) | set(run_two)):
        divergence = _first_divergence(run_one.get(student_id, ()), run_two.get(student_id, ()))
        if divergence is not None:
            mismatches.append({"student_id": student_id, **divergence})

    if mismatches:
        raise AssertionError(f"Ranking stability check failed: {mismatches}")

    return {"is_stable": True, "students_compared": len(set(run_one) | set(run_two))}


def coverage_at_k(
    per_student_ranked: dict[str, Sequence[RankedScholarship]],
    k: int,
) -> dict[str, Any]:
    unique_ids: set[str] = set()
    total_recommended = 0
    for ranked in per_student_ranked.values():
        for item in ranked[:k]:
            unique_ids.add(item.scholarship.scholarship_id)
            total_recommended += 1

    return {
        "k": k,
        "unique_recommended_count": len(unique_ids),
        "total_recommended": total_recommended,
        "coverage_at_k": (len(unique_ids) / total_recommended) if total_recommended else 0.0,
    }


def alignment_summary(ranked: Sequence[RankedScholarship]) -> dict[str, Any]:
    """Headline numbers for a student's recommendation list."""

    if not ranked:
        return {"scholarships_matched": 0, "avg_alignment": 0.0, "max_alignment": 0.0}

    series = pd.Series([item.overall_fit for item in ranked], dtype="float64")
    return {
        "scholarships_matched": len(ranked),
        "avg_alignment": float(series.mean()),
        "max_alignment": float(series.max()),
    }
