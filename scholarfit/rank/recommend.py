from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal, Sequence

import pandas as pd

from scholarfit.normalize.schema import ScholarshipRecord, StudentRecord
from scholarfit.rank.fit_scoring import FitResult, score_scholarship
from scholarfit.rank.weights import DEFAULT_SCORING_CONFIG, ScoringConfig

logger = logging.getLogger(__name__)

RecommendationSource = Literal["declared", "computed"]


@dataclass(frozen=True, slots=True)
class RankedScholarship:
    scholarship: ScholarshipRecord
    fit: FitResult
    source: RecommendationSource

    @property
    def overall_fit(self) -> float:
        return self.fit.overall_fit

    def to_dict(self) -> dict[str, Any]:
        return {
            "scholarship_id": self.scholarship.scholarship_id,
            "name": self.scholarship.name,
            "category": self.scholarship.category,
            "source": self.source,
            **self.fit.to_dict(),
        }


def _resolve_declared(
    student: StudentRecord,
    corpus: Sequence[ScholarshipRecord],
) -> list[ScholarshipRecord]:
    by_id: dict[str, ScholarshipRecord] = {}
    for scholarship in corpus:
        by_id.setdefault(scholarship.scholarship_id, scholarship)

    resolved: list[ScholarshipRecord] = []
    seen: set[str] = set()
    dangling = 0
    for scholarship_id in student.recommended_scholarship_ids:
        if scholarship_id in seen:
            continue
        seen.add(scholarship_id)
        match = by_id.get(scholarship_id)
        if match is None:
            dangling += 1
            continue
        resolved.append(match)

    if dangling:
        logger.debug(
            "Dropped %d unresolved recommended scholarship ids for student %s",
            dangling,
            student.student_id,
        )
    return resolved


def _rank_computed(
    student: StudentRecord,
    corpus: Sequence[ScholarshipRecord],
    config: ScoringConfig,
) -> list[RankedScholarship]:
    fits = [score_scholarship(student, scholarship, config) for scholarship in corpus]
    scored_df = pd.DataFrame({"overall_fit": [fit.overall_fit for fit in fits]})
    # mergesort is stable: equal overall_fit keeps corpus order.
    order = scored_df.sort_values(by="overall_fit", ascending=False, kind="mergesort").index

    return [
        RankedScholarship(scholarship=corpus[position], fit=fits[position], source="computed")
        for position in order
    ]


def recommend(
    student: StudentRecord,
    corpus: Sequence[ScholarshipRecord],
    k: int,
    config: ScoringConfig | None = None,
) -> list[RankedScholarship]:
    """Rank `corpus` for `student` and return the first `k` entries.

    Upstream-declared recommendations win, in their declared order, when at
    least `min_declared_recommendations` of them resolve against the corpus.
    Otherwise every scholarship is scored and sorted by overall fit.
    """

    active_config = config or DEFAULT_SCORING_CONFIG
    if k <= 0 or not corpus:
        return []

    if student.recommended_scholarship_ids:
        declared = _resolve_declared(student, corpus)
        if len(declared) >= active_config.min_declared_recommendations:
            return [
                RankedScholarship(
                    scholarship=scholarship,
                    fit=score_scholarship(student, scholarship, active_config),
                    source="declared",
                )
                for scholarship in declared[:k]
            ]
        logger.debug(
            "Only %d of %d declared recommendations resolved for student %s; ranking full corpus.",
            len(declared),
            len(student.recommended_scholarship_ids),
            student.student_id,
        )

    return _rank_computed(student, corpus, active_config)[:k]
