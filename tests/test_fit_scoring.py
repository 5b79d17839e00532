from __future__ import annotations

import math

import pandas as pd
import pytest

from scholarfit.eval.demo_data import get_demo_scholarships, get_demo_students
from scholarfit.normalize.schema import ScholarshipRecord, StudentRecord
from scholarfit.rank.fit_scoring import (
    CORPUS_SCORE_COLUMNS,
    round_for_display,
    score_corpus,
    score_fit,
    score_scholarship,
)
from scholarfit.rank.weights import ScoringConfig

STUDENT_FEATURES = {
    "academics": 0.8,
    "leadership": 0.6,
    "community": 0.5,
    "need": 0.2,
    "innovation": 0.7,
    "research": 0.7,
    "adversity": 0.4,
}
MERIT_WEIGHTS = {
    "academics": 0.9,
    "leadership": 0.7,
    "community": 0.3,
    "need": 0.1,
    "innovation": 0.35,
    "research": 0.6,
    "adversity": 0.15,
}


def test_score_fit_merit_shape_scenario() -> None:
    result = score_fit(STUDENT_FEATURES, MERIT_WEIGHTS)

    expected_winner = 100 * (0.9 * 0.8 + 0.7 * 0.6 + 0.6 * 0.7) / 2.2
    assert result.personality_fit == pytest.approx(203.5)
    assert result.winner_fit == pytest.approx(expected_winner)
    assert result.winner_fit == pytest.approx(70.909, abs=1e-3)
    assert result.overall_fit == pytest.approx(0.6 * 203.5 + 0.4 * expected_winner)
    assert result.top_contributors == ("academics", "leadership", "research")


def test_score_fit_overall_is_exact_convex_combination() -> None:
    for student in get_demo_students():
        for scholarship in get_demo_scholarships():
            result = score_scholarship(student, scholarship)
            assert result.overall_fit == 0.6 * result.personality_fit + 0.4 * result.winner_fit


def test_score_fit_is_non_negative_and_winner_fit_is_bounded() -> None:
    for student in get_demo_students():
        for scholarship in get_demo_scholarships():
            result = score_scholarship(student, scholarship)
            assert result.personality_fit >= 0.0
            assert 0.0 <= result.winner_fit <= 100.0 + 1e-9


def test_score_fit_all_zero_weights_is_zero_not_an_error() -> None:
    result = score_fit(STUDENT_FEATURES, {name: 0.0 for name in MERIT_WEIGHTS})

    assert result.personality_fit == 0.0
    assert result.winner_fit == 0.0
    assert result.overall_fit == 0.0
    assert result.top_contributors == ()


def test_score_fit_treats_missing_dimensions_as_zero() -> None:
    result = score_fit({"academics": 1.0}, {"academics": 0.5})

    assert result.personality_fit == pytest.approx(50.0)
    assert result.winner_fit == pytest.approx(100.0)
    assert result.overall_fit == pytest.approx(70.0)
    assert result.top_contributors == ("academics",)


def test_score_fit_unit_sum_normalization_bounds_personality_fit() -> None:
    config = ScoringConfig(weight_normalization="unit_sum")

    result = score_fit(STUDENT_FEATURES, MERIT_WEIGHTS, config)

    assert result.personality_fit == pytest.approx(203.5 / 3.1)
    assert result.winner_fit == pytest.approx(100 * 1.56 / 2.2)
    assert result.personality_fit <= 100.0


def test_score_fit_does_not_round_until_display() -> None:
    result = score_fit(STUDENT_FEATURES, MERIT_WEIGHTS)

    assert result.winner_fit != round(result.winner_fit)
    assert result.to_display()["winner_fit"] == 71
    assert result.to_display()["overall_fit"] == 150
    assert result.to_display()["top_contributors"] == ["academics", "leadership", "research"]


def test_round_for_display_rounds_half_up() -> None:
    assert round_for_display(2.5) == 3
    assert round_for_display(0.5) == 1
    assert round_for_display(66.666666, 2) == 66.67
    assert round_for_display(12.345, 2) == 12.35


def test_round_for_display_passes_non_finite_values_through() -> None:
    assert math.isnan(round_for_display(float("nan")))
    assert round_for_display(float("inf")) == float("inf")
    assert round_for_display(float("-inf"), 2) == float("-inf")


def test_score_corpus_keeps_corpus_order_and_is_deterministic() -> None:
    student = get_demo_students()[0]
    corpus = get_demo_scholarships()

    run_one = score_corpus(student, corpus)
    run_two = score_corpus(student, corpus)

    assert list(run_one.columns) == CORPUS_SCORE_COLUMNS
    assert run_one["scholarship_id"].tolist() == [item.scholarship_id for item in corpus]
    pd.testing.assert_frame_equal(run_one, run_two)


def test_score_corpus_of_empty_corpus_is_empty_frame() -> None:
    student = StudentRecord(student_id="s", name="S", features=STUDENT_FEATURES)

    scored_df = score_corpus(student, [])

    assert scored_df.empty
    assert list(scored_df.columns) == CORPUS_SCORE_COLUMNS


def test_scoring_does_not_mutate_records() -> None:
    student = StudentRecord(student_id="s", name="S", features=dict(STUDENT_FEATURES))
    scholarship = ScholarshipRecord(scholarship_id="m", name="M", weights=dict(MERIT_WEIGHTS))

    score_scholarship(student, scholarship, ScoringConfig(weight_normalization="unit_sum"))

    assert student.features == STUDENT_FEATURES
    assert scholarship.weights == MERIT_WEIGHTS
