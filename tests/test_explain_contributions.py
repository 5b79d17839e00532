from __future__ import annotations

import pytest

from scholarfit.explain.contributions import explain_contributions, profile_overlay, weight_profile

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


def test_explain_contributions_orders_strongest_first_with_canonical_ties() -> None:
    rows = explain_contributions(STUDENT_FEATURES, MERIT_WEIGHTS)

    # leadership (0.6 * 0.7) and research (0.7 * 0.6) tie; leadership is earlier canonically.
    assert [row.dimension for row in rows] == [
        "academics",
        "leadership",
        "research",
        "innovation",
        "community",
        "adversity",
        "need",
    ]
    contributions = [row.contribution for row in rows]
    assert contributions == sorted(contributions, reverse=True)


def test_explain_contributions_reports_contribution_and_gap() -> None:
    academics = explain_contributions(STUDENT_FEATURES, MERIT_WEIGHTS)[0]

    assert academics.student_value == 0.8
    assert academics.weight == 0.9
    assert academics.contribution == pytest.approx(0.72)
    assert academics.gap == pytest.approx(0.1)
    assert academics.to_dict()["dimension"] == "academics"


def test_explain_contributions_is_repeatable() -> None:
    run_one = [row.to_dict() for row in explain_contributions(STUDENT_FEATURES, MERIT_WEIGHTS)]
    run_two = [row.to_dict() for row in explain_contributions(STUDENT_FEATURES, MERIT_WEIGHTS)]

    assert run_one == run_two


def test_explain_contributions_with_missing_dimensions() -> None:
    rows = explain_contributions({"need": 0.9}, {})

    assert len(rows) == 7
    assert all(row.contribution == 0.0 for row in rows)
    assert rows[0].dimension == "academics"
    need = next(row for row in rows if row.dimension == "need")
    assert need.gap == pytest.approx(-0.9)


def test_weight_profile_sorts_by_weight() -> None:
    rows = weight_profile({"research": 0.3, "academics": 0.3, "need": 0.4})

    assert rows[:3] == [
        ("need", "Financial Need", 0.4),
        ("academics", "Academics", 0.3),
        ("research", "Research", 0.3),
    ]
    assert [row[2] for row in rows[3:]] == [0.0, 0.0, 0.0, 0.0]


def test_profile_overlay_reports_percentages_in_canonical_order() -> None:
    overlay = profile_overlay(STUDENT_FEATURES, MERIT_WEIGHTS)

    assert [row["dimension"] for row in overlay][:2] == ["academics", "leadership"]
    assert overlay[0]["student"] == pytest.approx(80.0)
    assert overlay[0]["scholarship"] == pytest.approx(90.0)
    assert overlay[2]["label"] == "Community Impact"
