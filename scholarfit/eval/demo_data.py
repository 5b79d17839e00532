from __future__ import annotations

from scholarfit.normalize.dimensions import Dimension
from scholarfit.normalize.schema import ScholarshipRecord, StudentRecord

# Archetype weight shapes per scholarship category, used for radar comparisons.
CATEGORY_SHAPES: dict[str, dict[Dimension, float]] = {
    "Merit": {
        "academics": 0.9,
        "leadership": 0.7,
        "community": 0.3,
        "need": 0.1,
        "innovation": 0.35,
        "research": 0.6,
        "adversity": 0.15,
    },
    "Community": {
        "academics": 0.3,
        "leadership": 0.75,
        "community": 1.0,
        "need": 0.4,
        "innovation": 0.3,
        "research": 0.15,
        "adversity": 0.55,
    },
    "STEM": {
        "academics": 0.7,
        "leadership": 0.45,
        "community": 0.25,
        "need": 0.15,
        "innovation": 0.9,
        "research": 0.8,
        "adversity": 0.25,
    },
    "Access": {
        "academics": 0.45,
        "leadership": 0.3,
        "community": 0.6,
        "need": 1.0,
        "innovation": 0.1,
        "research": 0.1,
        "adversity": 0.9,
    },
}


def _scholarship(
    scholarship_id: str,
    name: str,
    category: str,
    priorities: tuple[Dimension, ...],
    weights: tuple[float, float, float, float, float, float, float],
) -> ScholarshipRecord:
    academics, leadership, community, need, innovation, research, adversity = weights
    return ScholarshipRecord(
        scholarship_id=scholarship_id,
        name=name,
        category=category,
        priorities=priorities,
        weights={
            "academics": academics,
            "leadership": leadership,
            "community": community,
            "need": need,
            "innovation": innovation,
            "research": research,
            "adversity": adversity,
        },
    )


def get_demo_scholarships() -> list[ScholarshipRecord]:
    """Seed corpus of 13 scholarships; weights per dimension in canonical order."""

    return [
        _scholarship(
            "merit-excellence",
            "Merit Excellence Grant",
            "Merit",
            ("academics", "leadership", "research"),
            (0.45, 0.25, 0.10, 0.05, 0.05, 0.08, 0.02),
        ),
        _scholarship(
            "community-builder",
            "Community Builder Scholarship",
            "Community",
            ("community", "leadership", "adversity"),
            (0.10, 0.25, 0.40, 0.10, 0.05, 0.02, 0.08),
        ),
        _scholarship(
            "first-gen-access",
            "First-Gen Access Bursary",
            "Access",
            ("need", "adversity", "community"),
            (0.12, 0.12, 0.20, 0.30, 0.04, 0.02, 0.20),
        ),
        _scholarship(
            "stem-innovation-award",
            "STEM Innovation Award",
            "STEM",
            ("innovation", "research", "academics"),
            (0.30, 0.10, 0.05, 0.05, 0.30, 0.17, 0.03),
        ),
        _scholarship(
            "leadership-excellence-fund",
            "Leadership Excellence Fund",
            "Merit",
            ("leadership", "academics"),
            (0.35, 0.45, 0.05, 0.05, 0.05, 0.03, 0.02),
        ),
        _scholarship(
            "innovation-challenge-grant",
            "Innovation Challenge Grant",
            "STEM",
            ("innovation", "academics"),
            (0.28, 0.12, 0.05, 0.05, 0.37, 0.08, 0.05),
        ),
        _scholarship(
            "community-impact-grant",
            "Community Impact Grant",
            "Community",
            ("community", "adversity"),
            (0.08, 0.20, 0.42, 0.10, 0.05, 0.02, 0.13),
        ),
        _scholarship(
            "access-equity-award",
            "Access & Equity Award",
            "Access",
            ("adversity", "need", "academics"),
            (0.22, 0.08, 0.10, 0.28, 0.03, 0.02, 0.27),
        ),
        _scholarship(
            "research-exploration-fund",
            "Undergraduate Research Exploration Fund",
            "STEM",
            ("research", "academics"),
            (0.32, 0.10, 0.05, 0.05, 0.18, 0.27, 0.03),
        ),
        _scholarship(
            "social-leadership-prize",
            "Social Leadership Prize",
            "Community",
            ("leadership", "community"),
            (0.10, 0.42, 0.35, 0.05, 0.03, 0.02, 0.03),
        ),
        _scholarship(
            "emerging-researcher-scholarship",
            "Emerging Researcher Scholarship",
            "STEM",
            ("research", "academics"),
            (0.40, 0.07, 0.03, 0.05, 0.20, 0.23, 0.02),
        ),
        _scholarship(
            "resilience-award",
            "Resilience in Education Award",
            "Access",
            ("adversity", "academics"),
            (0.30, 0.10, 0.07, 0.12, 0.03, 0.03, 0.35),
        ),
        _scholarship(
            "global-citizenship-award",
            "Global Citizenship Award",
            "Community",
            ("community", "leadership", "innovation"),
            (0.12, 0.28, 0.32, 0.06, 0.16, 0.03, 0.03),
        ),
    ]


def get_demo_students() -> list[StudentRecord]:
    return [
        StudentRecord(
            student_id="demo_stem_leaning",
            name="STEM-leaning undergraduate",
            features={
                "academics": 0.82,
                "leadership": 0.66,
                "community": 0.58,
                "need": 0.25,
                "innovation": 0.74,
                "research": 0.70,
                "adversity": 0.40,
            },
        ),
        StudentRecord(
            student_id="demo_merit_candidate",
            name="Merit-track candidate",
            features={
                "academics": 0.8,
                "leadership": 0.6,
                "community": 0.5,
                "need": 0.2,
                "innovation": 0.7,
                "research": 0.7,
                "adversity": 0.4,
            },
        ),
        StudentRecord(
            student_id="demo_first_gen_access",
            name="First-generation student with financial need",
            features={
                "academics": 0.55,
                "leadership": 0.45,
                "community": 0.70,
                "need": 0.90,
                "innovation": 0.30,
                "research": 0.20,
                "adversity": 0.85,
            },
            recommended_scholarship_ids=(
                "first-gen-access",
                "access-equity-award",
                "resilience-award",
                "community-impact-grant",
            ),
        ),
    ]
