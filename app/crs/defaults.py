"""
Built-in CRS tables.

Values follow the published Express Entry criteria. An admin tool can export a
modified copy as JSON and point CRS_CONFIG_PATH at it; see app/crs/config.py.
"""

from __future__ import annotations

from typing import Any

LEVELS = [0, 4, 5, 6, 7, 8, 9, 10]


def _same_for_all_skills(row: dict[int, int]) -> dict[str, dict[int, int]]:
    return {skill: dict(row) for skill in ("speaking", "listening", "reading", "writing")}


def _conversion(speaking, listening, reading, writing) -> dict[str, Any]:
    return {
        "speaking": {"thresholds": speaking, "levels": LEVELS},
        "listening": {"thresholds": listening, "levels": LEVELS},
        "reading": {"thresholds": reading, "levels": LEVELS},
        "writing": {"thresholds": writing, "levels": LEVELS},
    }


DEFAULT_CRS_CONFIG: dict[str, Any] = {
    "version": "express-entry-default",
    "age_points": [
        {"age": 17, "with_spouse": 0, "without_spouse": 0},
        {"age": 18, "with_spouse": 90, "without_spouse": 99},
        {"age": 19, "with_spouse": 95, "without_spouse": 105},
        {"age": 20, "with_spouse": 100, "without_spouse": 110},
        {"age": 29, "with_spouse": 100, "without_spouse": 110},
        {"age": 30, "with_spouse": 95, "without_spouse": 105},
        {"age": 31, "with_spouse": 90, "without_spouse": 99},
        {"age": 32, "with_spouse": 85, "without_spouse": 94},
        {"age": 33, "with_spouse": 80, "without_spouse": 88},
        {"age": 34, "with_spouse": 75, "without_spouse": 83},
        {"age": 35, "with_spouse": 70, "without_spouse": 77},
        {"age": 36, "with_spouse": 65, "without_spouse": 72},
        {"age": 37, "with_spouse": 60, "without_spouse": 66},
        {"age": 38, "with_spouse": 55, "without_spouse": 61},
        {"age": 39, "with_spouse": 50, "without_spouse": 55},
        {"age": 40, "with_spouse": 45, "without_spouse": 50},
        {"age": 41, "with_spouse": 35, "without_spouse": 39},
        {"age": 42, "with_spouse": 25, "without_spouse": 28},
        {"age": 43, "with_spouse": 15, "without_spouse": 17},
        {"age": 44, "with_spouse": 5, "without_spouse": 6},
        {"age": 45, "with_spouse": 0, "without_spouse": 0},
    ],
    "education_points": [
        {"level": "less_than_secondary", "with_spouse": 0, "without_spouse": 0},
        {"level": "secondary", "with_spouse": 28, "without_spouse": 30},
        {"level": "one_year_post_secondary", "with_spouse": 84, "without_spouse": 90},
        {"level": "two_year_post_secondary", "with_spouse": 91, "without_spouse": 98},
        {"level": "bachelors", "with_spouse": 112, "without_spouse": 120},
        {"level": "two_or_more_degrees", "with_spouse": 119, "without_spouse": 128},
        {"level": "masters", "with_spouse": 126, "without_spouse": 135},
        {"level": "doctoral", "with_spouse": 140, "without_spouse": 150},
    ],
    "spouse_education_points": [
        {"level": "less_than_secondary", "points": 0},
        {"level": "secondary", "points": 2},
        {"level": "one_year_post_secondary", "points": 6},
        {"level": "two_year_post_secondary", "points": 7},
        {"level": "bachelors", "points": 8},
        {"level": "two_or_more_degrees", "points": 9},
        {"level": "masters", "points": 10},
        {"level": "doctoral", "points": 10},
    ],
    "language_conversion": {
        # IELTS General Training bands
        "IELTS": _conversion(
            speaking=[0, 4.0, 5.0, 5.5, 6.0, 6.5, 7.0, 7.5],
            listening=[0, 4.5, 5.0, 5.5, 6.0, 7.5, 8.0, 8.5],
            reading=[0, 3.5, 4.0, 5.0, 6.0, 6.5, 7.0, 8.0],
            writing=[0, 4.0, 5.0, 5.5, 6.0, 6.5, 7.0, 7.5],
        ),
        # CELPIP-General levels map one to one, 10-12 all give CLB 10
        "CELPIP": _conversion(
            speaking=[0, 4, 5, 6, 7, 8, 9, 10],
            listening=[0, 4, 5, 6, 7, 8, 9, 10],
            reading=[0, 4, 5, 6, 7, 8, 9, 10],
            writing=[0, 4, 5, 6, 7, 8, 9, 10],
        ),
        "TEF": _conversion(
            speaking=[0, 181, 226, 271, 310, 349, 371, 393],
            listening=[0, 145, 181, 217, 249, 280, 298, 316],
            reading=[0, 121, 151, 181, 207, 233, 248, 263],
            writing=[0, 181, 226, 271, 310, 349, 371, 393],
        ),
        "TCF": _conversion(
            speaking=[0, 4, 6, 7, 10, 12, 14, 16],
            listening=[0, 331, 369, 398, 458, 503, 523, 549],
            reading=[0, 342, 375, 406, 453, 499, 524, 549],
            writing=[0, 4, 6, 7, 10, 12, 14, 16],
        ),
    },
    "language_points": _same_for_all_skills({4: 6, 5: 6, 6: 9, 7: 17, 8: 23, 9: 31, 10: 34}),
    "language_points_with_spouse": _same_for_all_skills({4: 6, 5: 6, 6: 8, 7: 16, 8: 22, 9: 29, 10: 32}),
    "spouse_language_points": _same_for_all_skills({4: 0, 5: 1, 6: 1, 7: 3, 8: 3, 9: 5, 10: 5}),
    "second_language_points": _same_for_all_skills({4: 0, 5: 1, 6: 1, 7: 3, 8: 3, 9: 6, 10: 6}),
    "work_experience_points": {
        "foreign": [
            {"years": 0, "with_spouse": 0, "without_spouse": 0},
            {"years": 1, "with_spouse": 13, "without_spouse": 25},
            {"years": 2, "with_spouse": 25, "without_spouse": 50},
            {"years": 3, "with_spouse": 38, "without_spouse": 75},
        ],
        "canadian": [
            {"years": 0, "with_spouse": 0, "without_spouse": 0},
            {"years": 1, "with_spouse": 35, "without_spouse": 40},
            {"years": 2, "with_spouse": 46, "without_spouse": 53},
            {"years": 3, "with_spouse": 56, "without_spouse": 64},
            {"years": 4, "with_spouse": 63, "without_spouse": 72},
            {"years": 5, "with_spouse": 70, "without_spouse": 80},
        ],
        "spouse": [
            {"years": 0, "points": 0},
            {"years": 1, "points": 5},
            {"years": 2, "points": 7},
            {"years": 3, "points": 8},
            {"years": 4, "points": 9},
            {"years": 5, "points": 10},
        ],
    },
    "transferability_points": {
        "education": {
            "tier7": {
                "secondary": 0,
                "one_year_post_secondary": 13,
                "two_year_post_secondary": 25,
                "bachelors": 25,
                "two_or_more_degrees": 25,
                "masters": 25,
                "doctoral": 25,
            },
            "tier9": {
                "secondary": 0,
                "one_year_post_secondary": 25,
                "two_year_post_secondary": 50,
                "bachelors": 50,
                "two_or_more_degrees": 50,
                "masters": 50,
                "doctoral": 50,
            },
        },
        "foreign_experience": {
            "tier7": {1: 13, 2: 13, 3: 25},
            "tier9": {1: 25, 2: 25, 3: 50},
        },
        "canadian_foreign": [
            {"canadian_years": 1, "foreign_years": 1, "points": 13},
            {"canadian_years": 1, "foreign_years": 2, "points": 13},
            {"canadian_years": 1, "foreign_years": 3, "points": 25},
            {"canadian_years": 2, "foreign_years": 1, "points": 25},
            {"canadian_years": 2, "foreign_years": 2, "points": 25},
            {"canadian_years": 2, "foreign_years": 3, "points": 50},
        ],
        "canadian_education": [
            {"canadian_years": 1, "level": "secondary", "points": 0},
            {"canadian_years": 1, "level": "one_year_post_secondary", "points": 13},
            {"canadian_years": 1, "level": "two_year_post_secondary", "points": 25},
            {"canadian_years": 1, "level": "bachelors", "points": 25},
            {"canadian_years": 1, "level": "two_or_more_degrees", "points": 25},
            {"canadian_years": 1, "level": "masters", "points": 25},
            {"canadian_years": 1, "level": "doctoral", "points": 25},
            {"canadian_years": 2, "level": "secondary", "points": 0},
            {"canadian_years": 2, "level": "one_year_post_secondary", "points": 25},
            {"canadian_years": 2, "level": "two_year_post_secondary", "points": 50},
            {"canadian_years": 2, "level": "bachelors", "points": 50},
            {"canadian_years": 2, "level": "two_or_more_degrees", "points": 50},
            {"canadian_years": 2, "level": "masters", "points": 50},
            {"canadian_years": 2, "level": "doctoral", "points": 50},
        ],
        "trades_certification": {"tier5": 25, "tier7": 50},
    },
    "additional_points": {
        "canadian_education": {
            "one_or_two_year": 15,
            "three_year_or_masters": 30,
            "doctoral": 30,
        },
        "provincial_nomination": 600,
        "arranged_employment": {
            "senior_management": 200,
            "skilled_category": 50,
            "other": 0,
        },
        "canadian_sibling": 15,
        "french_language": {"only_bonus": 25, "dual_bonus": 50},
    },
    "program_minimums": {
        "fsw": {
            "language_level": 7,
            "education": "secondary",
            "experience_years": 1,
            "total_points": 67,
        },
        "cec": {
            "language_level_management": 7,
            "language_level_other": 5,
            "canadian_experience_years": 1,
        },
        "fst": {
            "speaking": 5,
            "listening": 5,
            "reading": 4,
            "writing": 4,
            "experience_years": 2,
        },
    },
    "cutoff_scores": {
        "fsw": 470,
        "cec": 458,
        "fst": 375,
        "pnp": 720,
        "general": 490,
    },
}
