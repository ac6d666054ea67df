"""Spouse or common-law partner factors. Only scored for married candidates."""

from __future__ import annotations

from app.crs.tables import skill_points, whole_years
from models.crs_config import ScoringConfiguration
from models.eligibility import SpouseBreakdown
from models.profile import CandidateProfile, EducationLevel, ProficiencyLevels


def spouse_education_points(
    level: EducationLevel, config: ScoringConfiguration, diagnostics: list[str] | None = None
) -> int:
    for row in config.spouse_education_points:
        if row.level == level:
            return row.points
    if diagnostics is not None:
        diagnostics.append(f"spouse_education_points: no row for {level.value}")
    return 0


def spouse_experience_points(
    years: float, config: ScoringConfiguration, diagnostics: list[str] | None = None
) -> int:
    # Exact lookup, not interpolated
    rows = config.work_experience_points.spouse
    key = whole_years(years, rows[-1].years)
    for row in rows:
        if row.years == key:
            return row.points
    if diagnostics is not None:
        diagnostics.append(f"work_experience_points.spouse: no row for {key} years")
    return 0


def compute_spouse(
    profile: CandidateProfile,
    spouse_levels: ProficiencyLevels,
    config: ScoringConfiguration,
    diagnostics: list[str] | None = None,
) -> SpouseBreakdown:
    if not profile.with_spouse:
        return SpouseBreakdown()

    return SpouseBreakdown(
        education=spouse_education_points(profile.spouse_education, config, diagnostics),
        language=skill_points(spouse_levels, config.spouse_language_points, "spouse_language_points", diagnostics),
        experience=spouse_experience_points(profile.spouse_work_experience, config, diagnostics),
    )
