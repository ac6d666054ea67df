"""Core human-capital factors: age, education, official languages, Canadian work."""

from __future__ import annotations

from app.crs.tables import cap_years, interpolate_points, skill_points
from models.crs_config import ScoringConfiguration
from models.eligibility import CoreBreakdown
from models.profile import CandidateProfile, EducationLevel, ProficiencyLevels


def _column(with_spouse: bool) -> str:
    return "with_spouse" if with_spouse else "without_spouse"


def age_points(age: int, with_spouse: bool, config: ScoringConfiguration) -> int:
    return interpolate_points(config.age_points, "age", age, _column(with_spouse))


def education_points(
    level: EducationLevel,
    with_spouse: bool,
    config: ScoringConfiguration,
    diagnostics: list[str] | None = None,
) -> int:
    for row in config.education_points:
        if row.level == level:
            return row.with_spouse if with_spouse else row.without_spouse
    if diagnostics is not None:
        diagnostics.append(f"education_points: no row for {level.value}")
    return 0


def canadian_experience_points(years: float, with_spouse: bool, config: ScoringConfiguration) -> int:
    rows = config.work_experience_points.canadian
    capped = cap_years(years, rows[-1].years)
    return interpolate_points(rows, "years", capped, _column(with_spouse))


def compute_core(
    profile: CandidateProfile,
    first_levels: ProficiencyLevels,
    second_levels: ProficiencyLevels,
    config: ScoringConfiguration,
    diagnostics: list[str] | None = None,
) -> CoreBreakdown:
    with_spouse = profile.with_spouse
    first_table = config.language_points_with_spouse if with_spouse else config.language_points
    first_name = "language_points_with_spouse" if with_spouse else "language_points"

    return CoreBreakdown(
        age=age_points(profile.age, with_spouse, config),
        education=education_points(profile.education, with_spouse, config, diagnostics),
        first_language=skill_points(first_levels, first_table, first_name, diagnostics),
        second_language=skill_points(second_levels, config.second_language_points, "second_language_points", diagnostics),
        canadian_experience=canadian_experience_points(profile.canadian_work_experience, with_spouse, config),
    )
