"""
Skill transferability: combination bonuses between education, experience and
first official language ability.

Language gates use the first official language only:
  tier 7 - CLB 7 or higher in all four skills
  tier 9 - CLB 9 or higher in all four skills (replaces tier 7 when met)

The five contributions are summed and the sum is clamped to 0..100.
"""

from __future__ import annotations

from app.crs.tables import whole_years
from models.crs_config import ScoringConfiguration
from models.eligibility import TransferabilityBreakdown
from models.profile import CandidateProfile, ProficiencyLevels

TRANSFERABILITY_MAX = 100

# Canadian years are looked up capped at 1 for the education combination,
# even when the table defines 2-year rows.
CANADIAN_EDUCATION_YEARS_CAP = 1


def education_language_points(
    profile: CandidateProfile, levels: ProficiencyLevels, config: ScoringConfiguration
) -> int:
    if profile.education.is_lowest or not levels.all_at_least(7):
        return 0
    tiers = config.transferability_points.education
    table = tiers.tier9 if levels.all_at_least(9) else tiers.tier7
    return table.get(profile.education, 0)


def foreign_experience_language_points(
    profile: CandidateProfile,
    levels: ProficiencyLevels,
    config: ScoringConfiguration,
    diagnostics: list[str] | None = None,
) -> int:
    if profile.foreign_work_experience <= 0 or not levels.all_at_least(7):
        return 0
    tiers = config.transferability_points.foreign_experience
    table = tiers.tier9 if levels.all_at_least(9) else tiers.tier7
    if not table:
        return 0
    years = whole_years(profile.foreign_work_experience, max(table))
    if years == 0:
        return 0
    if years not in table:
        if diagnostics is not None:
            diagnostics.append(f"transferability_points.foreign_experience: no row for {years} years")
        return 0
    return table[years]


def canadian_foreign_points(
    profile: CandidateProfile, config: ScoringConfiguration, diagnostics: list[str] | None = None
) -> int:
    if profile.canadian_work_experience <= 0 or profile.foreign_work_experience <= 0:
        return 0
    rows = config.transferability_points.canadian_foreign
    if not rows:
        return 0
    canadian = whole_years(profile.canadian_work_experience, max(r.canadian_years for r in rows))
    foreign = whole_years(profile.foreign_work_experience, max(r.foreign_years for r in rows))
    if canadian == 0 or foreign == 0:
        return 0
    for row in rows:
        if row.canadian_years == canadian and row.foreign_years == foreign:
            return row.points
    # sparse table, no interpolation
    if diagnostics is not None:
        diagnostics.append(
            f"transferability_points.canadian_foreign: no row for ({canadian}, {foreign})"
        )
    return 0


def canadian_education_points(
    profile: CandidateProfile, config: ScoringConfiguration, diagnostics: list[str] | None = None
) -> int:
    if profile.canadian_work_experience <= 0 or profile.education.is_lowest:
        return 0
    canadian = whole_years(profile.canadian_work_experience, CANADIAN_EDUCATION_YEARS_CAP)
    if canadian == 0:
        return 0
    for row in config.transferability_points.canadian_education:
        if row.canadian_years == canadian and row.level == profile.education:
            return row.points
    if diagnostics is not None:
        diagnostics.append(
            f"transferability_points.canadian_education: no row for ({canadian}, {profile.education.value})"
        )
    return 0


def trades_certification_points(
    profile: CandidateProfile, levels: ProficiencyLevels, config: ScoringConfiguration
) -> int:
    if not profile.trades_certification:
        return 0
    bonus = config.transferability_points.trades_certification
    if levels.all_at_least(7):
        return bonus.tier7
    if levels.all_at_least(5):
        return bonus.tier5
    return 0


def compute_transferability(
    profile: CandidateProfile,
    first_levels: ProficiencyLevels,
    config: ScoringConfiguration,
    diagnostics: list[str] | None = None,
) -> TransferabilityBreakdown:
    parts = {
        "education_language": education_language_points(profile, first_levels, config),
        "foreign_experience_language": foreign_experience_language_points(profile, first_levels, config, diagnostics),
        "canadian_foreign_experience": canadian_foreign_points(profile, config, diagnostics),
        "canadian_experience_education": canadian_education_points(profile, config, diagnostics),
        "trades_certification": trades_certification_points(profile, first_levels, config),
    }
    uncapped = sum(parts.values())
    return TransferabilityBreakdown(
        **parts,
        uncapped=uncapped,
        subtotal=max(0, min(uncapped, TRANSFERABILITY_MAX)),
    )
