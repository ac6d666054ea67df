"""Additional points: Canadian study, nomination, job offer, sibling, French ability."""

from __future__ import annotations

from models.crs_config import ScoringConfiguration
from models.eligibility import AdditionalBreakdown
from models.profile import CanadianEducation, CandidateProfile, JobOffer, LanguageScores, ProficiencyLevels


def french_floor_met(
    first: LanguageScores,
    first_levels: ProficiencyLevels,
    second: LanguageScores,
    second_levels: ProficiencyLevels,
) -> bool:
    """A French-type test in either slot with NCLC 7+ in all four skills."""
    return (first.test.is_french and first_levels.all_at_least(7)) or (
        second.test.is_french and second_levels.all_at_least(7)
    )


def french_english_dual_met(
    first: LanguageScores,
    first_levels: ProficiencyLevels,
    second: LanguageScores,
    second_levels: ProficiencyLevels,
) -> bool:
    """French floor in one slot and an English-type test at CLB 5+ in the other."""
    if first.test.is_french and first_levels.all_at_least(7):
        if second.test.is_english and second_levels.all_at_least(5):
            return True
    if second.test.is_french and second_levels.all_at_least(7):
        if first.test.is_english and first_levels.all_at_least(5):
            return True
    return False


def arranged_employment_points(job_offer: JobOffer, config: ScoringConfiguration) -> int:
    table = config.additional_points.arranged_employment
    if job_offer == JobOffer.senior_management:
        return table.senior_management
    if job_offer == JobOffer.skilled_category:
        return table.skilled_category
    if job_offer == JobOffer.other:
        return table.other
    return 0


def compute_additional(
    profile: CandidateProfile,
    first_levels: ProficiencyLevels,
    second_levels: ProficiencyLevels,
    config: ScoringConfiguration,
    diagnostics: list[str] | None = None,
) -> AdditionalBreakdown:
    table = config.additional_points

    canadian_education = 0
    if profile.canadian_education != CanadianEducation.none:
        if profile.canadian_education in table.canadian_education:
            canadian_education = table.canadian_education[profile.canadian_education]
        elif diagnostics is not None:
            diagnostics.append(f"additional_points.canadian_education: no row for {profile.canadian_education.value}")

    # Floor and dual bonuses stack
    floor = french_floor_met(profile.first_language, first_levels, profile.second_language, second_levels)
    dual = floor and french_english_dual_met(
        profile.first_language, first_levels, profile.second_language, second_levels
    )

    return AdditionalBreakdown(
        canadian_education=canadian_education,
        provincial_nomination=table.provincial_nomination if profile.provincial_nomination else 0,
        arranged_employment=arranged_employment_points(profile.job_offer, config),
        canadian_sibling=table.canadian_sibling if profile.canadian_sibling else 0,
        french_only=table.french_language.only_bonus if floor else 0,
        french_dual=table.french_language.dual_bonus if dual else 0,
    )
