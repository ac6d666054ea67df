"""
Program eligibility gates.

Each gate is a pure predicate over the profile, the computed proficiency
levels, the total score and the configured program minimums. Gates return the
conditions they checked and the values compared so callers can display why a
program was or was not met.
"""

from __future__ import annotations

from app.crs.additional import french_english_dual_met
from models.crs_config import Program, ScoringConfiguration
from models.eligibility import ProficiencyReport, ProgramEligibility
from models.profile import CandidateProfile, ProficiencyLevels


def _result(checks: dict[str, bool], values: dict) -> ProgramEligibility:
    return ProgramEligibility(eligible=all(checks.values()), checks=checks, values=values)


def federal_skilled_worker(
    profile: CandidateProfile, levels: ProficiencyLevels, total: int, config: ScoringConfiguration
) -> ProgramEligibility:
    mins = config.program_minimums.fsw
    checks = {
        "language": levels.all_at_least(mins.language_level),
        "education": not profile.education.is_lowest and profile.education.rank >= mins.education.rank,
        "foreign_experience": profile.foreign_work_experience >= mins.experience_years,
        "total_points": total >= mins.total_points,
    }
    values = {
        "language_levels": levels.as_dict(),
        "language_floor": mins.language_level,
        "education": profile.education.value,
        "education_floor": mins.education.value,
        "foreign_experience": profile.foreign_work_experience,
        "experience_floor": mins.experience_years,
        "total": total,
        "total_floor": mins.total_points,
    }
    return _result(checks, values)


def canadian_experience_class(
    profile: CandidateProfile, levels: ProficiencyLevels, config: ScoringConfiguration
) -> ProgramEligibility:
    mins = config.program_minimums.cec
    if profile.occupation_category.is_management_adjacent:
        floor = mins.language_level_management
    else:
        floor = mins.language_level_other
    checks = {
        "language": levels.all_at_least(floor),
        "canadian_experience": profile.canadian_work_experience >= mins.canadian_experience_years,
    }
    values = {
        "occupation_category": profile.occupation_category.value,
        "language_levels": levels.as_dict(),
        "language_floor": floor,
        "canadian_experience": profile.canadian_work_experience,
        "experience_floor": mins.canadian_experience_years,
    }
    return _result(checks, values)


def federal_skilled_trades(
    profile: CandidateProfile, levels: ProficiencyLevels, config: ScoringConfiguration
) -> ProgramEligibility:
    mins = config.program_minimums.fst
    floors = {
        "speaking": mins.speaking,
        "listening": mins.listening,
        "reading": mins.reading,
        "writing": mins.writing,
    }
    checks = {skill: getattr(levels, skill) >= floor for skill, floor in floors.items()}
    checks["foreign_experience"] = profile.foreign_work_experience >= mins.experience_years
    values = {
        "language_levels": levels.as_dict(),
        "language_floors": floors,
        "foreign_experience": profile.foreign_work_experience,
        "experience_floor": mins.experience_years,
    }
    return _result(checks, values)


def french_proficiency(
    profile: CandidateProfile,
    proficiency: ProficiencyReport,
    base_programs: dict[Program, ProgramEligibility],
) -> ProgramEligibility:
    checks = {
        "french_english_dual": french_english_dual_met(
            profile.first_language,
            proficiency.first_language,
            profile.second_language,
            proficiency.second_language,
        ),
        "base_program": any(base_programs[p].eligible for p in (Program.fsw, Program.cec, Program.fst)),
    }
    values = {
        "first_language_test": profile.first_language.test.value,
        "second_language_test": profile.second_language.test.value,
        "eligible_base_programs": [p.value for p, r in base_programs.items() if r.eligible],
    }
    return _result(checks, values)


def provincial_nomination(profile: CandidateProfile) -> ProgramEligibility:
    return _result(
        {"nominated": profile.provincial_nomination},
        {"provincial_nomination": profile.provincial_nomination},
    )


def evaluate_eligibility(
    profile: CandidateProfile,
    proficiency: ProficiencyReport,
    total: int,
    config: ScoringConfiguration,
) -> dict[Program, ProgramEligibility]:
    first = proficiency.first_language
    results = {
        Program.fsw: federal_skilled_worker(profile, first, total, config),
        Program.cec: canadian_experience_class(profile, first, config),
        Program.fst: federal_skilled_trades(profile, first, config),
    }
    results[Program.french] = french_proficiency(profile, proficiency, results)
    results[Program.pnp] = provincial_nomination(profile)
    return results
