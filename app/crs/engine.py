"""
CRS (Comprehensive Ranking System) scoring engine for Express Entry.

Computes the CRS score of a candidate from an explicit table bundle, checks
program eligibility and compares the total against the latest draw cutoffs:

    language conversion -> core / spouse / transferability / additional
    -> total -> eligibility gates -> cutoff comparison

Every step is a pure function of (profile, configuration, cutoffs); the same
inputs always produce an identical ScoreResult.

Legal disclaimer: This tool is for general guidance only. Official IRCC
system results govern. See Canada.ca CRS calculator disclaimer.
"""

from __future__ import annotations

import logging
from typing import Mapping

from app.crs.additional import compute_additional
from app.crs.comparator import compare_to_cutoffs
from app.crs.core import compute_core
from app.crs.eligibility import evaluate_eligibility
from app.crs.errors import ConfigurationMissing
from app.crs.language import convert_scores
from app.crs.spouse import compute_spouse
from app.crs.transferability import compute_transferability
from models.crs_config import ScoringConfiguration
from models.eligibility import ProficiencyReport, ScoreResult
from models.profile import CandidateProfile

logger = logging.getLogger(__name__)


def proficiency_levels(
    profile: CandidateProfile, config: ScoringConfiguration, diagnostics: list[str] | None = None
) -> ProficiencyReport:
    conversion = config.language_conversion
    return ProficiencyReport(
        first_language=convert_scores(profile.first_language, conversion, diagnostics),
        second_language=convert_scores(profile.second_language, conversion, diagnostics),
        spouse_language=convert_scores(profile.spouse_language, conversion, diagnostics),
    )


def score(
    profile: CandidateProfile,
    config: ScoringConfiguration | None,
    cutoffs: Mapping[str, int | None] | None = None,
) -> ScoreResult:
    """
    Score one candidate.

    Args:
        profile: Candidate facts for this call.
        config: Validated table bundle. Required.
        cutoffs: Latest cutoff per program. The configuration's cutoff table
            is used when None; programs absent from the mapping compare as unknown.

    Raises:
        ConfigurationMissing: no configuration was supplied.
    """
    if config is None:
        raise ConfigurationMissing()

    diagnostics: list[str] = []
    proficiency = proficiency_levels(profile, config, diagnostics)

    core = compute_core(profile, proficiency.first_language, proficiency.second_language, config, diagnostics)
    spouse = compute_spouse(profile, proficiency.spouse_language, config, diagnostics)
    transferability = compute_transferability(profile, proficiency.first_language, config, diagnostics)
    additional = compute_additional(
        profile, proficiency.first_language, proficiency.second_language, config, diagnostics
    )

    total = core.subtotal + spouse.subtotal + transferability.subtotal + additional.subtotal

    eligibility = evaluate_eligibility(profile, proficiency, total, config)
    comparison = compare_to_cutoffs(total, config.cutoff_scores if cutoffs is None else cutoffs)

    if diagnostics:
        logger.debug(f"CRS lookup misses: {diagnostics}")
    logger.info(
        f"CRS calculation: total={total} core={core.subtotal} spouse={spouse.subtotal} "
        f"transferability={transferability.subtotal} additional={additional.subtotal} "
        f"config={config.version}"
    )

    return ScoreResult(
        total=total,
        core_human_capital=core.subtotal,
        spouse_factors=spouse.subtotal,
        skill_transferability=transferability.subtotal,
        additional_points=additional.subtotal,
        core=core,
        spouse=spouse,
        transferability=transferability,
        additional=additional,
        proficiency=proficiency,
        eligibility=eligibility,
        score_comparison=comparison,
        config_version=config.version,
        config_fingerprint=config.fingerprint(),
        diagnostics=diagnostics,
    )
