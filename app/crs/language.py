"""
Language test → CLB/NCLC conversion.

Every test (IELTS, CELPIP, TEF, TCF) is described by the same shape in the
configuration: per skill, ascending raw-score thresholds paired with the level
each threshold unlocks. Discrete and continuous scales go through the same
scan, they only differ in granularity.
"""

from __future__ import annotations

import logging

from models.crs_config import ConversionTable, SkillConversion
from models.profile import SKILLS, LanguageScores, LanguageTest, ProficiencyLevels

logger = logging.getLogger(__name__)


def level_for_score(raw: float, table: ConversionTable) -> int:
    """Highest level whose threshold the raw score meets; 0 if none (or not entered)."""
    if raw is None or raw <= 0:
        return 0
    for threshold, level in zip(reversed(table.thresholds), reversed(table.levels)):
        if threshold > 0 and raw >= threshold:
            return level
    return 0


def convert_scores(
    scores: LanguageScores,
    conversion: dict[LanguageTest, SkillConversion],
    diagnostics: list[str] | None = None,
) -> ProficiencyLevels:
    """Convert the four raw skill scores of one test into proficiency levels."""
    tables = conversion.get(scores.test)
    if tables is None:
        if scores.is_entered and diagnostics is not None:
            diagnostics.append(f"language_conversion: no table for test {scores.test.value}")
        logger.debug("No conversion table for %s, levels default to 0", scores.test.value)
        return ProficiencyLevels()

    levels = {skill: level_for_score(getattr(scores, skill), getattr(tables, skill)) for skill in SKILLS}
    return ProficiencyLevels(**levels)
