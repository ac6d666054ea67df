"""Shared table helpers: piecewise interpolation, capping and per-skill lookups."""

from __future__ import annotations

import math
from typing import Sequence

from models.crs_config import MIN_POINTS_LEVEL, SkillPoints
from models.profile import SKILLS, ProficiencyLevels


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from zero (points are never negative here)."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def interpolate_points(rows: Sequence, key_field: str, value: float, points_field: str) -> int:
    """
    Piecewise-linear lookup over rows sorted by `key_field`.

    Values outside the table clamp to the boundary row. Exact keys return the
    row's value unchanged; values between two keys are interpolated and rounded.
    """
    if not rows:
        return 0
    first, last = rows[0], rows[-1]
    if value <= getattr(first, key_field):
        return getattr(first, points_field)
    if value >= getattr(last, key_field):
        return getattr(last, points_field)

    for lower, upper in zip(rows, rows[1:]):
        lo_key = getattr(lower, key_field)
        hi_key = getattr(upper, key_field)
        if lo_key <= value <= hi_key:
            if value == lo_key:
                return getattr(lower, points_field)
            if value == hi_key:
                return getattr(upper, points_field)
            lo_pts = getattr(lower, points_field)
            hi_pts = getattr(upper, points_field)
            ratio = (value - lo_key) / (hi_key - lo_key)
            return round_half_up(lo_pts + ratio * (hi_pts - lo_pts))
    return 0


def cap_years(years: float, table_max: float) -> float:
    """Clamp years into [0, table_max]."""
    return max(0.0, min(float(years), float(table_max)))


def whole_years(years: float, table_max: int) -> int:
    """Completed years for exact-match tables, clamped into [0, table_max]."""
    return int(math.floor(cap_years(years, table_max)))


def skill_points(
    levels: ProficiencyLevels,
    table: SkillPoints,
    table_name: str,
    diagnostics: list[str] | None = None,
) -> int:
    """Sum per-skill points. Levels below 4 score 0; a missing level column scores 0."""
    total = 0
    for skill in SKILLS:
        level = getattr(levels, skill)
        if level < MIN_POINTS_LEVEL:
            continue
        column = table.for_skill(skill)
        if level not in column:
            if diagnostics is not None:
                diagnostics.append(f"{table_name}.{skill}: no column for level {level}")
            continue
        total += column[level]
    return total
