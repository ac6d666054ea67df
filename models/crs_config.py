"""
Schemas for the CRS scoring configuration bundle.

The bundle is loaded once (built-in defaults or a JSON file produced by an
admin tool) and validated here, so the calculators can read every table
without defensive checks. Malformed tables raise pydantic.ValidationError.
"""

from __future__ import annotations

import hashlib
import json
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from models.profile import SKILLS, CanadianEducation, EducationLevel, LanguageTest


MIN_POINTS_LEVEL = 4
MAX_POINTS_LEVEL = 10


class Program(str, Enum):
    """Programs evaluated for eligibility and compared against cutoffs."""

    fsw = "fsw"
    cec = "cec"
    fst = "fst"
    french = "french"
    pnp = "pnp"


class _Table(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


def _require_unique(keys: list, table: str) -> None:
    seen = set()
    for key in keys:
        if key in seen:
            raise ValueError(f"{table}: duplicate row for {key!r}")
        seen.add(key)


def _require_increasing(keys: list, table: str) -> None:
    if not keys:
        raise ValueError(f"{table}: table is empty")
    for prev, cur in zip(keys, keys[1:]):
        if cur <= prev:
            raise ValueError(f"{table}: keys must be strictly increasing ({prev} then {cur})")


class AgeRow(_Table):
    age: int
    with_spouse: int
    without_spouse: int


class EducationRow(_Table):
    level: EducationLevel
    with_spouse: int
    without_spouse: int


class SpouseEducationRow(_Table):
    level: EducationLevel
    points: int


class ExperienceRow(_Table):
    years: float
    with_spouse: int
    without_spouse: int


class SpouseExperienceRow(_Table):
    years: int
    points: int


class ConversionTable(_Table):
    """Parallel ascending arrays: raw score thresholds and the level each one unlocks."""

    thresholds: list[float]
    levels: list[int]

    @model_validator(mode="after")
    def _check_arrays(self) -> "ConversionTable":
        if len(self.thresholds) != len(self.levels):
            raise ValueError(
                f"thresholds ({len(self.thresholds)}) and levels ({len(self.levels)}) differ in length"
            )
        if not self.thresholds:
            raise ValueError("conversion table is empty")
        if self.thresholds[0] != 0:
            raise ValueError("first threshold must be 0")
        for name, values in (("thresholds", self.thresholds), ("levels", self.levels)):
            if any(b < a for a, b in zip(values, values[1:])):
                raise ValueError(f"{name} must be non-decreasing")
        return self


class SkillConversion(_Table):
    speaking: ConversionTable
    listening: ConversionTable
    reading: ConversionTable
    writing: ConversionTable


class SkillPoints(_Table):
    """Points per proficiency level (4..10) for each skill."""

    speaking: dict[int, int]
    listening: dict[int, int]
    reading: dict[int, int]
    writing: dict[int, int]

    @field_validator(*SKILLS)
    @classmethod
    def _levels_in_range(cls, value: dict[int, int]) -> dict[int, int]:
        for level in value:
            if not MIN_POINTS_LEVEL <= level <= MAX_POINTS_LEVEL:
                raise ValueError(f"level {level} outside {MIN_POINTS_LEVEL}..{MAX_POINTS_LEVEL}")
        return value

    def for_skill(self, skill: str) -> dict[int, int]:
        return getattr(self, skill)


class WorkExperiencePoints(_Table):
    foreign: list[ExperienceRow]
    canadian: list[ExperienceRow]
    spouse: list[SpouseExperienceRow]

    @model_validator(mode="after")
    def _check_order(self) -> "WorkExperiencePoints":
        _require_increasing([r.years for r in self.foreign], "work_experience_points.foreign")
        _require_increasing([r.years for r in self.canadian], "work_experience_points.canadian")
        _require_increasing([r.years for r in self.spouse], "work_experience_points.spouse")
        return self


class EducationTiers(_Table):
    tier7: dict[EducationLevel, int]
    tier9: dict[EducationLevel, int]


class ExperienceTiers(_Table):
    tier7: dict[int, int]
    tier9: dict[int, int]


class CanadianForeignRow(_Table):
    canadian_years: int
    foreign_years: int
    points: int


class CanadianEducationRow(_Table):
    canadian_years: int
    level: EducationLevel
    points: int


class TradesBonus(_Table):
    tier5: int
    tier7: int


class TransferabilityPoints(_Table):
    education: EducationTiers
    foreign_experience: ExperienceTiers
    canadian_foreign: list[CanadianForeignRow]
    canadian_education: list[CanadianEducationRow]
    trades_certification: TradesBonus

    @model_validator(mode="after")
    def _check_keys(self) -> "TransferabilityPoints":
        _require_unique(
            [(r.canadian_years, r.foreign_years) for r in self.canadian_foreign],
            "transferability_points.canadian_foreign",
        )
        _require_unique(
            [(r.canadian_years, r.level) for r in self.canadian_education],
            "transferability_points.canadian_education",
        )
        return self


class ArrangedEmployment(_Table):
    senior_management: int
    skilled_category: int
    other: int = 0


class FrenchBonus(_Table):
    only_bonus: int
    dual_bonus: int


class AdditionalPoints(_Table):
    canadian_education: dict[CanadianEducation, int]
    provincial_nomination: int
    arranged_employment: ArrangedEmployment
    canadian_sibling: int
    french_language: FrenchBonus


class FSWMinimums(_Table):
    language_level: int
    education: EducationLevel
    experience_years: float
    total_points: int


class CECMinimums(_Table):
    language_level_management: int
    language_level_other: int
    canadian_experience_years: float


class FSTMinimums(_Table):
    speaking: int
    listening: int
    reading: int
    writing: int
    experience_years: float


class ProgramMinimums(_Table):
    fsw: FSWMinimums
    cec: CECMinimums
    fst: FSTMinimums


class ScoringConfiguration(_Table):
    """The full, versioned table bundle every calculator reads from."""

    version: str = Field("default", description="Label of the table set")
    age_points: list[AgeRow]
    education_points: list[EducationRow]
    spouse_education_points: list[SpouseEducationRow]
    language_conversion: dict[LanguageTest, SkillConversion]
    language_points: SkillPoints
    language_points_with_spouse: SkillPoints
    spouse_language_points: SkillPoints
    second_language_points: SkillPoints
    work_experience_points: WorkExperiencePoints
    transferability_points: TransferabilityPoints
    additional_points: AdditionalPoints
    program_minimums: ProgramMinimums
    cutoff_scores: dict[str, int | None] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_tables(self) -> "ScoringConfiguration":
        _require_increasing([r.age for r in self.age_points], "age_points")
        _require_unique([r.level for r in self.education_points], "education_points")
        _require_unique([r.level for r in self.spouse_education_points], "spouse_education_points")
        return self

    def fingerprint(self) -> str:
        """Short stable hash of the table contents, used to tag results."""
        payload = json.dumps(self.model_dump(mode="json"), sort_keys=True)
        return hashlib.sha256(payload.encode()).hexdigest()[:16]
