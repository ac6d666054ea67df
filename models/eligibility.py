"""Schemas for eligibility and CRS compute API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from models.crs_config import Program
from models.profile import CandidateProfile, ProficiencyLevels


DISCLAIMER = (
    "This tool is for general guidance only. Official IRCC system results govern. "
    "See Canada.ca Express Entry CRS calculator. Not legal advice."
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class CoreBreakdown(_Frozen):
    age: int = 0
    education: int = 0
    first_language: int = 0
    second_language: int = 0
    canadian_experience: int = 0

    @property
    def subtotal(self) -> int:
        return self.age + self.education + self.first_language + self.second_language + self.canadian_experience


class SpouseBreakdown(_Frozen):
    education: int = 0
    language: int = 0
    experience: int = 0

    @property
    def subtotal(self) -> int:
        return self.education + self.language + self.experience


class TransferabilityBreakdown(_Frozen):
    education_language: int = 0
    foreign_experience_language: int = 0
    canadian_foreign_experience: int = 0
    canadian_experience_education: int = 0
    trades_certification: int = 0
    uncapped: int = Field(0, description="Sum before the 0..100 cap")
    subtotal: int = Field(0, description="Sum clamped to 0..100")


class AdditionalBreakdown(_Frozen):
    canadian_education: int = 0
    provincial_nomination: int = 0
    arranged_employment: int = 0
    canadian_sibling: int = 0
    french_only: int = 0
    french_dual: int = 0

    @property
    def subtotal(self) -> int:
        return (
            self.canadian_education
            + self.provincial_nomination
            + self.arranged_employment
            + self.canadian_sibling
            + self.french_only
            + self.french_dual
        )


class ProficiencyReport(_Frozen):
    first_language: ProficiencyLevels = Field(default_factory=ProficiencyLevels)
    second_language: ProficiencyLevels = Field(default_factory=ProficiencyLevels)
    spouse_language: ProficiencyLevels = Field(default_factory=ProficiencyLevels)


class ProgramEligibility(_Frozen):
    """Outcome of one program gate plus the values it checked."""

    eligible: bool
    checks: dict[str, bool] = Field(default_factory=dict, description="Individual conditions and whether each held")
    values: dict[str, Any] = Field(default_factory=dict, description="Inputs and floors compared, for display")


class ScoreResult(_Frozen):
    """Result of one scoring call. Created fresh each time, never mutated."""

    total: int = Field(..., description="Total CRS score")
    core_human_capital: int = Field(..., description="Points from age, education, language, Canadian work")
    spouse_factors: int = Field(0, description="Points from spouse education, work, language")
    skill_transferability: int = Field(0, description="Capped combination points")
    additional_points: int = Field(0, description="Provincial nomination, Canadian study, sibling, etc.")
    core: CoreBreakdown
    spouse: SpouseBreakdown
    transferability: TransferabilityBreakdown
    additional: AdditionalBreakdown
    proficiency: ProficiencyReport
    eligibility: dict[Program, ProgramEligibility]
    score_comparison: dict[str, int | None] = Field(
        default_factory=dict, description="total - cutoff per program; null when the cutoff is unknown"
    )
    config_version: str
    config_fingerprint: str
    diagnostics: list[str] = Field(default_factory=list, description="Non-fatal table lookup misses")
    disclaimer: str = DISCLAIMER


class CRSComputeRequest(BaseModel):
    """Body for POST /eligibility/crs/compute."""

    profile: CandidateProfile
    cutoffs: dict[str, int | None] | None = Field(
        None, description="Cutoff scores to compare against; the loaded cutoffs are used when omitted"
    )


class CRSProfileCheck(BaseModel):
    """Response for POST /eligibility/crs/normalize."""

    profile: CandidateProfile
    can_calculate: bool
    missing_or_defaulted: list[str] = Field(default_factory=list)
