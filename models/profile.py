"""Candidate profile schemas used as CRS engine input."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


SKILLS = ("speaking", "listening", "reading", "writing")


class MaritalStatus(str, Enum):
    single = "single"
    married = "married"


class EducationLevel(str, Enum):
    """Highest completed credential, declared in ascending order."""

    less_than_secondary = "less_than_secondary"
    secondary = "secondary"
    one_year_post_secondary = "one_year_post_secondary"
    two_year_post_secondary = "two_year_post_secondary"
    bachelors = "bachelors"
    two_or_more_degrees = "two_or_more_degrees"
    masters = "masters"
    doctoral = "doctoral"

    @property
    def rank(self) -> int:
        return list(EducationLevel).index(self)

    @property
    def is_lowest(self) -> bool:
        return self.rank == 0


class CanadianEducation(str, Enum):
    none = "none"
    one_or_two_year = "one_or_two_year"
    three_year_or_masters = "three_year_or_masters"
    doctoral = "doctoral"


class LanguageTest(str, Enum):
    IELTS = "IELTS"
    CELPIP = "CELPIP"
    TEF = "TEF"
    TCF = "TCF"

    @property
    def is_french(self) -> bool:
        return self in (LanguageTest.TEF, LanguageTest.TCF)

    @property
    def is_english(self) -> bool:
        return self in (LanguageTest.IELTS, LanguageTest.CELPIP)


class JobOffer(str, Enum):
    none = "none"
    senior_management = "senior_management"
    skilled_category = "skilled_category"
    other = "other"


class OccupationCategory(str, Enum):
    """Declared NOC category; 0 and A are management/professional."""

    management = "0"
    professional = "A"
    technical = "B"
    intermediate = "C"
    labour = "D"

    @property
    def is_management_adjacent(self) -> bool:
        return self in (OccupationCategory.management, OccupationCategory.professional)


class LanguageScores(BaseModel):
    """Raw results of one language test. A score of 0 means not entered."""

    model_config = ConfigDict(frozen=True)

    test: LanguageTest = Field(LanguageTest.IELTS, description="Test taken")
    speaking: float = Field(0, ge=0, description="Raw speaking score")
    listening: float = Field(0, ge=0, description="Raw listening score")
    reading: float = Field(0, ge=0, description="Raw reading score")
    writing: float = Field(0, ge=0, description="Raw writing score")

    def raw(self) -> dict[str, float]:
        return {skill: getattr(self, skill) for skill in SKILLS}

    @property
    def is_entered(self) -> bool:
        return any(v > 0 for v in self.raw().values())


class ProficiencyLevels(BaseModel):
    """CLB/NCLC level per skill (0 = not evaluated or below the minimum)."""

    model_config = ConfigDict(frozen=True)

    speaking: int = 0
    listening: int = 0
    reading: int = 0
    writing: int = 0

    def as_dict(self) -> dict[str, int]:
        return {skill: getattr(self, skill) for skill in SKILLS}

    def all_at_least(self, floor: int) -> bool:
        return all(level >= floor for level in self.as_dict().values())


class CandidateProfile(BaseModel):
    """
    Everything the engine needs to score one candidate.

    Numeric values are not range-checked here: negative years or ages outside
    the tabulated bounds are clamped by the calculators instead.
    """

    model_config = ConfigDict(frozen=True)

    age: int = Field(30, description="Age in years")
    marital_status: MaritalStatus = Field(MaritalStatus.single, description="Married/common-law with accompanying spouse or single")
    education: EducationLevel = Field(EducationLevel.bachelors, description="Highest level of education")
    canadian_education: CanadianEducation = Field(CanadianEducation.none, description="Canadian credential, if any")
    first_language: LanguageScores = Field(default_factory=LanguageScores)
    second_language: LanguageScores = Field(default_factory=lambda: LanguageScores(test=LanguageTest.TEF))
    canadian_work_experience: float = Field(0, description="Years of skilled work in Canada")
    foreign_work_experience: float = Field(0, description="Years of skilled work outside Canada")
    spouse_education: EducationLevel = Field(EducationLevel.bachelors, description="Spouse's highest level of education")
    spouse_language: LanguageScores = Field(default_factory=LanguageScores)
    spouse_work_experience: float = Field(0, description="Spouse's years of Canadian work")
    provincial_nomination: bool = False
    job_offer: JobOffer = JobOffer.none
    canadian_sibling: bool = False
    trades_certification: bool = False
    occupation_category: OccupationCategory = Field(OccupationCategory.management, description="NOC category of the main occupation")

    @property
    def with_spouse(self) -> bool:
        return self.marital_status == MaritalStatus.married
