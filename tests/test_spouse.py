"""Tests for spouse or common-law partner factors."""

from app.crs.language import convert_scores
from app.crs.spouse import compute_spouse, spouse_education_points, spouse_experience_points
from models.profile import EducationLevel, ProficiencyLevels
from tests.support import config_with, ielts, make_profile


def _spouse_levels(profile, config):
    return convert_scores(profile.spouse_language, config.language_conversion)


class TestSpouseEducationPoints:
    def test_bachelors(self, config) -> None:
        assert spouse_education_points(EducationLevel.bachelors, config) == 8

    def test_missing_row(self) -> None:
        config = config_with(
            lambda raw: raw.update(
                spouse_education_points=[r for r in raw["spouse_education_points"] if r["level"] != "doctoral"]
            )
        )
        diagnostics: list[str] = []
        assert spouse_education_points(EducationLevel.doctoral, config, diagnostics) == 0
        assert diagnostics == ["spouse_education_points: no row for doctoral"]


class TestSpouseExperiencePoints:
    def test_exact_years(self, config) -> None:
        assert spouse_experience_points(2, config) == 7

    def test_partial_years_are_floored(self, config) -> None:
        # exact lookup: 2.9 years counts as 2
        assert spouse_experience_points(2.9, config) == 7

    def test_capped_at_table_max(self, config) -> None:
        assert spouse_experience_points(9, config) == 10


class TestComputeSpouse:
    def test_married_candidate(self, config) -> None:
        profile = make_profile(
            marital_status="married",
            spouse_education="bachelors",
            spouse_language=ielts(5),
            spouse_work_experience=0,
        )
        spouse = compute_spouse(profile, _spouse_levels(profile, config), config)
        assert (spouse.education, spouse.language, spouse.experience) == (8, 4, 0)
        assert spouse.subtotal == 12

    def test_single_candidate_scores_nothing(self, config) -> None:
        profile = make_profile(spouse_language=ielts(9), spouse_work_experience=5, spouse_education="doctoral")
        spouse = compute_spouse(profile, _spouse_levels(profile, config), config)
        assert spouse.subtotal == 0

    def test_spouse_below_level_four_language(self, config) -> None:
        profile = make_profile(marital_status="married")
        spouse = compute_spouse(profile, ProficiencyLevels(speaking=3, listening=3, reading=3, writing=3), config)
        assert spouse.language == 0
