"""Tests for interpolation, capping and per-skill point lookups."""

from app.crs.tables import cap_years, interpolate_points, round_half_up, skill_points, whole_years
from models.crs_config import SkillPoints
from models.profile import ProficiencyLevels


class TestInterpolatePoints:
    """Tests for piecewise-linear table lookup."""

    def test_exact_keys_return_table_values(self, config) -> None:
        for row in config.age_points:
            assert interpolate_points(config.age_points, "age", row.age, "without_spouse") == row.without_spouse
            assert interpolate_points(config.age_points, "age", row.age, "with_spouse") == row.with_spouse

    def test_between_keys_rounds(self, config) -> None:
        rows = config.work_experience_points.canadian
        # 1 year = 40, 2 years = 53: midpoint 46.5 rounds up
        assert interpolate_points(rows, "years", 1.5, "without_spouse") == 47

    def test_between_keys_stays_within_bracket(self, config) -> None:
        rows = config.work_experience_points.canadian
        for tenths in range(0, 51):
            years = tenths / 10
            value = interpolate_points(rows, "years", years, "with_spouse")
            lower = max((r for r in rows if r.years <= years), key=lambda r: r.years)
            upper = min((r for r in rows if r.years >= years), key=lambda r: r.years)
            low, high = sorted((lower.with_spouse, upper.with_spouse))
            assert low <= value <= high

    def test_clamps_below_table(self, config) -> None:
        assert interpolate_points(config.age_points, "age", 12, "without_spouse") == 0

    def test_clamps_above_table(self, config) -> None:
        assert interpolate_points(config.age_points, "age", 60, "without_spouse") == 0

    def test_empty_table(self) -> None:
        assert interpolate_points([], "age", 30, "without_spouse") == 0


class TestCapping:
    def test_cap_years(self) -> None:
        assert cap_years(7, 5) == 5
        assert cap_years(-2, 5) == 0
        assert cap_years(2.5, 5) == 2.5

    def test_whole_years_floors(self) -> None:
        assert whole_years(2.9, 5) == 2
        assert whole_years(9, 3) == 3

    def test_round_half_up(self) -> None:
        assert round_half_up(46.5) == 47
        assert round_half_up(46.49) == 46
        assert round_half_up(0.5) == 1


class TestSkillPoints:
    """Tests for per-skill level lookups."""

    table = SkillPoints(
        speaking={4: 6, 9: 31},
        listening={4: 6, 9: 31},
        reading={4: 6, 9: 31},
        writing={4: 6, 9: 31},
    )

    def test_sums_four_skills(self) -> None:
        levels = ProficiencyLevels(speaking=9, listening=9, reading=4, writing=4)
        assert skill_points(levels, self.table, "t") == 31 + 31 + 6 + 6

    def test_below_four_scores_nothing(self) -> None:
        levels = ProficiencyLevels(speaking=3, listening=0, reading=0, writing=0)
        diagnostics: list[str] = []
        assert skill_points(levels, self.table, "t", diagnostics) == 0
        assert diagnostics == []

    def test_missing_column_scores_zero_with_diagnostic(self) -> None:
        levels = ProficiencyLevels(speaking=7, listening=9, reading=9, writing=9)
        diagnostics: list[str] = []
        assert skill_points(levels, self.table, "language_points", diagnostics) == 93
        assert diagnostics == ["language_points.speaking: no column for level 7"]
