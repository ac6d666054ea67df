"""Tests for language test to CLB/NCLC conversion."""

from app.crs.language import convert_scores, level_for_score
from models.crs_config import ConversionTable
from models.profile import SKILLS, LanguageScores, LanguageTest, ProficiencyLevels
from tests.support import celpip, ielts, tef


class TestLevelForScore:
    """Tests for the single-skill threshold scan."""

    table = ConversionTable(thresholds=[0, 4.0, 5.0, 6.0], levels=[0, 4, 5, 7])

    def test_exact_threshold(self) -> None:
        assert level_for_score(5.0, self.table) == 5

    def test_between_thresholds_takes_lower(self) -> None:
        assert level_for_score(5.5, self.table) == 5

    def test_above_top_threshold(self) -> None:
        assert level_for_score(9.0, self.table) == 7

    def test_zero_means_not_entered(self) -> None:
        assert level_for_score(0, self.table) == 0

    def test_below_lowest_nonzero_threshold(self) -> None:
        assert level_for_score(3.5, self.table) == 0


class TestConvertScores:
    """Tests for converting a full test result."""

    def test_ielts_level_nine(self, config) -> None:
        levels = convert_scores(ielts(9), config.language_conversion)
        assert levels == ProficiencyLevels(speaking=9, listening=9, reading=9, writing=9)

    def test_ielts_uneven_bands(self, config) -> None:
        scores = LanguageScores(test=LanguageTest.IELTS, speaking=7.5, listening=8.0, reading=8.5, writing=7.0)
        levels = convert_scores(scores, config.language_conversion)
        assert levels.as_dict() == {"speaking": 10, "listening": 9, "reading": 10, "writing": 9}

    def test_celpip_maps_one_to_one(self, config) -> None:
        levels = convert_scores(celpip(5, 6, 7, 8), config.language_conversion)
        assert levels.as_dict() == {"speaking": 5, "listening": 6, "reading": 7, "writing": 8}

    def test_celpip_above_ten_stays_at_ten(self, config) -> None:
        levels = convert_scores(celpip(12, 11, 10, 12), config.language_conversion)
        assert levels.all_at_least(10)
        assert max(levels.as_dict().values()) == 10

    def test_tef_nclc_seven(self, config) -> None:
        assert convert_scores(tef(7), config.language_conversion).all_at_least(7)

    def test_tcf_discrete_speaking_and_continuous_listening(self, config) -> None:
        scores = LanguageScores(test=LanguageTest.TCF, speaking=10, listening=458, reading=453, writing=10)
        levels = convert_scores(scores, config.language_conversion)
        assert levels.as_dict() == {"speaking": 7, "listening": 7, "reading": 7, "writing": 7}

    def test_nothing_entered(self, config) -> None:
        assert convert_scores(LanguageScores(), config.language_conversion) == ProficiencyLevels()

    def test_missing_test_table_reports_diagnostic(self, config) -> None:
        conversion = {k: v for k, v in config.language_conversion.items() if k != LanguageTest.TCF}
        diagnostics: list[str] = []
        scores = LanguageScores(test=LanguageTest.TCF, speaking=10, listening=458, reading=453, writing=10)
        assert convert_scores(scores, conversion, diagnostics) == ProficiencyLevels()
        assert diagnostics == ["language_conversion: no table for test TCF"]


class TestMonotonicity:
    """A higher raw score never yields a lower level, for every test and skill."""

    def test_all_tables_are_monotonic(self, config) -> None:
        for test, tables in config.language_conversion.items():
            for skill in SKILLS:
                table = getattr(tables, skill)
                top = table.thresholds[-1] * 1.2
                steps = 400
                previous = 0
                for i in range(steps + 1):
                    raw = top * i / steps
                    level = level_for_score(raw, table)
                    assert level >= previous, f"{test.value}.{skill} dropped at {raw}"
                    previous = level
