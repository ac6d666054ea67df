"""Profile and configuration builders shared by the test modules."""

from __future__ import annotations

import copy
from typing import Any, Callable

from app.crs.defaults import DEFAULT_CRS_CONFIG
from models.crs_config import ScoringConfiguration
from models.profile import CandidateProfile, LanguageScores, LanguageTest

# Raw IELTS bands that convert to exactly the given CLB level in every skill
IELTS_FOR_LEVEL = {
    4: dict(speaking=4.0, listening=4.5, reading=3.5, writing=4.0),
    5: dict(speaking=5.0, listening=5.0, reading=4.0, writing=5.0),
    7: dict(speaking=6.0, listening=6.0, reading=6.0, writing=6.0),
    9: dict(speaking=7.0, listening=8.0, reading=7.0, writing=7.0),
}

TEF_FOR_LEVEL = {
    7: dict(speaking=310, listening=249, reading=207, writing=310),
    9: dict(speaking=371, listening=298, reading=248, writing=371),
}


def ielts(level: int) -> LanguageScores:
    return LanguageScores(test=LanguageTest.IELTS, **IELTS_FOR_LEVEL[level])


def tef(level: int) -> LanguageScores:
    return LanguageScores(test=LanguageTest.TEF, **TEF_FOR_LEVEL[level])


def celpip(speaking: float, listening: float, reading: float, writing: float) -> LanguageScores:
    return LanguageScores(
        test=LanguageTest.CELPIP, speaking=speaking, listening=listening, reading=reading, writing=writing
    )


def make_profile(**overrides: Any) -> CandidateProfile:
    """Single 30-year-old with a bachelor's degree and nothing else entered."""
    fields: dict[str, Any] = {
        "age": 30,
        "marital_status": "single",
        "education": "bachelors",
        "first_language": LanguageScores(),
    }
    fields.update(overrides)
    return CandidateProfile(**fields)


def config_with(mutate: Callable[[dict], None]) -> ScoringConfiguration:
    """Default tables with `mutate` applied to a deep copy of the raw dict."""
    raw = copy.deepcopy(DEFAULT_CRS_CONFIG)
    mutate(raw)
    return ScoringConfiguration.model_validate(raw)


def raw_config() -> dict:
    return copy.deepcopy(DEFAULT_CRS_CONFIG)
