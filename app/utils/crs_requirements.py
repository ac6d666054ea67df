"""
Map loosely keyed profile data onto a CandidateProfile and report what is missing.

Form and import layers hand over dicts with snake_case or camelCase keys,
strings for numbers and free-text education labels. Everything here is
permissive: unparseable values fall back to defaults and are reported in
`missing_or_defaulted` instead of raising.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List

from models.profile import (
    SKILLS,
    CandidateProfile,
    CanadianEducation,
    EducationLevel,
    JobOffer,
    LanguageTest,
    MaritalStatus,
    OccupationCategory,
)


@dataclass
class CRSFieldRequirement:
    """A profile field the calculation uses and whether it was supplied."""

    field_name: str
    field_type: str  # "required" or "optional"
    description: str
    is_present: bool = False


def _get(data: Dict[str, Any], snake: str) -> Any:
    parts = snake.split("_")
    camel = parts[0] + "".join(p.title() for p in parts[1:])
    value = data.get(snake)
    return value if value is not None else data.get(camel)


def _int(v: Any, default: int = 0) -> int:
    if v is None:
        return default
    try:
        number = float(v)
    except (TypeError, ValueError):
        return default
    return int(number) if math.isfinite(number) else default


def _float(v: Any, default: float = 0.0) -> float:
    if v is None or v == "":
        return default
    try:
        number = float(v)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _bool(v: Any) -> bool:
    if v is None:
        return False
    if isinstance(v, bool):
        return v
    return str(v).strip().lower() in ("1", "true", "yes", "y")


def _age_from_dob(dob: Any) -> int:
    dob_date = None
    if isinstance(dob, datetime):
        dob_date = dob.date()
    elif isinstance(dob, date):
        dob_date = dob
    elif isinstance(dob, str):
        try:
            dob_date = datetime.fromisoformat(dob.replace("Z", "+00:00")).date()
        except ValueError:
            for fmt in ["%Y-%m-%d", "%d/%m/%Y", "%Y/%m/%d"]:
                try:
                    dob_date = datetime.strptime(dob, fmt).date()
                    break
                except ValueError:
                    continue
    if dob_date is None:
        return 0
    today = date.today()
    age = today.year - dob_date.year - ((today.month, today.day) < (dob_date.month, dob_date.day))
    return age if 0 < age < 120 else 0


def normalize_education(level: Any) -> EducationLevel | None:
    """Map an enum value or a free-text label to an EducationLevel."""
    s = str(level or "").strip().lower().replace("-", "_")
    if not s:
        return None
    try:
        return EducationLevel(s.replace(" ", "_"))
    except ValueError:
        pass
    if "phd" in s or "doctor" in s:
        return EducationLevel.doctoral
    if "master" in s:
        return EducationLevel.masters
    if "two or more" in s or "two_or_more" in s:
        return EducationLevel.two_or_more_degrees
    if "bachelor" in s or "degree" in s:
        return EducationLevel.bachelors
    if "less" in s or s == "none":
        return EducationLevel.less_than_secondary
    if ("secondary" in s or "high school" in s) and "post" not in s:
        return EducationLevel.secondary
    if "two" in s or "2" in s:
        return EducationLevel.two_year_post_secondary
    if "diploma" in s or "one" in s or "1" in s or "certificate" in s:
        return EducationLevel.one_year_post_secondary
    return None


def _enum(enum_cls, value: Any, default, field: str, missing: List[str]):
    # Absent values take the default silently; only unparseable ones are reported
    if value is None or value == "":
        return default
    raw = str(value).strip()
    for candidate in (raw, raw.lower(), raw.upper()):
        try:
            return enum_cls(candidate)
        except ValueError:
            continue
    missing.append(field)
    return default


def _language(
    data: Dict[str, Any],
    key: str,
    default_test: LanguageTest,
    missing: List[str],
    report_absent: bool = True,
) -> dict:
    scores = _get(data, key) or {}
    if isinstance(scores, list):
        scores = scores[0] if scores else {}
    if not isinstance(scores, dict):
        scores = {}
    test = _enum(LanguageTest, scores.get("test") or scores.get("testType"), default_test, f"{key}.test", missing)
    out = {"test": test}
    for skill in SKILLS:
        value = _float(scores.get(skill))
        out[skill] = max(0.0, value)
    if report_absent and not any(out[s] for s in SKILLS):
        missing.append(key)
    return out


def profile_to_candidate(data: Dict[str, Any]) -> tuple[CandidateProfile, List[str]]:
    """
    Build a CandidateProfile from profile data.

    Returns the profile and the list of fields that were missing or could not
    be parsed and were defaulted.
    """
    missing: List[str] = []

    age = _int(_get(data, "age"))
    if age <= 0 and _get(data, "dob"):
        age = _age_from_dob(_get(data, "dob"))
    if age <= 0:
        missing.append("age")

    marital = str(_get(data, "marital_status") or "single").strip().lower()
    marital_status = MaritalStatus.married if marital in ("married", "common_law", "common-law") else MaritalStatus.single

    education = normalize_education(_get(data, "education_level") or _get(data, "education"))
    if education is None:
        missing.append("education_level")
        education = EducationLevel.less_than_secondary

    spouse_education = normalize_education(_get(data, "spouse_education_level") or _get(data, "spouse_education"))
    if spouse_education is None:
        if marital_status == MaritalStatus.married:
            missing.append("spouse_education_level")
        spouse_education = EducationLevel.less_than_secondary

    spouse_missing: List[str] = []
    profile = CandidateProfile(
        age=age,
        marital_status=marital_status,
        education=education,
        canadian_education=_enum(CanadianEducation, _get(data, "canadian_education"), CanadianEducation.none, "canadian_education", missing),
        first_language=_language(data, "language_scores", LanguageTest.IELTS, missing),
        second_language=_language(data, "second_language_scores", LanguageTest.TEF, missing, report_absent=False),
        canadian_work_experience=_float(_get(data, "canadian_work_years")),
        foreign_work_experience=_float(_get(data, "foreign_work_years")),
        spouse_education=spouse_education,
        spouse_language=_language(data, "spouse_language_scores", LanguageTest.IELTS, spouse_missing),
        spouse_work_experience=_float(_get(data, "spouse_canadian_work_years")),
        provincial_nomination=_bool(_get(data, "provincial_nomination")),
        job_offer=_enum(JobOffer, _get(data, "job_offer"), JobOffer.none, "job_offer", missing),
        canadian_sibling=_bool(_get(data, "sibling_in_canada") or _get(data, "canadian_sibling")),
        trades_certification=_bool(_get(data, "certificate_of_qualification") or _get(data, "trades_certification")),
        occupation_category=_enum(
            OccupationCategory, _get(data, "noc_category"), OccupationCategory.management, "noc_category", missing
        ),
    )
    if marital_status == MaritalStatus.married:
        missing.extend(spouse_missing)
    return profile, missing


def analyze_crs_requirements(profile_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Report which inputs the calculation has and which are missing.

    Returns a dictionary with:
    - can_calculate: all required fields are present
    - is_complete: required and optional fields are all present
    - available_fields / missing_required / missing_optional
    """
    lang = _get(profile_data, "language_scores") or {}
    has_language = isinstance(lang, dict) and bool(lang.get("test")) and any(
        lang.get(skill) is not None for skill in SKILLS
    )

    requirements = [
        CRSFieldRequirement(
            "age", "required", "Age (or DOB to calculate age) - needed for age points",
            bool(_get(profile_data, "age") or _get(profile_data, "dob")),
        ),
        CRSFieldRequirement(
            "education_level", "required", "Education level - needed for education points",
            bool(_get(profile_data, "education_level") or _get(profile_data, "education")),
        ),
        CRSFieldRequirement(
            "language_scores", "required", "Language test scores (test type + at least one skill)",
            has_language,
        ),
        CRSFieldRequirement(
            "marital_status", "optional", "Marital status - affects scoring if spouse is accompanying",
            bool(_get(profile_data, "marital_status")),
        ),
        CRSFieldRequirement(
            "canadian_work_years", "optional", "Canadian work experience years",
            _get(profile_data, "canadian_work_years") is not None,
        ),
        CRSFieldRequirement(
            "foreign_work_years", "optional", "Foreign work experience years - adds transferability points",
            _get(profile_data, "foreign_work_years") is not None,
        ),
        CRSFieldRequirement(
            "second_language_scores", "optional", "Second official language test scores",
            bool(_get(profile_data, "second_language_scores")),
        ),
    ]

    available = [r.field_name for r in requirements if r.is_present]
    missing_required = [r.field_name for r in requirements if r.field_type == "required" and not r.is_present]
    missing_optional = [r.field_name for r in requirements if r.field_type == "optional" and not r.is_present]

    return {
        "can_calculate": not missing_required,
        "is_complete": not missing_required and not missing_optional,
        "available_fields": available,
        "missing_required": missing_required,
        "missing_optional": missing_optional,
    }
