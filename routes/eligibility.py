"""
Eligibility & CRS scoring API.

POST /api/v1/eligibility/crs/compute scores a candidate profile against the
loaded table bundle and the latest cutoffs. The profile is taken from the
request only; nothing is stored.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from app.crs.engine import score
from app.state import get_config, get_cutoffs
from app.utils.crs_requirements import analyze_crs_requirements, profile_to_candidate
from models.crs_config import ScoringConfiguration
from models.eligibility import CRSComputeRequest, CRSProfileCheck, ScoreResult

router = APIRouter(prefix="/eligibility", tags=["eligibility"])


@router.post("/crs/compute", response_model=ScoreResult)
async def crs_compute(
    request: Request,
    body: CRSComputeRequest,
    config: ScoringConfiguration = Depends(get_config),
) -> ScoreResult:
    """
    Compute the Express Entry CRS score, program eligibility and the distance
    to each program's latest cutoff.

    `cutoffs` in the body replaces the loaded cutoffs for this call only.
    Programs with no known cutoff are reported as `null`.
    """
    cutoffs = body.cutoffs if body.cutoffs is not None else get_cutoffs(request)
    return score(body.profile, config, cutoffs)


@router.post("/crs/normalize", response_model=CRSProfileCheck)
async def crs_normalize(data: dict[str, Any] = Body(...)) -> CRSProfileCheck:
    """
    Map raw profile data (snake_case or camelCase keys, free-text education)
    to the profile schema accepted by /crs/compute, and list what was
    missing or defaulted.
    """
    profile, missing = profile_to_candidate(data)
    analysis = analyze_crs_requirements(data)
    return CRSProfileCheck(
        profile=profile,
        can_calculate=analysis["can_calculate"],
        missing_or_defaulted=missing,
    )


@router.get("/crs/config", response_model=ScoringConfiguration)
async def crs_config(config: ScoringConfiguration = Depends(get_config)) -> ScoringConfiguration:
    """The table bundle currently used for scoring."""
    return config


@router.get("/crs/cutoffs")
async def crs_cutoffs(request: Request) -> dict[str, Any]:
    """Latest known cutoff per program; null where unknown."""
    config = getattr(request.app.state, "crs_config", None)
    return {
        "cutoffs": get_cutoffs(request),
        "config_version": config.version if config is not None else None,
    }
