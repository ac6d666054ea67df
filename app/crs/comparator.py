"""Signed comparison between a total score and each program's latest cutoff."""

from __future__ import annotations

from typing import Mapping

from models.crs_config import Program


def compare_to_cutoffs(total: int, cutoffs: Mapping[str, int | None]) -> dict[str, int | None]:
    """
    total - cutoff for every program, plus any extra draw keys the cutoffs carry.

    A program with no known cutoff maps to None rather than a number, so an
    unseen threshold is never reported as met or missed.
    """
    programs = [p.value for p in Program]
    keys = programs + sorted(k for k in cutoffs if k not in programs)
    comparison: dict[str, int | None] = {}
    for key in keys:
        cutoff = cutoffs.get(key)
        comparison[key] = None if cutoff is None else total - int(cutoff)
    return comparison
