"""
Configuration and cutoff providers for the CRS engine.

These sit outside the scoring core: they read the table bundle (built-in
defaults or a JSON export from the admin dashboard) and the latest draw
cutoffs (configuration, local JSON file or an HTTP feed). The engine only ever
receives the validated results.
"""

from __future__ import annotations

import json
import logging
import math
import os
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from app.crs.defaults import DEFAULT_CRS_CONFIG
from app.crs.errors import ConfigurationLoadError
from models.crs_config import ScoringConfiguration

logger = logging.getLogger(__name__)

DEFAULT_HTTP_TIMEOUT = 10.0


def default_configuration() -> ScoringConfiguration:
    return ScoringConfiguration.model_validate(DEFAULT_CRS_CONFIG)


def get_configuration(path: str | os.PathLike | None = None) -> ScoringConfiguration:
    """
    Load and validate the scoring configuration.

    Args:
        path: JSON file exported by the admin dashboard. Built-in defaults are
            used when None or empty.

    Raises:
        ConfigurationLoadError: the file is unreadable, not JSON, or fails validation.
    """
    if not path:
        config = default_configuration()
        logger.info(f"CRS configuration: using built-in tables (version={config.version}, fingerprint={config.fingerprint()})")
        return config

    file_path = Path(path)
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationLoadError(f"Cannot read CRS configuration {file_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationLoadError(f"CRS configuration {file_path} is not valid JSON: {e}") from e

    try:
        config = ScoringConfiguration.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationLoadError(f"CRS configuration {file_path} is invalid:\n{e}") from e

    changes = diff_configurations(default_configuration(), config)
    logger.info(
        f"CRS configuration: loaded {file_path} (version={config.version}, fingerprint={config.fingerprint()}, "
        f"tables changed from defaults={len(changes)})"
    )
    for change in changes:
        logger.debug(f"CRS configuration change: {change}")
    return config


def diff_configurations(baseline: ScoringConfiguration, candidate: ScoringConfiguration) -> list[str]:
    """Names of top-level tables whose contents differ between two bundles."""
    base = baseline.model_dump(mode="json")
    other = candidate.model_dump(mode="json")
    changes = []
    for key in base:
        if key == "version":
            continue
        if base[key] != other.get(key):
            changes.append(key)
    return changes


def _parse_cutoffs(data: Any) -> dict[str, int | None]:
    if isinstance(data, dict) and isinstance(data.get("cutoffs"), dict):
        data = data["cutoffs"]
    if not isinstance(data, dict):
        raise ValueError("cutoff feed must be a JSON object")

    cutoffs: dict[str, int | None] = {}
    for program, value in data.items():
        if value is None:
            cutoffs[str(program)] = None
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring non-numeric cutoff for {program!r}: {value!r}")
            cutoffs[str(program)] = None
            continue
        # Draw cutoffs are whole points; anything else is reported as unknown
        if isinstance(value, bool) or not math.isfinite(number) or not number.is_integer():
            logger.warning(f"Ignoring non-integral cutoff for {program!r}: {value!r}")
            cutoffs[str(program)] = None
            continue
        cutoffs[str(program)] = int(number)
    return cutoffs


def _fetch_cutoff_feed(url: str, timeout: float) -> Any:
    with httpx.Client(timeout=timeout) as client:
        response = client.get(url, follow_redirects=True)
        response.raise_for_status()
        return response.json()


def get_cutoff_scores(
    source: str | None = None,
    config: ScoringConfiguration | None = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
) -> dict[str, int | None]:
    """
    Latest cutoff per program.

    `source` may be an http(s) URL returning JSON, a local JSON file, or None
    to use the configuration's own cutoff table. Any failure is logged and
    reported as "no cutoffs known"; it never reaches the scoring engine.
    """
    if not source:
        return dict(config.cutoff_scores) if config is not None else {}

    try:
        if source.startswith(("http://", "https://")):
            data = _fetch_cutoff_feed(source, timeout)
        else:
            data = json.loads(Path(source).read_text(encoding="utf-8"))
        cutoffs = _parse_cutoffs(data)
    except (httpx.HTTPError, OSError, ValueError) as e:
        logger.warning(f"CRS cutoffs unavailable from {source}: {e}; cutoffs will be reported as unknown")
        return {}

    logger.info(f"CRS cutoffs: loaded {len(cutoffs)} entries from {source}")
    return cutoffs
