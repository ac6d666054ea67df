from fastapi import Request

from app.crs.config import get_configuration, get_cutoff_scores
from app.crs.errors import ConfigurationMissing
from models.crs_config import ScoringConfiguration


def load_crs_state(app, config_path: str | None, cutoffs_source: str | None, timeout: float):
    config = get_configuration(config_path)
    app.state.crs_config = config
    app.state.crs_cutoffs = get_cutoff_scores(cutoffs_source, config, timeout=timeout)


def clear_crs_state(app):
    app.state.crs_config = None
    app.state.crs_cutoffs = {}


def get_config(request: Request) -> ScoringConfiguration:
    config = getattr(request.app.state, "crs_config", None)
    if config is None:
        raise ConfigurationMissing()
    return config


def get_cutoffs(request: Request) -> dict:
    return getattr(request.app.state, "crs_cutoffs", None) or {}
