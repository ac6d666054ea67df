"""Pytest fixtures for the CRS engine and API tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.crs.config import default_configuration
from models.crs_config import ScoringConfiguration


@pytest.fixture
def config() -> ScoringConfiguration:
    return default_configuration()


@pytest.fixture
def client(monkeypatch):
    """API client started against the built-in tables and their cutoffs."""
    monkeypatch.delenv("CRS_CONFIG_PATH", raising=False)
    monkeypatch.delenv("CRS_CUTOFFS_SOURCE", raising=False)
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client
