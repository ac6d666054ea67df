"""Exceptions raised by the CRS engine and its configuration providers."""


class CRSEngineError(Exception):
    """Base class for CRS engine failures."""


class ConfigurationMissing(CRSEngineError):
    """score() was called before a scoring configuration was loaded."""

    def __init__(self, message: str = "CRS configuration is not loaded. Load a configuration before scoring."):
        super().__init__(message)


class ConfigurationLoadError(CRSEngineError):
    """A configuration source could not be read or failed validation."""
