"""Configuration models and the lazily loaded global settings."""

from __future__ import annotations

from .config import (
    Config,
    ExtractionSettings,
    MonitoringConfig,
    NoiseRules,
    ScoringWeights,
    SummarizationSettings,
    WebConfig,
    find_config_file,
    settings,
)

__all__ = [
    "Config",
    "ExtractionSettings",
    "MonitoringConfig",
    "NoiseRules",
    "ScoringWeights",
    "SummarizationSettings",
    "WebConfig",
    "find_config_file",
    "settings",
]
