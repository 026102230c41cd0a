"""Configuration system for AED-ECG."""

from .loaders import ConfigLoader
from .models import (
    DecisionThresholds,
    LoaderSettings,
    QualitySettings,
    SentinelMode,
    Settings,
    VisualizationSettings,
)

__all__ = [
    "ConfigLoader",
    "DecisionThresholds",
    "LoaderSettings",
    "QualitySettings",
    "SentinelMode",
    "Settings",
    "VisualizationSettings",
]
