"""Configuration system for planwright."""

from .loader import get_config_path, load_config
from .schema import (
    DefaultsConfig,
    ExtractionLimits,
    OutputConfig,
    PlanwrightConfig,
    QualityConfig,
    SynthesisConfig,
)

__all__ = [
    "PlanwrightConfig",
    "ExtractionLimits",
    "SynthesisConfig",
    "QualityConfig",
    "DefaultsConfig",
    "OutputConfig",
    "load_config",
    "get_config_path",
]
