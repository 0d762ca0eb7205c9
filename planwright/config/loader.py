# planwright/config/loader.py
"""
Configuration loading with auto-creation of defaults.

The config file lives in the platformdirs user config directory unless a path
is given explicitly (the CLI's --config, tests).
"""

import logging
from pathlib import Path

import yaml
from platformdirs import user_config_path

from .schema import PlanwrightConfig

logger = logging.getLogger(__name__)


def get_config_path() -> Path:
    """Get path to config file, ensuring config directory exists."""
    return user_config_path("planwright", ensure_exists=True) / "config.yaml"


def write_default_config(config_path: Path) -> PlanwrightConfig:
    """Write the default configuration to config_path and return it."""
    defaults = PlanwrightConfig()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(
            defaults.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False
        )
    logger.info(f"Created default config at {config_path}")
    return defaults


def load_config(config_path: Path | None = None) -> PlanwrightConfig:
    """
    Load configuration from YAML file.

    A missing file is created with defaults. An empty file yields the defaults
    and is left untouched; unknown keys are ignored.

    Args:
        config_path: Explicit config file (defaults to the user config dir)

    Returns:
        Validated PlanwrightConfig

    Raises:
        ValueError: If the file holds something other than a mapping
        pydantic.ValidationError: If a value is out of range
    """
    config_path = config_path or get_config_path()
    if not config_path.exists():
        return write_default_config(config_path)

    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # empty file
    if data is None:
        return PlanwrightConfig()
    if not isinstance(data, dict):
        raise ValueError(
            f"{config_path}: expected a mapping at top level, got {type(data).__name__}"
        )

    config = PlanwrightConfig.model_validate(data)
    logger.info(f"Loaded config from {config_path}")
    return config
