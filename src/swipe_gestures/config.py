"""Swipe configuration: defaults, override resolution and YAML files.

An effective configuration is always rebuilt from the defaults plus the
latest overrides. Overrides are read permissively: unknown keys are ignored
and values are not type checked.

YAML layout (either form is accepted):

    swipe:
      velocityThreshold: 0.5
      detectSwipeUp: false

    # or the overrides mapping at the top level
    velocityThreshold: 0.5
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

logger = logging.getLogger("swipe_gestures.config")


class ConfigError(ValueError):
    """Raised when a configuration file does not hold a mapping."""


@dataclass(frozen=True)
class SwipeConfig:
    """Effective swipe configuration. Replaced wholesale, never mutated."""
    velocity_threshold: float = 0.3
    directional_offset_threshold: float = 80
    detect_swipe_up: bool = True
    detect_swipe_down: bool = True
    detect_swipe_left: bool = True
    detect_swipe_right: bool = True

    def to_dict(self) -> dict:
        """Return the configuration keyed by the camelCase override names."""
        return {CONFIG_KEYS[name]: value for name, value in asdict(self).items()}

    def overrides(self) -> dict:
        """Return only the entries that differ from the defaults."""
        defaults = DEFAULT_SWIPE_CONFIG.to_dict()
        return {k: v for k, v in self.to_dict().items() if defaults[k] != v}


# field name -> override key
CONFIG_KEYS = {
    "velocity_threshold": "velocityThreshold",
    "directional_offset_threshold": "directionalOffsetThreshold",
    "detect_swipe_up": "detectSwipeUp",
    "detect_swipe_down": "detectSwipeDown",
    "detect_swipe_left": "detectSwipeLeft",
    "detect_swipe_right": "detectSwipeRight",
}

DEFAULT_SWIPE_CONFIG = SwipeConfig()


def resolve_config(overrides: Optional[Mapping[str, Any]] = None) -> SwipeConfig:
    """Merge overrides onto the defaults and return a new effective config.

    For every recognized key the override wins when present and not None.
    Both the camelCase key and the field name are recognized; the camelCase
    key is checked first.
    """
    overrides = overrides or {}
    values = {}
    for f in fields(SwipeConfig):
        for key in (CONFIG_KEYS[f.name], f.name):
            value = overrides.get(key)
            if value is not None:
                values[f.name] = value
                break
    return SwipeConfig(**values)


def load_config(path: str | Path) -> SwipeConfig:
    """Load overrides from a YAML file and resolve them against the defaults."""
    path = Path(path)
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping, got {type(data).__name__}")

    section = data.get("swipe", data)
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: 'swipe' section must be a mapping")

    config = resolve_config(section)
    logger.debug("Loaded swipe config from %s: %s", path, config.overrides())
    return config


def save_config(config: SwipeConfig, path: str | Path):
    """Write the full effective configuration to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump({"swipe": config.to_dict()}, f, default_flow_style=False, sort_keys=False)
