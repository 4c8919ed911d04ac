"""
Engine configuration persistence.

Stores revelation tuning in a JSON or YAML file. Curve constants are not
configurable; only the knobs below are.
"""

import json
import logging
from pathlib import Path
from typing import TypedDict

import yaml

from .state.schema import ConfidenceLevel, RevelationOptions
from .systems.patterns import DEFAULT_DECAY_FACTOR

logger = logging.getLogger(__name__)


class EngineConfig(TypedDict, total=False):
    """Engine configuration."""
    min_news_confidence: str  # hint, suspected, moderate, strong, confirmed
    auto_reveal_confirmed: bool
    revelation_multiplier: float
    decay_factor: float  # Applied to evidence at each season end
    seed: int | None  # Random seed, None for nondeterministic


DEFAULT_CONFIG: EngineConfig = {
    "min_news_confidence": ConfidenceLevel.SUSPECTED.value,
    "auto_reveal_confirmed": True,
    "revelation_multiplier": 1.0,
    "decay_factor": DEFAULT_DECAY_FACTOR,
    "seed": None,
}

YAML_SUFFIXES = {".yaml", ".yml"}


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def load_config(path: Path | str) -> EngineConfig:
    """Load config from file, or return defaults if missing or unreadable."""
    path = Path(path)

    if not path.exists():
        return DEFAULT_CONFIG.copy()

    try:
        with open(path, "r", encoding="utf-8") as f:
            saved = yaml.safe_load(f) if _is_yaml(path) else json.load(f)
    except (json.JSONDecodeError, yaml.YAMLError, OSError) as e:
        logger.warning(f"Could not read config {path}, using defaults: {e}")
        return DEFAULT_CONFIG.copy()

    if not isinstance(saved, dict):
        logger.warning(f"Config {path} is not a mapping, using defaults")
        return DEFAULT_CONFIG.copy()

    # Merge with defaults to handle missing keys
    config = DEFAULT_CONFIG.copy()
    config.update(saved)

    try:
        _check_config(config)
    except ValueError as e:
        logger.warning(f"Invalid config {path}, using defaults: {e}")
        return DEFAULT_CONFIG.copy()
    return config


def _check_config(config: EngineConfig) -> None:
    """Raise ValueError if any value is out of range or the wrong type."""
    options_from_config(config)

    decay = config.get("decay_factor")
    if isinstance(decay, bool) or not isinstance(decay, (int, float)) or not 0 < decay <= 1:
        raise ValueError(f"decay_factor must be in (0, 1], got {decay!r}")

    seed = config.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError(f"seed must be an integer, got {seed!r}")


def save_config(config: EngineConfig, path: Path | str) -> bool:
    """Save config to file. Returns True on success."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(path, "w", encoding="utf-8") as f:
            if _is_yaml(path):
                yaml.safe_dump(dict(config), f, sort_keys=False)
            else:
                json.dump(config, f, indent=2)
        return True
    except OSError as e:
        logger.warning(f"Could not write config {path}: {e}")
        return False


def options_from_config(config: EngineConfig) -> RevelationOptions:
    """
    Build engine options from a config, filling gaps from defaults.

    Raises pydantic.ValidationError on an unknown confidence level or a
    value of the wrong type.
    """
    merged = DEFAULT_CONFIG.copy()
    merged.update(config)
    return RevelationOptions.model_validate(
        {name: merged[name] for name in RevelationOptions.model_fields}
    )
