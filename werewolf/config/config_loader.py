"""
Reads GameConfig from YAML files.

Keys map one-to-one onto GameConfig fields. The web adapter settings may also
be grouped under a ``web:`` section:

    player_count: 8
    web:
      host: 0.0.0.0
      port: 8080
"""

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .game_config import GameConfig


logger = logging.getLogger(__name__)

_SECTIONS = ("web",)


def _flatten(raw: Dict[str, Any]) -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for key, value in raw.items():
        if key in _SECTIONS and isinstance(value, dict):
            flat.update(value)
        else:
            flat[key] = value
    return flat


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Build a GameConfig from a YAML file; fields it does not mention keep their defaults.

    Unknown keys are logged and skipped.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the top level of the file is not a mapping
        yaml.YAMLError: If the file is not valid YAML
    """
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    raw = yaml.safe_load(path.read_text()) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path}: expected a mapping of settings, got {type(raw).__name__}")

    known = {f.name for f in fields(GameConfig)}
    values = {}
    for key, value in _flatten(raw).items():
        if key in known:
            values[key] = value
        else:
            logger.warning("Ignoring unknown config key '%s' in %s", key, config_path)

    logger.debug("Loaded %d setting(s) from %s", len(values), config_path)
    return GameConfig(**values)


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """Config from config_path, or a fresh default GameConfig when no path is given."""
    if config_path is None:
        return GameConfig()
    return load_config_from_yaml(config_path)
