#!/usr/bin/env python3
"""
Plugin configuration

The patch list lives in composer.json under the "extra" section:

    "extra": {
        "hryvinskyi-quality-patches": {
            "enabled": true,
            "patches": ["ACSD-52277", "ACSD-53347"]
        }
    }

Missing pieces fall back to defaults; an absent section is not an error.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .module import QualityPatchesError

CONFIG_KEY = "hryvinskyi-quality-patches"


class ConfigError(QualityPatchesError):
    """Raised when a configuration file exists but cannot be read"""


@dataclass(frozen=True)
class PluginConfig:
    enabled: bool = True
    patches: Tuple[str, ...] = ()


def resolve_config(extra: Optional[Mapping[str, Any]]) -> PluginConfig:
    """Build the plugin configuration from the project's extra map"""
    section = (extra or {}).get(CONFIG_KEY)
    if not isinstance(section, Mapping):
        section = {}

    enabled = section.get("enabled")
    patches = section.get("patches")

    # A single id is accepted as a one-item list; other scalars mean no patches
    if isinstance(patches, str):
        patches = [patches] if patches else []
    elif not isinstance(patches, (list, tuple)):
        patches = []

    return PluginConfig(
        enabled=True if enabled is None else bool(enabled),
        patches=tuple(str(p) for p in patches),
    )


def load_project_extra(composer_json: Path) -> Dict[str, Any]:
    """Read the "extra" map from composer.json

    Returns:
        The extra map, or an empty dict if the file or section is missing

    Raises:
        ConfigError: If composer.json is not valid JSON
    """
    if not composer_json.exists():
        return {}

    try:
        with open(composer_json, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {composer_json}: {e}") from e

    extra = data.get("extra") if isinstance(data, dict) else None
    return extra if isinstance(extra, dict) else {}


def load_config_file(config_file: Path) -> Dict[str, Any]:
    """Read a YAML override file and return it as an extra map

    The file may hold the section itself:

        enabled: true
        patches:
          - ACSD-52277

    or nest it under the same key composer.json uses.
    """
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_file}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_file}")

    if CONFIG_KEY in content:
        return content
    return {CONFIG_KEY: content}
