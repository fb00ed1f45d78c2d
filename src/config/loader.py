from __future__ import annotations

import json
import os
from dataclasses import replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from src.models.config_models import ReformatConfig

"""Config loader.

Responsibilities:
- Load the YAML config (default config/reformat.yml)
- Validate it against config_schema.json shipped next to this module
- Apply defaults for missing keys
- Apply environment overrides (TICKET_REFORMAT_FILLED_BY)
"""

DEFAULT_CONFIG_PATH = Path("config/reformat.yml")
SCHEMA_PATH = Path(__file__).with_name("config_schema.json")

FILLED_BY_ENV = "TICKET_REFORMAT_FILLED_BY"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or unreadable, or config violates it
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> ReformatConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    defaults = ReformatConfig()
    return ReformatConfig(
        filled_by=data.get("filled_by", defaults.filled_by),
        output_format=data.get("output_format", defaults.output_format),
        copy_to_clipboard=data.get("copy_to_clipboard", defaults.copy_to_clipboard),
    )


def resolve_config(path: Path | None = None) -> ReformatConfig:
    """Load config for a run.

    An explicit path must exist. Without one, config/reformat.yml is used when
    present and built-in defaults otherwise. The environment override is applied
    last.
    """
    if path is not None:
        cfg = load_config(path)
    elif DEFAULT_CONFIG_PATH.exists():
        cfg = load_config(DEFAULT_CONFIG_PATH)
    else:
        cfg = ReformatConfig()

    env_filled_by = os.getenv(FILLED_BY_ENV)
    if env_filled_by is not None:
        cfg = replace(cfg, filled_by=env_filled_by.strip())
    return cfg
