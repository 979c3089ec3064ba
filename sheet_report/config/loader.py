from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import (
    DEFAULT_EXCEL,
    DEFAULT_OUTPUT,
    DEFAULT_TEMPLATE,
    FileConfig,
    RunConfig,
)

"""Config loader.

Responsibilities:
- Load the optional YAML config (config/report.yml)
- Validate it against the packaged JSON schema
- Resolve each setting: CLI flag > environment > YAML > built-in default
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "SCHEMA_PATH",
    "load_config",
    "resolve_setting",
    "build_run_config",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/report.yml")
ENV_PREFIX = "SHEET_REPORT_"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or invalid, or the data violates it
            (wrong types, unknown keys, empty strings).
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


def load_config(path: Path) -> FileConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    return FileConfig(
        template=data.get("template"),
        excel=data.get("excel"),
        output=data.get("output"),
    )


def resolve_setting(
    name: str,
    flag_value: str | None,
    file_config: FileConfig | None,
    environ: Mapping[str, str],
) -> str | None:
    """Pick the first non-empty value among flag, ``SHEET_REPORT_<NAME>`` env var and YAML."""
    if flag_value:
        return flag_value
    env_value = environ.get(ENV_PREFIX + name.upper(), "").strip()
    if env_value:
        return env_value
    if file_config is not None:
        return getattr(file_config, name)
    return None


def build_run_config(template: str | None, excel: str | None, output: str | None) -> RunConfig:
    """Freeze resolved values into a RunConfig, filling built-in defaults."""
    return RunConfig(
        template=Path(template or DEFAULT_TEMPLATE),
        excel=Path(excel or DEFAULT_EXCEL),
        output=output or DEFAULT_OUTPUT,
    )
