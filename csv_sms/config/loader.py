from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..errors import ConfigError
from ..models.config_models import DEFAULT_MAX_WORKERS, SendSettings, StripMode

"""Settings loader.

Responsibilities:
- Load the optional YAML settings file (``config/sms.yml`` by default)
- Validate it against ``settings_schema.json``
- Apply defaults for every missing key

Credentials are never read from this file; they arrive as CLI arguments or
from the environment.
"""

__all__ = [
    "ConfigError",
    "DEFAULT_SETTINGS_PATH",
    "SCHEMA_PATH",
    "load_settings",
]

SCHEMA_PATH = Path(__file__).parent / "settings_schema.json"
DEFAULT_SETTINGS_PATH = Path("config/sms.yml")


def _validate_settings_schema(data: dict[str, Any]) -> None:
    """Validate settings data against the JSON schema.

    Raises:
        ConfigError: schema file missing or invalid, or data violates it
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"settings schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"settings validation failed: {e.message}") from e


def load_settings(path: Path | None = None) -> SendSettings:
    """Load settings from ``path``, or from the default location if present.

    An explicit path must exist. Without one, a missing default file simply
    yields the built-in defaults.
    """
    if path is None:
        if not DEFAULT_SETTINGS_PATH.exists():
            return SendSettings()
        path = DEFAULT_SETTINGS_PATH
    elif not path.exists():
        raise ConfigError(f"config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"settings root must be a mapping, got {type(data).__name__}")

    _validate_settings_schema(data)

    dispatch = data.get("dispatch", {})
    normalize = data.get("normalize", {})
    column = data.get("column", {})
    return SendSettings(
        max_workers=dispatch.get("max_workers", DEFAULT_MAX_WORKERS),
        strip_mode=StripMode(normalize.get("strip", StripMode.FIRST.value)),
        strict_column=column.get("strict", False),
    )
