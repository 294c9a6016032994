"""Logic for loading the generator configuration and the project manifest."""

import json
from pathlib import Path
from typing import Any

import yaml

from apidata.configuration_error import ConfigurationError

DEFAULT_CONFIG: dict[str, Any] = {
    "fileLink": {},
    "outputDir": "src/data/apiPage",
    "exampleLanguage": "javascript",
}

# Keys whose user value replaces the default as a whole instead of merging.
REPLACED_KEYS = {"fileLink"}


def merge_config(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge ``update`` over ``base``.

    - Nested mappings are merged recursively.
    - ``fileLink`` is taken as a whole so a partial override never mixes
      with the defaults.
    - Everything else is replaced.
    """
    result = base.copy()
    for key, value in update.items():
        if (
            key not in REPLACED_KEYS
            and isinstance(result.get(key), dict)
            and isinstance(value, dict)
        ):
            result[key] = merge_config(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load the generator config (YAML or JSON) and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                msg = f"Invalid generator config {p}: {e}"
                raise ConfigurationError(msg) from e
            if not isinstance(user_config, dict):
                msg = f"Generator config {p} must be a mapping"
                raise ConfigurationError(msg)
            config = merge_config(config, user_config)
    return config


def load_manifest(path: str | Path) -> dict[str, Any]:
    """Load the project's ``package.json``."""
    p = Path(path)
    try:
        manifest = json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        msg = f"Project manifest not found: {p}"
        raise ConfigurationError(msg) from e
    except json.JSONDecodeError as e:
        msg = f"Invalid project manifest {p}: {e}"
        raise ConfigurationError(msg) from e
    if not isinstance(manifest, dict):
        msg = f"Project manifest {p} must be a JSON object"
        raise ConfigurationError(msg)
    return manifest
