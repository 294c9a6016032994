"""Logic for loading documentation.js JSON output."""

import json
from pathlib import Path

from apidata.configuration_error import ConfigurationError
from apidata.doc_entity import DocEntity


def load_doc_entities(path: Path) -> list[DocEntity]:
    """Load the top-level documented entities from a documentation.js JSON file.

    A single object is accepted as a one-entity list.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        msg = f"Documentation JSON not found: {path}"
        raise ConfigurationError(msg) from e
    except json.JSONDecodeError as e:
        msg = f"Invalid documentation JSON {path}: {e}"
        raise ConfigurationError(msg) from e

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        msg = f"Documentation JSON {path} must be an array of entities"
        raise ConfigurationError(msg)
    return [DocEntity.from_dict(raw) for raw in data if isinstance(raw, dict)]
