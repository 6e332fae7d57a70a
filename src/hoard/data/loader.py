from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from jsonschema import Draft202012Validator

from hoard.exceptions import CatalogError

logger = logging.getLogger(__name__)

_PKG = "hoard.data"


@lru_cache(maxsize=None)
def load_schema(name: str) -> Dict[str, Any]:
    """Load a bundled JSON schema by name (filename without ``.schema.json``)."""
    entry = resources.files(_PKG).joinpath("schemas").joinpath(f"{name}.schema.json")
    with entry.open("r", encoding="utf-8") as fh:
        schema = json.load(fh)
    logger.debug("Loaded schema '%s'", name)
    return schema


def validate(data: Any, schema_name: str, source: str = "<data>") -> None:
    """
    Validate ``data`` against a bundled schema.

    Raises:
        CatalogError carrying every validation error, each of which is logged.
    """
    validator = Draft202012Validator(load_schema(schema_name))
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        for err in errors:
            logger.error("Schema '%s' validation error in %s at %s: %s",
                         schema_name, source, list(err.path), err.message)
        raise CatalogError(f"{source} does not match schema '{schema_name}'", errors)


def _parse_yaml(text: str, source: str) -> Any:
    try:
        return yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise CatalogError(f"Failed to parse YAML in {source}: {e}") from e


def load_resource(filename: str, schema_name: Optional[str] = None) -> Dict[str, Any]:
    """Load (and optionally validate) a YAML file shipped inside the package."""
    text = resources.files(_PKG).joinpath(filename).read_text(encoding="utf-8")
    data = _parse_yaml(text, filename)
    if schema_name is not None:
        validate(data, schema_name, source=filename)
    logger.info("Loaded packaged data file %s", filename)
    return data


def load_file(path: Path, schema_name: Optional[str] = None) -> Dict[str, Any]:
    """Load (and optionally validate) a YAML file from disk."""
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"Data file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        data = _parse_yaml(fh.read(), str(path))
    if schema_name is not None:
        validate(data, schema_name, source=str(path))
    logger.info("Loaded data file %s", path)
    return data


__all__ = ["load_schema", "validate", "load_resource", "load_file"]
