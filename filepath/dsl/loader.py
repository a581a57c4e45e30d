"""YAML loader + schema validation for path documents.

A document is a mapping with a single ``paths`` list. Each entry is either a
path string, parsed with ``filepath.model.parser.parse``, or a structural
mapping in the ``Path.to_dict()`` shape::

    paths:
      - /usr/local/bin/
      - notes.txt
      - directory: etc
        next:
          file: hosts
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict, List

import jsonschema
import yaml

from filepath.logging import get_logger
from filepath.model.parser import parse
from filepath.model.path import Path

logger = get_logger(__name__)

RECOGNIZED_KEYS = {"paths"}


def _load_schema() -> Dict[str, Any]:
    try:
        with (
            resources.files("filepath.schemas")
            .joinpath("paths.json")
            .open("r", encoding="utf-8")
        ) as f:
            return json.load(f)
    except (OSError, ValueError) as exc:  # pragma: no cover
        raise RuntimeError(
            "Failed to locate packaged schema 'filepath/schemas/paths.json'."
        ) from exc


def load_paths_yaml(yaml_str: str) -> List[Path]:
    """Load, validate, and convert a paths YAML document.

    Args:
        yaml_str: YAML text.

    Returns:
        Path values in document order. An empty document yields ``[]``.

    Raises:
        ValueError: If the document is not a mapping, has unrecognized
            top-level keys, ``paths`` is not a list, or an entry is cyclic
            or too deeply nested to validate.
        jsonschema.ValidationError: If an entry has the wrong shape.
        yaml.YAMLError: If the text is not valid YAML.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        return []
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    # Early shape checks give clearer messages than the schema
    extra = {str(k) for k in data.keys()} - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in document: {', '.join(sorted(extra))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )
    entries = data.get("paths")
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValueError("'paths' must be a list")

    try:
        jsonschema.validate(data, _load_schema())
    except RecursionError as exc:
        raise ValueError(
            "Paths document nests too deeply or refers to itself through a YAML alias"
        ) from exc

    paths: List[Path] = []
    for entry in entries:
        if isinstance(entry, str):
            paths.append(parse(entry))
        else:
            paths.append(Path.from_dict(entry))

    logger.debug("Loaded %d path(s) from YAML document", len(paths))
    return paths
