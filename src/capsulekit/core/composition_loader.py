"""Composition loader.

Reads an editor-exported composition JSON file into an AppComposition.
Both the tree form (``root``) and the flat form (``capsules`` whose
entries carry ``type``) are accepted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import CompositionError
from .ir import AppComposition

logger = logging.getLogger(__name__)


def parse_composition(data: Any, source: str = "<data>") -> AppComposition:
    """
    Validate already-decoded JSON data as an AppComposition.

    Raises:
        CompositionError: If the data does not describe a valid composition
    """
    try:
        return AppComposition.model_validate(data)
    except ValidationError as e:
        raise CompositionError(f"Invalid composition in {source}: {e}") from e


def load_composition(path: Path) -> AppComposition:
    """
    Load a composition from a JSON file.

    Args:
        path: Path to the composition JSON file

    Returns:
        Validated AppComposition

    Raises:
        CompositionError: If the file is missing, unreadable, not JSON,
            or not a valid composition
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CompositionError(f"Cannot read composition file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CompositionError(f"Malformed JSON in {path}: {e}") from e

    composition = parse_composition(data, source=str(path))
    logger.debug(
        "Loaded composition '%s' from %s (%d top-level capsules)",
        composition.name,
        path,
        len(composition.top_level_instances()),
    )
    return composition
