"""Parsing and validation of the category to label mapping."""

import json
from collections.abc import Mapping
from pathlib import Path


def parse_label_mapping(mapping_string: str | None) -> dict[str, str]:
    """Parse a JSON object of category names to label names.

    Args:
        mapping_string: JSON text, e.g. '{"bug": "type:bug"}'

    Returns:
        Mapping from category to label name

    Raises:
        ValueError: If the text is not a JSON object of strings
    """
    if mapping_string is None or not mapping_string.strip():
        raise ValueError("Invalid label mapping JSON: mapping is empty")

    try:
        data = json.loads(mapping_string)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid label mapping JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(
            f"Invalid label mapping JSON: expected an object, got {type(data).__name__}"
        )

    for category, label in data.items():
        if not isinstance(label, str) or not label:
            raise ValueError(
                f"Invalid label mapping JSON: label for category '{category}' "
                "must be a non-empty string"
            )

    return dict(data)


def load_label_mapping(path: Path) -> dict[str, str]:
    """Read and parse a label mapping file."""
    if not path.exists():
        raise ValueError(f"Label mapping file {path} does not exist")
    if not path.is_file():
        raise ValueError(f"Label mapping file {path} is not a file")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Could not read label mapping file {path}: {e}") from e
    return parse_label_mapping(text)


def find_missing_labels(
    mapping: Mapping[str, str], available: set[str]
) -> dict[str, str]:
    """Return mapping entries whose label does not exist in the repository."""
    return {
        category: label
        for category, label in mapping.items()
        if label not in available
    }
