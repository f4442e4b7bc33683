"""Label mapping and reconciliation."""

from .mapping import find_missing_labels, load_label_mapping, parse_label_mapping
from .reconciler import reconcile_labels

__all__ = [
    "parse_label_mapping",
    "load_label_mapping",
    "find_missing_labels",
    "reconcile_labels",
]
