"""Turn classifier categories into the labels to apply."""

from collections.abc import Iterable, Mapping


def reconcile_labels(
    categories: Iterable[str],
    mapping: Mapping[str, str],
    available: set[str],
) -> set[str]:
    """Resolve categories to existing repository labels.

    Categories without a mapping entry are dropped, never used as literal
    label names. Labels that do not exist in ``available`` are dropped too,
    so the result is always a subset of ``available``.
    """
    labels = set()
    for category in categories:
        label = mapping.get(category)
        if label and label in available:
            labels.add(label)
    return labels
