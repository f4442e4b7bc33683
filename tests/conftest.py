"""Test configuration and fixtures."""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from gh_labeler.github_client.models import GitHubItem, ItemKind


@pytest.fixture
def make_item() -> Callable[..., GitHubItem]:
    """Factory for item snapshots."""

    def _make(
        number: int = 1,
        title: str = "Crash on startup",
        body: str | None = "App throws NPE",
        kind: ItemKind = ItemKind.ISSUE,
        labels: frozenset[str] = frozenset(),
    ) -> GitHubItem:
        return GitHubItem(
            number=number, title=title, body=body, kind=kind, labels=labels
        )

    return _make


@pytest.fixture
def mock_log() -> MagicMock:
    """Logger stand-in for asserting warnings."""
    return MagicMock()
