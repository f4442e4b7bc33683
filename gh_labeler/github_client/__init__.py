"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import GitHubItem, ItemKind

__all__ = [
    "GitHubClient",
    "GitHubItem",
    "ItemKind",
]
