"""Pydantic models for GitHub data structures.

These models map onto GitHub's REST API issue objects. Pull requests are
returned by the issues endpoint too and are distinguished by ``kind``.
API Reference: https://docs.github.com/en/rest/issues
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ItemKind(str, Enum):
    """Kind of an item returned by the issues listing."""

    ISSUE = "Issue"
    PULL_REQUEST = "Pull Request"


class GitHubItem(BaseModel):
    """Snapshot of an open issue or pull request.

    Maps to GitHub REST API Issue object, reduced to the fields needed
    for classification. Instances are immutable for the duration of a run.
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    body: str | None = Field(
        None, description="Detailed description of the issue in markdown (string)"
    )
    kind: ItemKind = Field(
        ItemKind.ISSUE, description="Whether the item is an issue or a pull request"
    )
    labels: frozenset[str] = Field(
        default_factory=frozenset, description="Names of labels already applied"
    )

    @property
    def is_labeled(self) -> bool:
        """True when the item carries at least one label."""
        return len(self.labels) > 0

    def content(self) -> str:
        """Text sent to the classifier."""
        return f"Title: {self.title}\n\nDescription: {self.body or ''}"
