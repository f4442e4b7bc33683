"""GitHub API client using PyGitHub."""

import logging
import os
from collections.abc import Iterable

from github import Github
from github.GithubException import UnknownObjectException
from github.Issue import Issue
from github.Repository import Repository

from .models import GitHubItem, ItemKind

logger = logging.getLogger(__name__)


class GitHubClient:
    """GitHub API client for listing items and applying labels."""

    def __init__(self, token: str | None = None, log: logging.Logger | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
            log: Logger used for progress messages.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(self.token)
        self.log = log or logger
        self._repositories: dict[str, Repository] = {}

    def _convert_issue(self, github_issue: Issue) -> GitHubItem:
        """Convert PyGitHub issue to our model."""
        kind = (
            ItemKind.PULL_REQUEST
            if github_issue.pull_request is not None
            else ItemKind.ISSUE
        )
        return GitHubItem(
            number=github_issue.number,
            title=github_issue.title,
            body=github_issue.body,
            kind=kind,
            labels=frozenset(label.name for label in github_issue.labels),
        )

    def get_repository(self, org: str, repo: str) -> Repository:
        """Get repository object, fetched once per client."""
        full_name = f"{org}/{repo}"
        if full_name not in self._repositories:
            try:
                self._repositories[full_name] = self.github.get_repo(full_name)
            except UnknownObjectException:
                raise ValueError(f"Repository {full_name} not found")
        return self._repositories[full_name]

    def fetch_open_issues(self, org: str, repo: str, limit: int) -> list[GitHubItem]:
        """List open issues and pull requests, newest first.

        Args:
            org: Organization or user name
            repo: Repository name
            limit: Maximum number of items to return

        Returns:
            List of GitHubItem objects
        """
        if limit <= 0:
            return []

        repository = self.get_repository(org, repo)
        issues: Iterable[Issue] = repository.get_issues(
            state="open", sort="created", direction="desc"
        )

        items = []
        for github_issue in issues:
            if len(items) >= limit:
                break
            items.append(self._convert_issue(github_issue))

        self.log.info("Found %d open issues/PRs to process", len(items))
        return items

    def fetch_available_labels(self, org: str, repo: str) -> set[str]:
        """Return the names of all labels defined in the repository."""
        repository = self.get_repository(org, repo)
        labels = {label.name for label in repository.get_labels()}
        self.log.info("Repository has %d available labels", len(labels))
        return labels

    def add_labels(
        self, org: str, repo: str, issue_number: int, labels: Iterable[str]
    ) -> None:
        """Add labels to an issue or pull request, keeping existing ones.

        Args:
            org: Organization name
            repo: Repository name
            issue_number: Issue number
            labels: Label names to add

        Raises:
            ValueError: If repository or issue not found
            GithubException: For other API errors
        """
        repository = self.get_repository(org, repo)
        try:
            github_issue = repository.get_issue(issue_number)
        except UnknownObjectException:
            raise ValueError(f"Issue #{issue_number} not found in {org}/{repo}")

        github_issue.add_to_labels(*sorted(labels))
