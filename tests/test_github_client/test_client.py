"""Tests for GitHub client."""

import os
from unittest.mock import MagicMock, Mock, patch

import pytest
from github.GithubException import GithubException, UnknownObjectException

from gh_labeler.github_client.client import GitHubClient
from gh_labeler.github_client.models import ItemKind


def _github_label(name: str) -> Mock:
    label = Mock()
    label.name = name
    return label


def _github_issue(
    number: int,
    title: str = "Title",
    body: str | None = "Body",
    labels: list[str] | None = None,
    is_pr: bool = False,
) -> Mock:
    issue = Mock()
    issue.number = number
    issue.title = title
    issue.body = body
    issue.labels = [_github_label(name) for name in labels or []]
    issue.pull_request = Mock() if is_pr else None
    return issue


class TestGitHubClient:
    """Test GitHubClient class."""

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"})
    def test_init_with_env_token(self) -> None:
        """Test initialization with environment token."""
        with patch("gh_labeler.github_client.client.Github") as mock_github:
            GitHubClient()
            mock_github.assert_called_once_with("test_token")

    def test_init_with_explicit_token(self) -> None:
        """Test initialization with explicit token."""
        with patch("gh_labeler.github_client.client.Github") as mock_github:
            GitHubClient(token="explicit_token")
            mock_github.assert_called_once_with("explicit_token")

    @patch.dict(os.environ, {}, clear=True)
    def test_init_without_token(self) -> None:
        """Test initialization without token raises error."""
        with pytest.raises(ValueError, match="GitHub token is required"):
            GitHubClient()

    @patch("gh_labeler.github_client.client.Github")
    def test_get_repository_not_found(self, mock_github_class: Mock) -> None:
        """Test repository not found error."""
        mock_github = Mock()
        mock_github.get_repo.side_effect = UnknownObjectException(
            404, "Not Found", None
        )
        mock_github_class.return_value = mock_github

        client = GitHubClient(token="test_token")

        with pytest.raises(ValueError, match="Repository testorg/testrepo not found"):
            client.get_repository("testorg", "testrepo")


class TestFetchOpenIssues:
    """Test listing of open issues and pull requests."""

    @pytest.fixture
    def mock_repo(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def client(self, mock_repo: MagicMock) -> GitHubClient:
        with patch("gh_labeler.github_client.client.Github") as mock_github_class:
            mock_github_class.return_value.get_repo.return_value = mock_repo
            return GitHubClient(token="test_token")

    def test_lists_open_items_newest_first(
        self, client: GitHubClient, mock_repo: MagicMock
    ) -> None:
        mock_repo.get_issues.return_value = [
            _github_issue(3, title="Newest"),
            _github_issue(2, title="Older", labels=["bug"], is_pr=True),
        ]

        items = client.fetch_open_issues("org", "repo", 10)

        mock_repo.get_issues.assert_called_once_with(
            state="open", sort="created", direction="desc"
        )
        assert [item.number for item in items] == [3, 2]
        assert items[0].kind == ItemKind.ISSUE
        assert items[1].kind == ItemKind.PULL_REQUEST
        assert items[1].labels == frozenset({"bug"})

    def test_respects_limit(self, client: GitHubClient, mock_repo: MagicMock) -> None:
        mock_repo.get_issues.return_value = [_github_issue(n) for n in range(5, 0, -1)]

        items = client.fetch_open_issues("org", "repo", 2)

        assert [item.number for item in items] == [5, 4]

    def test_zero_limit_skips_api(
        self, client: GitHubClient, mock_repo: MagicMock
    ) -> None:
        assert client.fetch_open_issues("org", "repo", 0) == []
        mock_repo.get_issues.assert_not_called()

    def test_missing_body_is_kept_as_none(
        self, client: GitHubClient, mock_repo: MagicMock
    ) -> None:
        mock_repo.get_issues.return_value = [_github_issue(1, body=None)]

        items = client.fetch_open_issues("org", "repo", 5)

        assert items[0].body is None
        assert items[0].content() == "Title: Title\n\nDescription: "


class TestLabels:
    """Test label listing and application."""

    @pytest.fixture
    def mock_repo(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def client(self, mock_repo: MagicMock) -> GitHubClient:
        with patch("gh_labeler.github_client.client.Github") as mock_github_class:
            mock_github_class.return_value.get_repo.return_value = mock_repo
            return GitHubClient(token="test_token")

    def test_fetch_available_labels(
        self, client: GitHubClient, mock_repo: MagicMock
    ) -> None:
        mock_repo.get_labels.return_value = [
            _github_label("type:bug"),
            _github_label("type:docs"),
        ]

        assert client.fetch_available_labels("org", "repo") == {
            "type:bug",
            "type:docs",
        }

    def test_add_labels(self, client: GitHubClient, mock_repo: MagicMock) -> None:
        mock_issue = MagicMock()
        mock_repo.get_issue.return_value = mock_issue

        client.add_labels("org", "repo", 42, {"type:docs", "type:bug"})

        mock_repo.get_issue.assert_called_once_with(42)
        mock_issue.add_to_labels.assert_called_once_with("type:bug", "type:docs")

    def test_repository_fetched_once_per_run(
        self, client: GitHubClient, mock_repo: MagicMock
    ) -> None:
        mock_repo.get_labels.return_value = [_github_label("type:bug")]
        mock_repo.get_issues.return_value = []

        client.fetch_open_issues("org", "repo", 10)
        client.fetch_available_labels("org", "repo")
        for number in (1, 2, 3):
            client.add_labels("org", "repo", number, {"type:bug"})

        get_repo = client.github.get_repo
        get_repo.assert_called_once_with("org/repo")  # type: ignore[attr-defined]
        assert mock_repo.get_issue.call_count == 3

    def test_add_labels_issue_not_found(
        self, client: GitHubClient, mock_repo: MagicMock
    ) -> None:
        mock_repo.get_issue.side_effect = UnknownObjectException(404, "Not Found", {})

        with pytest.raises(ValueError, match="Issue #42 not found"):
            client.add_labels("org", "repo", 42, {"type:bug"})

    def test_add_labels_rejection_propagates(
        self, client: GitHubClient, mock_repo: MagicMock
    ) -> None:
        mock_issue = MagicMock()
        mock_issue.add_to_labels.side_effect = GithubException(
            403, "Resource not accessible", {}
        )
        mock_repo.get_issue.return_value = mock_issue

        with pytest.raises(GithubException):
            client.add_labels("org", "repo", 42, {"type:bug"})
