"""GitHub API client for repository and comment operations."""

import os
import logging
from typing import Optional

from github import Auth, Github, GithubException
from github.NamedUser import NamedUser
from requests.exceptions import RequestException

from .models import RepositoryComment, PullRequestComment

logger = logging.getLogger(__name__)


class ClientInitError(Exception):
    """Raised when the GitHub client handle cannot be built."""


class GitHubClient:
    """Process-wide handle on an authenticated GitHub API client.

    Built once at startup and only read afterwards, so it can be shared by
    every request thread without locking.
    """

    DEFAULT_BASE_URL = "https://api.github.com"

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: int = 15,
        per_page: int = 30,
    ):
        """
        Initialize the client handle.

        Args:
            token: API token. Defaults to GITHUB_TOKEN env var.
            base_url: API root. Defaults to api.github.com.
            timeout: Request timeout in seconds.
            per_page: Page size used for list endpoints.

        Raises:
            ClientInitError: The token is missing or the client could not be built.
        """
        self.token = token if token is not None else os.environ.get("GITHUB_TOKEN", "")
        if not self.token:
            raise ClientInitError("Access token invalid. Set GITHUB_TOKEN environment variable.")

        self.base_url = base_url or self.DEFAULT_BASE_URL
        self.timeout = timeout
        self.per_page = per_page

        try:
            self._github = Github(
                auth=Auth.Token(self.token),
                base_url=self.base_url,
                timeout=timeout,
                per_page=per_page,
                retry=None,
            )
        except (AssertionError, TypeError, ValueError) as e:
            raise ClientInitError(f"Error creating GitHub client: {e}") from e

        if self._github is None:
            raise ClientInitError("Error creating GitHub client")

        # Raw REST access for endpoints PyGithub does not expose with all fields
        self._requester = self._github.requester
        logger.info(f"Initialized GitHub client for {self.base_url}")

    @property
    def github(self) -> Github:
        return self._github

    def count_repositories(self, owner: str) -> int:
        """Count the repositories listed for an owner.

        Only the first page of results is fetched.
        """
        logger.info(f"Listing repositories for {owner}")
        repos = self._github.get_user(owner).get_repos().get_page(0)
        count = len(repos)
        logger.debug(f"{owner} has {count} repositories on the first page")
        return count

    def get_user(self, login: str) -> NamedUser:
        """Resolve a GitHub user by login."""
        try:
            return self._github.get_user(login)
        except (GithubException, RequestException) as e:
            logger.error(f"Failed to resolve user {login}: {e}")
            raise

    def create_commit_comment(
        self, owner: str, repo: str, comment: RepositoryComment,
    ) -> dict:
        """Post a comment on a commit and return the created comment."""
        url = f"/repos/{owner}/{repo}/commits/{comment.commit_id}/comments"
        _, data = self._requester.requestJsonAndCheck(
            "POST", url, input=comment.to_payload(),
        )
        logger.info(f"Posted comment on {owner}/{repo}@{comment.commit_id}")
        return data

    def create_pull_comment(
        self, owner: str, repo: str, comment: PullRequestComment,
    ) -> dict:
        """Post a review comment on a pull request and return the created comment."""
        url = f"/repos/{owner}/{repo}/pulls/{comment.number}/comments"
        _, data = self._requester.requestJsonAndCheck(
            "POST", url, input=comment.to_payload(),
        )
        logger.info(
            f"Posted review comment on {owner}/{repo}#{comment.number} "
            f"at {comment.path}:{comment.position}"
        )
        return data

    def close(self) -> None:
        self._github.close()
