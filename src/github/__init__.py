"""GitHub API integration."""

from .client import ClientInitError, GitHubClient
from .models import PullRequestComment, RepositoryComment

__all__ = ["ClientInitError", "GitHubClient", "PullRequestComment", "RepositoryComment"]
