"""Data models for outbound GitHub comments."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class RepositoryComment:
    """A comment attached to a single commit."""
    commit_id: str
    body: str
    position: int = 1
    user: Optional[Any] = None  # resolved NamedUser

    @property
    def author(self) -> Optional[str]:
        return getattr(self.user, "login", None)

    def to_payload(self) -> dict:
        """Build the request body for the commit comments endpoint."""
        return {
            "body": self.body,
            "position": self.position,
        }


@dataclass
class PullRequestComment:
    """A review comment on a file position within a pull request diff."""
    number: int
    commit_id: str
    path: str
    position: int
    body: str
    user: Optional[Any] = None

    @property
    def author(self) -> Optional[str]:
        return getattr(self.user, "login", None)

    def to_payload(self) -> dict:
        """Build the request body for the pull request comments endpoint."""
        return {
            "body": self.body,
            "commit_id": self.commit_id,
            "path": self.path,
            "position": self.position,
        }
