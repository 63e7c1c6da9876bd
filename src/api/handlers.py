"""Route handlers for the repository and comment endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.github.client import GitHubClient
from src.github.models import PullRequestComment, RepositoryComment
from .errors import JSON_MEDIA_TYPE, REMOTE_ERRORS, write_error

logger = logging.getLogger(__name__)

DEFAULT_COMMIT_MESSAGE = "Commit message... replace me with message taken from request body."
DEFAULT_PULL_MESSAGE = "hard coded comment message"

router = APIRouter()


def get_client(request: Request) -> GitHubClient:
    return request.app.state.github_client


def propagate_comment_errors(request: Request) -> bool:
    return request.app.state.propagate_comment_errors


def commenter_login(owner: str) -> str:
    """Login that comments are attributed to.

    The repository owner from the path doubles as the commenting identity;
    nothing checks it against the caller.
    """
    return owner


@router.get("/{owner}/repos/count")
def repository_count(owner: str, client: GitHubClient = Depends(get_client)):
    """Return the number of repositories on the owner's first listing page."""
    try:
        count = client.count_repositories(owner)
    except REMOTE_ERRORS as e:
        return write_error(e)

    return JSONResponse(content=count, media_type=JSON_MEDIA_TYPE)


@router.post("/{owner}/repos/{repo}/{commit}/comment")
def commit_comment(
    owner: str,
    repo: str,
    commit: str,
    client: GitHubClient = Depends(get_client),
    propagate: bool = Depends(propagate_comment_errors),
):
    """Post the default comment on a commit."""
    try:
        user = client.get_user(commenter_login(owner))
    except REMOTE_ERRORS as e:
        return write_error(e)

    comment = RepositoryComment(
        commit_id=commit,
        body=DEFAULT_COMMIT_MESSAGE,
        position=1,
        user=user,
    )

    try:
        client.create_commit_comment(owner, repo, comment)
    except REMOTE_ERRORS as e:
        logger.error(f"Failed to comment on {owner}/{repo}@{commit}: {e}")
        if propagate:
            return write_error(e)

    return Response(status_code=status.HTTP_200_OK)


@router.post("/{owner}/pulls/{number:int}/{commit}/{path:path}/{position:int}/comment")
def pull_comment(
    owner: str,
    number: int,
    commit: str,
    path: str,
    position: int,
    repo: str = Query(default=""),
    client: GitHubClient = Depends(get_client),
    propagate: bool = Depends(propagate_comment_errors),
):
    """Post the default review comment on a pull request file position.

    The route has no repository segment, so the repository name is taken
    from the optional ``repo`` query parameter and is empty when omitted.
    """
    try:
        user = client.get_user(commenter_login(owner))
    except REMOTE_ERRORS as e:
        return write_error(e)

    comment = PullRequestComment(
        number=number,
        commit_id=commit,
        path=path,
        position=position,
        body=DEFAULT_PULL_MESSAGE,
        user=user,
    )

    try:
        created = client.create_pull_comment(owner, repo, comment)
    except REMOTE_ERRORS as e:
        logger.error(f"Failed to comment on {owner}/{repo}#{number}: {e}")
        if propagate:
            return write_error(e)
    else:
        logger.info(f"Created pull request comment: {created}")

    return Response(status_code=status.HTTP_200_OK)
