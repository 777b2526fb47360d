"""GitHub service - business logic layer."""

from typing import Optional
from urllib.parse import parse_qs, urlparse

from src.core.logging import get_logger
from src.services.github import client
from src.services.github.schemas import ChangedFile, IssueCommentInfo

logger = get_logger("github.service")

SHA_LENGTH = 40


def get_comments(owner: str, repo: str, number: int) -> list[IssueCommentInfo]:
    """Get all comments on a pull request."""
    comments = client.list_issue_comments(owner, repo, number)
    logger.debug(f"Found {len(comments)} comments on {owner}/{repo}#{number}")
    return comments


def post_comment(owner: str, repo: str, number: int, body: str) -> int:
    """Post a new comment on a pull request."""
    logger.info(f"Posting comment on {owner}/{repo}#{number}")
    return client.create_issue_comment(owner, repo, number, body)


def update_comment(owner: str, repo: str, number: int, comment_id: int, body: str) -> None:
    """Overwrite the body of a comment."""
    logger.info(f"Updating comment {comment_id} on {owner}/{repo}#{number}")
    client.update_issue_comment(owner, repo, number, comment_id, body)


def get_pr_files(owner: str, repo: str, number: int) -> list[ChangedFile]:
    """Get changed files from a PR."""
    files = client.fetch_pr_files(owner, repo, number)
    logger.info(f"Found {len(files)} files in PR")
    return files


def get_raw_file(owner: str, repo: str, sha: str, filename: str) -> str:
    """Get file text at the given commit."""
    logger.debug(f"Fetching raw file: {owner}/{repo}/{sha}/{filename}")
    return client.fetch_raw_file(owner, repo, sha, filename)


def resolve_commit_sha(changed_file: ChangedFile) -> Optional[str]:
    """Commit to read a changed file at.

    The PR head SHA when known, otherwise the ``ref`` query value of the
    contents URL (``.../contents/foo.py?ref=<sha>``). None when the URL has
    no ``ref`` or it is too short to be a commit SHA.
    """
    if changed_file.head_sha:
        return changed_file.head_sha
    refs = parse_qs(urlparse(changed_file.contents_url).query).get("ref")
    if not refs or len(refs[0]) < SHA_LENGTH:
        return None
    return refs[0][-SHA_LENGTH:]
