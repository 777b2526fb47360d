"""GitHub API client - data layer."""

from typing import Optional

import requests
from github import Auth, Github, GithubIntegration
from github.Repository import Repository
from loguru import logger

from src.config import settings
from src.core.exceptions import ExternalServiceError
from src.services.github.schemas import ChangedFile, IssueCommentInfo

RAW_CONTENT_BASE_URL = "https://raw.githubusercontent.com"
USER_AGENT = "PR Review Bot"

_github_client: Optional[Github] = None


def get_github_client() -> Github:
    """Get authenticated GitHub client using a token or App installation."""
    global _github_client

    if _github_client:
        return _github_client

    if settings.github_token:
        _github_client = Github(auth=Auth.Token(settings.github_token))
        logger.info("GitHub token client initialized")
        return _github_client

    if not all([settings.github_app_id, settings.github_private_key, settings.github_installation_id]):
        raise ValueError("GitHub credentials not configured")

    private_key = settings.github_private_key.replace("\\n", "\n")

    integration = GithubIntegration(
        auth=Auth.AppAuth(int(settings.github_app_id), private_key),
    )

    access_token = integration.get_access_token(int(settings.github_installation_id)).token
    _github_client = Github(auth=Auth.Token(access_token))

    logger.info("GitHub App client initialized")
    return _github_client


def _get_repo(owner: str, repo: str) -> Repository:
    return get_github_client().get_repo(f"{owner}/{repo}")


def list_issue_comments(owner: str, repo: str, number: int) -> list[IssueCommentInfo]:
    """List all comments on an issue or pull request."""
    issue = _get_repo(owner, repo).get_issue(number)
    return [IssueCommentInfo(id=c.id, body=c.body or "") for c in issue.get_comments()]


def create_issue_comment(owner: str, repo: str, number: int, body: str) -> int:
    """Create a comment on an issue or pull request and return its id."""
    issue = _get_repo(owner, repo).get_issue(number)
    comment = issue.create_comment(body)
    logger.info(f"Created comment {comment.id} on {owner}/{repo}#{number}")
    return comment.id


def update_issue_comment(owner: str, repo: str, number: int, comment_id: int, body: str) -> None:
    """Replace the body of an existing comment."""
    issue = _get_repo(owner, repo).get_issue(number)
    issue.get_comment(comment_id).edit(body)
    logger.info(f"Updated comment {comment_id} on {owner}/{repo}#{number}")


def fetch_pr_files(owner: str, repo: str, number: int) -> list[ChangedFile]:
    """Fetch changed files from a PR."""
    pr = _get_repo(owner, repo).get_pull(number)
    head_sha = pr.head.sha if pr.head else None
    files = []
    for f in pr.get_files():
        files.append(ChangedFile(
            filename=f.filename,
            blob_url=f.blob_url or "",
            contents_url=f.contents_url or "",
            patch=f.patch or "",
            head_sha=head_sha,
        ))
    return files


def fetch_raw_file(owner: str, repo: str, sha: str, filename: str) -> str:
    """Fetch file text at a commit from raw.githubusercontent.com."""
    url = f"{RAW_CONTENT_BASE_URL}/{owner}/{repo}/{sha}/{filename}"
    try:
        response = requests.get(
            url,
            headers={"Accept": "plain/text", "User-Agent": USER_AGENT},
            timeout=settings.raw_fetch_timeout,
        )
        response.raise_for_status()
    except requests.RequestException as e:
        raise ExternalServiceError("raw.githubusercontent.com", str(e)) from e
    return response.content.decode("utf-8", errors="replace")
