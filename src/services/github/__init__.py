"""GitHub service."""

from src.services.github.service import (
    get_comments,
    get_pr_files,
    get_raw_file,
    post_comment,
    resolve_commit_sha,
    update_comment,
)

__all__ = [
    "get_comments",
    "get_pr_files",
    "get_raw_file",
    "post_comment",
    "resolve_commit_sha",
    "update_comment",
]
