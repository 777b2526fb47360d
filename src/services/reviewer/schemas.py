"""Pydantic schemas for reviewer service."""

from pydantic import BaseModel


class ReviewRequest(BaseModel):
    """A webhook delivery that should produce a review."""

    pull_number: int
    title: str = ""
    new_commit: bool = False


class ReviewResult(BaseModel):
    """Result of one review run."""

    pr: str
    comment_id: int
    files_reviewed: int
    published: bool
