"""Pydantic schemas for GitHub service."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class PullRequestEvent(BaseModel):
    """A pull_request webhook delivery."""

    kind: Literal["pull_request"] = "pull_request"
    action: str
    pull_number: int
    title: str = ""


class IssueCommentEvent(BaseModel):
    """An issue_comment webhook delivery."""

    kind: Literal["issue_comment"] = "issue_comment"
    action: str
    issue_number: int
    title: str = ""
    comment_body: str = ""


class OtherEvent(BaseModel):
    """Any delivery the bot does not react to."""

    kind: Literal["other"] = "other"
    name: Optional[str] = None


Event = Annotated[
    Union[PullRequestEvent, IssueCommentEvent, OtherEvent],
    Field(discriminator="kind"),
]


def parse_event(event_name: Optional[str], payload: dict) -> Event:
    """Build an Event from the X-GitHub-Event header and JSON payload."""
    action = payload.get("action") or ""

    if event_name == "pull_request" and payload.get("pull_request"):
        pr = payload["pull_request"]
        return PullRequestEvent(
            action=action,
            pull_number=pr.get("number"),
            title=pr.get("title") or "",
        )

    if event_name == "issue_comment" and payload.get("issue"):
        issue = payload["issue"]
        comment = payload.get("comment") or {}
        return IssueCommentEvent(
            action=action,
            issue_number=issue.get("number"),
            title=issue.get("title") or "",
            comment_body=comment.get("body") or "",
        )

    return OtherEvent(name=event_name)


class ChangedFile(BaseModel):
    """A file changed in a pull request."""

    filename: str
    blob_url: str = ""
    contents_url: str = ""
    patch: str = ""
    head_sha: Optional[str] = None


class IssueCommentInfo(BaseModel):
    """The parts of an issue comment the bot looks at."""

    id: int
    body: str = ""


class WebhookResponse(BaseModel):
    """Response schema for webhook events."""

    message: str
    pr: str | None = None
    action: str | None = None


class PingResponse(BaseModel):
    """Response schema for GitHub ping event."""

    message: str = "pong"
    zen: str = ""
