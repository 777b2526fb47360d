"""GitHub webhook routes."""

from fastapi import APIRouter, BackgroundTasks, Request
from loguru import logger
from pydantic import ValidationError

from src.config import settings
from src.core.security import require_github_signature
from src.services.github.schemas import Event, OtherEvent, PingResponse, WebhookResponse, parse_event
from src.services.reviewer.service import handle_event

router = APIRouter()

HANDLED_EVENTS = ("pull_request", "issue_comment")


@router.post("/webhook/github")
async def github_webhook(request: Request, background_tasks: BackgroundTasks):
    """Handle GitHub webhook events."""
    event_name = request.headers.get("X-GitHub-Event")
    signature = request.headers.get("X-Hub-Signature-256", "")
    delivery_id = request.headers.get("X-GitHub-Delivery")

    logger.info(f"Webhook received: event={event_name}, delivery={delivery_id}")

    body = await request.body()
    require_github_signature(body, signature)

    payload = await request.json()

    if event_name == "ping":
        return PingResponse(zen=payload.get("zen", ""))

    if event_name not in HANDLED_EVENTS:
        logger.info(f"Unhandled event type: {event_name}")
        return WebhookResponse(message=f"Event {event_name} not handled")

    repository = payload.get("repository") or {}
    owner = (repository.get("owner") or {}).get("login")
    repo = repository.get("name")
    if (owner, repo) != (settings.github_owner, settings.github_repo):
        logger.info(f"Ignoring delivery for {owner}/{repo}")
        return WebhookResponse(message=f"Repository {owner}/{repo} not handled")

    try:
        event = parse_event(event_name, payload)
    except ValidationError as e:
        logger.warning(f"Malformed {event_name} payload: {e}")
        return WebhookResponse(message=f"Event {event_name} payload not handled")
    if isinstance(event, OtherEvent):
        return WebhookResponse(message=f"Event {event_name} payload not handled")

    number = getattr(event, "pull_number", None) or getattr(event, "issue_number", None)
    background_tasks.add_task(run_review, event, owner, repo)

    return WebhookResponse(
        message="Event accepted",
        pr=f"{owner}/{repo}#{number}",
        action=event.action,
    )


async def run_review(event: Event, owner: str, repo: str) -> None:
    """Run the review in background."""
    try:
        result = await handle_event(event, settings, owner, repo)
        if result:
            logger.info(f"Review completed: {result}")
    except Exception as e:
        logger.error(f"Review failed: {e}")
