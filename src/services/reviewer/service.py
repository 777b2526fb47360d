"""Reviewer service - orchestration layer."""

from typing import Optional

from src.config import Settings
from src.core.llm import ChatOptions, chat_completion, end_conversation
from src.core.logging import get_logger
from src.core.prompts import PromptFormatError, format_prompt
from src.core.triggers import (
    BOT_GREETING,
    REVIEWS_HEADER,
    WAITING_PLACEHOLDER,
    contains_trigger_phrase,
    is_bot_comment,
)
from src.core.utils import truncate
from src.services.github.schemas import ChangedFile, Event, IssueCommentEvent, PullRequestEvent
from src.services.github.service import (
    get_comments,
    get_pr_files,
    get_raw_file,
    post_comment,
    resolve_commit_sha,
    update_comment,
)
from src.services.reviewer.schemas import ReviewRequest, ReviewResult

logger = get_logger("reviewer.service")


def classify_event(event: Event, settings: Settings) -> Optional[ReviewRequest]:
    """Decide whether a delivery should trigger a review."""
    if isinstance(event, PullRequestEvent):
        if event.action == "opened":
            logger.debug("Received payload: PR opened")
            return ReviewRequest(pull_number=event.pull_number, title=event.title)
        if event.action == "synchronize":
            logger.debug("Received payload: PR synchronized")
            return ReviewRequest(
                pull_number=event.pull_number, title=event.title, new_commit=True
            )
        logger.debug(f"Ignoring pull_request action: {event.action}")
        return None

    if isinstance(event, IssueCommentEvent):
        if event.action == "deleted":
            logger.debug("Ignoring deleted issue comment")
            return None
        if is_bot_comment(event.comment_body):
            logger.info("Ignoring comment posted by the bot")
            return None
        if not contains_trigger_phrase(event.comment_body, settings.trigger_phrase):
            logger.info("Ignoring comment without the trigger phrase")
            return None
        return ReviewRequest(pull_number=event.issue_number, title=event.title)

    return None


def _render(template: str, values: dict[str, str]) -> str:
    try:
        return format_prompt(template, values)
    except PromptFormatError as e:
        logger.warning(f"Failed to render prompt: {e}")
        return ""


def build_system_prompt(settings: Settings, subject: str) -> str:
    """System prompt for a PR, with the output-language instruction if set."""
    system = _render(settings.prompt_system, {"subject": subject})
    if settings.output_language:
        translation = _render(settings.prompt_translation, {"language": settings.output_language})
        if translation:
            system = f"{system}\n\n{translation}" if system else translation
    return system


def acquire_tracking_comment(
    owner: str, repo: str, request: ReviewRequest
) -> Optional[int]:
    """Find the bot's comment on a new commit, or post a fresh one."""
    number = request.pull_number
    if request.new_commit:
        try:
            comments = get_comments(owner, repo, number)
        except Exception as e:
            logger.error(f"Error getting comments: {e}")
            return None
        for comment in comments:
            if is_bot_comment(comment.body):
                return comment.id
        logger.error(f"No bot comment found on {owner}/{repo}#{number}")
        return None

    try:
        return post_comment(owner, repo, number, f"{BOT_GREETING}{WAITING_PLACEHOLDER}")
    except Exception as e:
        logger.error(f"Error posting comment: {e}")
        return None


async def review_file(
    owner: str,
    repo: str,
    changed_file: ChangedFile,
    chat_id: str,
    system_prompt: str,
    settings: Settings,
) -> Optional[str]:
    """Review one changed file; None when the file is skipped."""
    filename = changed_file.filename

    sha = resolve_commit_sha(changed_file)
    if not sha:
        logger.warning(f"Cannot resolve commit for {filename}")
        return None

    try:
        file_text = get_raw_file(owner, repo, sha, filename)
    except Exception as e:
        logger.error(f"Cannot get file {filename}: {e}")
        return None

    limit = settings.char_soft_limit
    section = f"## [{filename}]({changed_file.blob_url})\n\n"

    logger.debug(f"Sending file to OpenAI: {filename}")
    question = _render(settings.prompt_review_code, {"code_message": truncate(file_text, limit)})
    options = ChatOptions(model=settings.model, restart=True, system_prompt=system_prompt)
    try:
        reply = await chat_completion(chat_id, question, options)
        section += f"{reply}\n\n"
        logger.debug(f"Received OpenAI resp for file: {filename}")
    except Exception as e:
        logger.error(f"OpenAI returns error for file review for {filename}: {e}")

    logger.debug(f"Sending patch to OpenAI: {filename}")
    question = _render(
        settings.prompt_summarize_diff,
        {"patch_message": truncate(changed_file.patch, limit)},
    )
    options = ChatOptions(model=settings.model, restart=False, system_prompt=system_prompt)
    try:
        reply = await chat_completion(chat_id, question, options)
        section += f"{reply}\n\n"
        logger.debug(f"Received OpenAI resp for patch: {filename}")
    except Exception as e:
        logger.error(f"OpenAI returns error for patch review for {filename}: {e}")
    finally:
        end_conversation(chat_id)

    return section


async def handle_event(
    event: Event, settings: Settings, owner: str, repo: str
) -> Optional[ReviewResult]:
    """Run one webhook delivery end to end. Never raises on external failures."""
    request = classify_event(event, settings)
    if request is None:
        return None

    number = request.pull_number
    pr_ref = f"{owner}/{repo}#{number}"
    logger.info(f"Starting review: {pr_ref} (new_commit={request.new_commit})")

    comment_id = acquire_tracking_comment(owner, repo, request)
    if comment_id is None:
        logger.error(f"No tracking comment for {pr_ref}, aborting")
        return None

    chat_id = f"PR#{number}"
    system_prompt = build_system_prompt(settings, request.title)
    resp = f"{BOT_GREETING}{REVIEWS_HEADER}"
    files_reviewed = 0

    try:
        files = get_pr_files(owner, repo, number)
    except Exception as e:
        logger.error(f"Cannot get file list: {e}")
        files = []

    for changed_file in files:
        if not settings.check_file_type(changed_file.filename):
            continue
        section = await review_file(owner, repo, changed_file, chat_id, system_prompt, settings)
        if section is None:
            continue
        resp += section
        files_reviewed += 1

    published = True
    try:
        update_comment(owner, repo, number, comment_id, resp)
    except Exception as e:
        logger.error(f"Error posting resp: {e}")
        published = False

    return ReviewResult(
        pr=pr_ref,
        comment_id=comment_id,
        files_reviewed=files_reviewed,
        published=published,
    )
