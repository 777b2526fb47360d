"""Bot comment markers and trigger-phrase matching."""

BOT_MARKER = "<!-- pr-review-bot -->"

BOT_GREETING = (
    f"{BOT_MARKER}\n"
    "Hello, I am a [code review bot](https://github.com/flows-network/github-pr-review/) "
    "on [flows.network](https://flows.network/).\n\n"
)

# Comments posted before the hidden marker was introduced start with this.
LEGACY_GREETING_PREFIX = "Hello, I am a [code review bot]"

WAITING_PLACEHOLDER = "It could take a few minutes for me to analyze this PR. Please be patient.\n"

REVIEWS_HEADER = "Here are my reviews of changed source code files in this PR.\n\n------\n\n"


def is_bot_comment(body: str | None) -> bool:
    """Check if a comment body was written by this bot."""
    if not body:
        return False
    return body.startswith(BOT_MARKER) or body.startswith(LEGACY_GREETING_PREFIX)


def contains_trigger_phrase(body: str | None, trigger_phrase: str) -> bool:
    """Check if the comment asks for a review (case-insensitive)."""
    if not body:
        return False
    return trigger_phrase.lower() in body.lower()
