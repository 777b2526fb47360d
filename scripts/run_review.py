#!/usr/bin/env python3
"""Run a PR review locally, without a webhook delivery."""
import argparse
import asyncio

from dotenv import load_dotenv

load_dotenv()

from src.config import settings
from src.services.github.schemas import PullRequestEvent
from src.services.reviewer.service import handle_event


async def main(pr_number: int, title: str, new_commit: bool):
    event = PullRequestEvent(
        action="synchronize" if new_commit else "opened",
        pull_number=pr_number,
        title=title,
    )
    result = await handle_event(event, settings, settings.github_owner, settings.github_repo)
    print(f"Review result: {result}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("pr_number", type=int)
    parser.add_argument("--title", default="")
    parser.add_argument("--new-commit", action="store_true", help="update the existing bot comment")
    args = parser.parse_args()
    asyncio.run(main(args.pr_number, args.title, args.new_commit))
