"""Shared library utilities."""

from src.core.triggers import (
    BOT_GREETING,
    contains_trigger_phrase,
    is_bot_comment,
)
from src.core.utils import truncate

__all__ = [
    "BOT_GREETING",
    "contains_trigger_phrase",
    "is_bot_comment",
    "truncate",
]
