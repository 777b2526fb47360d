"""Prompt templates using Jinja2."""

from pathlib import Path
from typing import Mapping

from jinja2 import Environment, StrictUndefined, TemplateError

PROMPTS_DIR = Path(__file__).parent
_env = Environment(undefined=StrictUndefined, autoescape=False)


class PromptFormatError(Exception):
    """Raised when a prompt template cannot be rendered."""


def load_default_prompt(name: str) -> str:
    """Read one of the shipped default templates, e.g. ``review_code``."""
    return (PROMPTS_DIR / f"{name}.jinja2").read_text(encoding="utf-8")


def format_prompt(template: str, values: Mapping[str, str]) -> str:
    """Render a template string against a mapping of placeholder values.

    Undefined placeholders and template syntax errors raise PromptFormatError.
    """
    try:
        return _env.from_string(template).render(**values)
    except TemplateError as e:
        raise PromptFormatError(str(e)) from e
