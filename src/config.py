"""Configuration for the PR review bot."""

from enum import Enum
from typing import Annotated, Optional

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.core.prompts import load_default_prompt

DEFAULT_SOURCE_FILETYPES: tuple[str, ...] = (
    ".js", ".py", ".java", ".ts", ".c", ".cc", ".cpp", ".cs", ".go", ".rs",
    ".sh", ".rb", ".php", ".lua", ".kt", ".swift", ".scala", ".pl", ".dart", ".jl",
)

DEFAULT_TRIGGER_PHRASE = "flows review"


class ChatModel(str, Enum):
    """Chat models the bot can be configured with."""

    GPT4_32K = "gpt4-32k"
    GPT4 = "gpt4"
    GPT35_TURBO = "gpt3.5-turbo"


DEFAULT_MODEL = ChatModel.GPT35_TURBO


def _env(name: str) -> AliasChoices:
    """Accept an ambient variable in lowercase or conventional uppercase."""
    return AliasChoices(name, name.upper())


class Settings(BaseSettings):
    """Application settings with environment variable support.

    Review settings are read from their exact lowercase names (``language``,
    ``trigger_phrase``, ...), so locale variables such as ``LANGUAGE`` are
    never picked up. Service settings also accept the uppercase spelling.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # App
    environment: str = Field(default="development", validation_alias=_env("environment"))
    debug: bool = Field(default=True, validation_alias=_env("debug"))
    log_level: Optional[str] = Field(default=None, validation_alias=_env("log_level"))
    host: str = Field(default="0.0.0.0", validation_alias=_env("host"))
    port: int = Field(default=8080, validation_alias=_env("port"))

    # Repository the bot listens to
    github_owner: str = Field(default="juntao")
    github_repo: str = Field(default="test")

    # GitHub authentication: a token, or App installation credentials
    github_token: Optional[str] = Field(default=None, validation_alias=_env("github_token"))
    github_app_id: Optional[str] = Field(default=None, validation_alias=_env("github_app_id"))
    github_private_key: Optional[str] = Field(
        default=None, validation_alias=_env("github_private_key")
    )
    github_installation_id: Optional[str] = Field(
        default=None, validation_alias=_env("github_installation_id")
    )
    github_webhook_secret: Optional[str] = Field(
        default=None, validation_alias=_env("github_webhook_secret")
    )

    # LLM
    openai_api_key: Optional[str] = Field(default=None, validation_alias=_env("openai_api_key"))
    openai_base_url: Optional[str] = Field(default=None, validation_alias=_env("openai_base_url"))
    openai_model: ChatModel = Field(default=DEFAULT_MODEL)
    chat_max_retries: int = Field(default=3, validation_alias=_env("chat_max_retries"))

    # Prompt templates
    prompt_system: str = Field(default_factory=lambda: load_default_prompt("system"))
    prompt_translation: str = Field(default_factory=lambda: load_default_prompt("translation"))
    prompt_review_code: str = Field(default_factory=lambda: load_default_prompt("review_code"))
    prompt_summarize_diff: str = Field(
        default_factory=lambda: load_default_prompt("summarize_diff")
    )

    # Review behaviour
    trigger_phrase: str = Field(default=DEFAULT_TRIGGER_PHRASE)
    source_filetypes: Annotated[tuple[str, ...], NoDecode] = Field(
        default=DEFAULT_SOURCE_FILETYPES
    )
    language: Optional[str] = Field(default=None)
    char_soft_limit: int = Field(default=9000, gt=0, validation_alias=_env("char_soft_limit"))
    raw_fetch_timeout: float = Field(
        default=30.0, gt=0, validation_alias=_env("raw_fetch_timeout")
    )

    @field_validator(
        "debug", "port", "chat_max_retries", "char_soft_limit", "raw_fetch_timeout",
        mode="wrap",
    )
    @classmethod
    def _default_on_bad_value(cls, value, handler, info):
        try:
            return handler(value)
        except ValidationError:
            return cls.model_fields[info.field_name].default

    @field_validator("openai_model", mode="before")
    @classmethod
    def _parse_model(cls, value):
        if isinstance(value, ChatModel):
            return value
        try:
            return ChatModel(str(value).strip())
        except ValueError:
            return DEFAULT_MODEL

    @field_validator("source_filetypes", mode="before")
    @classmethod
    def _parse_filetypes(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        filetypes = tuple(s.strip() for s in value or () if s and s.strip())
        return filetypes or DEFAULT_SOURCE_FILETYPES

    @field_validator("trigger_phrase", mode="before")
    @classmethod
    def _parse_trigger_phrase(cls, value):
        if value is None or not str(value).strip():
            return DEFAULT_TRIGGER_PHRASE
        return value

    @field_validator("language", mode="before")
    @classmethod
    def _parse_language(cls, value):
        if value is None or not str(value).strip():
            return None
        return str(value).strip()

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment, defaulting anything unset."""
        return cls()

    @property
    def model(self) -> ChatModel:
        return self.openai_model

    @property
    def output_language(self) -> Optional[str]:
        """None means no translation; replies stay in English."""
        return self.language

    def check_file_type(self, filename: str) -> bool:
        """Return True if the filename ends with a configured source suffix."""
        return any(filename.endswith(suffix) for suffix in self.source_filetypes)


settings = Settings.from_env()
