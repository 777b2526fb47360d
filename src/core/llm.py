"""Conversation-scoped chat completion using OpenAI."""

from dataclasses import dataclass
from typing import Optional

from langchain_core.chat_history import InMemoryChatMessageHistory
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from src.config import ChatModel, settings
from src.core.exceptions import ChatCompletionError
from src.core.logging import get_logger

logger = get_logger("llm")

SUPPORTED_MODELS = {
    ChatModel.GPT4_32K: "gpt-4-32k",
    ChatModel.GPT4: "gpt-4",
    ChatModel.GPT35_TURBO: "gpt-3.5-turbo",
}


@dataclass(frozen=True)
class ChatOptions:
    """Per-call options for chat_completion."""

    model: ChatModel = ChatModel.GPT35_TURBO
    restart: bool = False
    system_prompt: Optional[str] = None


class ChatSessionStore:
    """In-process message histories keyed by conversation id."""

    def __init__(self) -> None:
        self._sessions: dict[str, InMemoryChatMessageHistory] = {}

    def get(self, conversation_id: str) -> InMemoryChatMessageHistory:
        if conversation_id not in self._sessions:
            self._sessions[conversation_id] = InMemoryChatMessageHistory()
        return self._sessions[conversation_id]

    def reset(self, conversation_id: str) -> None:
        self.get(conversation_id).clear()

    def drop(self, conversation_id: str) -> None:
        self._sessions.pop(conversation_id, None)

    def __contains__(self, conversation_id: str) -> bool:
        return conversation_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


session_store = ChatSessionStore()


def get_chat_llm(
    model: ChatModel = ChatModel.GPT35_TURBO,
    temperature: float = 0.7,
) -> ChatOpenAI:
    """Get a chat LLM instance."""
    api_key = settings.openai_api_key
    if not api_key:
        raise ValueError("OPENAI_API_KEY not configured")

    model_id = SUPPORTED_MODELS.get(model, SUPPORTED_MODELS[ChatModel.GPT35_TURBO])
    logger.debug(f"[LLM] Using OpenAI: {model.value} -> {model_id}")

    return ChatOpenAI(
        model=model_id,
        api_key=api_key,
        base_url=settings.openai_base_url,
        temperature=temperature,
        max_retries=settings.chat_max_retries,
    )


async def chat_completion(
    conversation_id: str,
    message: str,
    options: ChatOptions,
    store: ChatSessionStore | None = None,
) -> str:
    """Send a message within a conversation and return the reply text.

    With ``options.restart`` the conversation history is dropped first.
    History is only extended when the call succeeds.
    """
    if store is None:
        store = session_store
    if options.restart:
        store.reset(conversation_id)
    history = store.get(conversation_id)

    messages: list[BaseMessage] = []
    if options.system_prompt:
        messages.append(SystemMessage(content=options.system_prompt))
    messages.extend(history.messages)
    question = HumanMessage(content=message)
    messages.append(question)

    try:
        llm = get_chat_llm(model=options.model)
        response = await llm.ainvoke(messages)
    except Exception as e:
        raise ChatCompletionError(str(e)) from e

    reply = response.content if isinstance(response.content, str) else str(response.content)
    history.add_messages([question, response])
    return reply


def end_conversation(conversation_id: str, store: ChatSessionStore | None = None) -> None:
    """Forget a conversation once no further calls will continue it."""
    if store is None:
        store = session_store
    store.drop(conversation_id)
