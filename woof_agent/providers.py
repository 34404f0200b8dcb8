# providers.py
# LLM provider wiring on Microsoft Agent Framework (MAF).
# OpenAI goes through OpenAIChatClient (custom endpoint optional: OpenRouter, Azure, local);
# Gemini goes through its OpenAI-compatible endpoint with the same client.

import logging
from typing import Any, Sequence

from agent_framework import ChatAgent, ChatMessage, Role as ChatRole
from agent_framework.openai import OpenAIChatClient

from .conversation import Role, Turn
from .errors import ConfigurationError
from .settings import LlmSettings

log = logging.getLogger(__name__)

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"

_ROLES = {
    Role.SYSTEM: ChatRole.SYSTEM,
    Role.USER: ChatRole.USER,
    Role.ASSISTANT: ChatRole.ASSISTANT,
}


def build_chat_client(settings: LlmSettings) -> OpenAIChatClient:
    """Create the chat client for the default provider, or raise ConfigurationError."""
    provider = settings.default_provider.lower()

    if provider == "openai":
        if not (settings.openai.api_key or "").strip():
            raise ConfigurationError("OpenAI API key is not configured. Set OPENAI_API_KEY or LlmProviders.OpenAi.ApiKey.")
        log.info("Provider: openai (%s) endpoint=%s", settings.openai.model_id, settings.openai.endpoint or "default")
        if settings.openai.endpoint:
            return OpenAIChatClient(
                model_id=settings.openai.model_id,
                api_key=settings.openai.api_key,
                base_url=settings.openai.endpoint,
            )
        return OpenAIChatClient(model_id=settings.openai.model_id, api_key=settings.openai.api_key)

    if provider == "gemini":
        if not (settings.gemini.api_key or "").strip():
            raise ConfigurationError("Gemini API key is not configured. Set GEMINI_API_KEY or LlmProviders.Gemini.ApiKey.")
        base_url = settings.gemini.endpoint or GEMINI_OPENAI_BASE_URL
        log.info("Provider: gemini (%s) endpoint=%s", settings.gemini.model_id, base_url)
        return OpenAIChatClient(
            model_id=settings.gemini.model_id,
            api_key=settings.gemini.api_key,
            base_url=base_url,
        )

    raise ConfigurationError(f"Unknown provider: {settings.default_provider}")


def to_chat_messages(turns: Sequence[Turn]) -> list:
    return [ChatMessage(role=_ROLES[t.role], text=t.content) for t in turns]


class AgentFrameworkBackend:
    """
    Chat backend on a MAF ChatAgent.

    The agent carries no instructions or thread of its own: every call gets the
    full history, system turn included. Tool calls are resolved by the
    framework's automatic function invocation before the final reply comes back.
    """

    def __init__(self, chat_client: Any, name: str):
        self.agent = ChatAgent(chat_client=chat_client, name=name)

    async def complete(self, turns: Sequence[Turn], tools: Sequence[Any]) -> str:
        result = await self.agent.run(to_chat_messages(turns), tools=list(tools) or None)
        return result.text or ""
