"""
Conversation state and the per-turn request/response.

History is an immutable tuple of turns that always starts with the agent's
system prompt. ``respond`` takes a state and returns a new one; nothing is
recorded when the backend call fails.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol, Sequence, Tuple

from .agents import AgentProfile
from .errors import ProviderError

log = logging.getLogger(__name__)


class Role(Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Turn:
    role: Role
    content: str


@dataclass(frozen=True)
class ConversationState:
    history: Tuple[Turn, ...]

    def __len__(self) -> int:
        return len(self.history)


class ChatBackend(Protocol):
    """Completes a conversation, resolving any tool calls before returning the final text."""

    async def complete(self, turns: Sequence[Turn], tools: Sequence[Any]) -> str:
        ...


def reset_history(profile: AgentProfile) -> ConversationState:
    """Fresh state holding only the profile's system prompt."""
    return ConversationState(history=(Turn(Role.SYSTEM, profile.system_prompt),))


async def respond(
    state: ConversationState,
    user_text: str,
    backend: ChatBackend,
    tools: Sequence[Any] = (),
) -> Tuple[ConversationState, Optional[str]]:
    """
    Run one user turn.

    Returns the new state and the assistant text. Blank input returns the
    state unchanged and no text. Backend failures raise ProviderError and
    leave the caller's state as it was.
    """
    if not user_text or not user_text.strip():
        return state, None

    pending = state.history + (Turn(Role.USER, user_text),)
    try:
        reply = await backend.complete(pending, tools)
    except ProviderError:
        raise
    except Exception as e:
        log.info("Backend call failed: %s", e)
        raise ProviderError(e) from e

    reply = reply or ""
    return ConversationState(history=pending + (Turn(Role.ASSISTANT, reply),)), reply
