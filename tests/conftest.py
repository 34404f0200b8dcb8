import json
from pathlib import Path
from typing import Any, List, Sequence

import pytest

from woof_agent.conversation import Turn

SETTINGS_ENV_VARS = (
    "WOOF_AGENT_CONFIG",
    "LLM_PROVIDER",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "GEMINI_BASE_URL",
    "ZOMATO_MCP_ENDPOINT",
    "ZOMATO_MCP_TOKEN",
    "SWIGGY_MCP_TOKEN",
    "SWIGGY_FOOD_ENDPOINT",
    "SWIGGY_INSTAMART_ENDPOINT",
    "SWIGGY_DINEOUT_ENDPOINT",
)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch) -> None:
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: dict) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


class StubBackend:
    """Replays canned replies and records what each call received."""

    def __init__(self, replies: Sequence[Any] = ()):
        self.replies = list(replies)
        self.calls: List[tuple] = []

    async def complete(self, turns: Sequence[Turn], tools: Sequence[Any]) -> str:
        self.calls.append((tuple(turns), tuple(tools)))
        reply = self.replies.pop(0) if self.replies else "ok"
        if isinstance(reply, BaseException):
            raise reply
        return reply


@pytest.fixture
def stub_backend():
    return StubBackend


@pytest.fixture
def fake_mcp(monkeypatch):
    from woof_agent import tool_sources

    from .fakes import FakeMCPTool, reset_fake_mcp

    reset_fake_mcp()
    monkeypatch.setattr(tool_sources, "MCPStreamableHTTPTool", FakeMCPTool)
    yield FakeMCPTool
    reset_fake_mcp()
