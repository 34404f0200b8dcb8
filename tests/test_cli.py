import io
from pathlib import Path

import pytest
from rich.console import Console

from woof_agent import cli
from woof_agent.selector import CliFlags

pytestmark = pytest.mark.anyio


def scripted(*lines: str):
    remaining = list(lines)

    async def read_line(prompt: str) -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_line


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


def output(console: Console) -> str:
    return console.file.getvalue()


async def run_cli(argv, console, lines, backend):
    args = cli.parse_args(argv)
    return await cli.run(args, console, read_line=scripted(*lines), backend_factory=lambda s, p: backend)


async def test_parse_args_flags() -> None:
    args = cli.parse_args(["--swiggy-dineout", "--text", "--zomato"])
    assert cli.flags_from_args(args) == CliFlags(text_only=True, zomato=True, swiggy_dineout=True)
    assert cli.flags_from_args(cli.parse_args([])) == CliFlags()


async def test_plain_text_session(console, stub_backend) -> None:
    backend = stub_backend(["Milk expires in 3 days."])
    code = await run_cli(["--text"], console, ["", "what's in the fridge?", "EXIT"], backend)

    out = output(console)
    assert code == 0
    assert "Woof Agent CLI - SmartFridge" in out
    assert "Provider: openai (gpt-4o)" in out
    assert "Mode: Plain text" in out
    assert "Milk expires in 3 days." in out
    assert "A2UI JSON" not in out
    assert out.rstrip().endswith("Goodbye!")
    assert len(backend.calls) == 1


async def test_a2ui_session_splits_payload(console, stub_backend) -> None:
    backend = stub_backend(['Here you go!\n---a2ui---\n[{"updateComponents": {"surfaceId": "fridge-ui"}}]'])
    code = await run_cli([], console, ["show inventory"], backend)

    out = output(console)
    assert code == 0
    assert "Mode: A2UI (use --text for plain text)" in out
    assert "Response:" in out
    assert "Here you go!" in out
    assert "A2UI JSON:" in out
    assert '"surfaceId": "fridge-ui"' in out
    assert "---a2ui---" not in out


async def test_a2ui_invalid_payload_printed_verbatim(console, stub_backend) -> None:
    backend = stub_backend(["Hi ---a2ui--- {broken"])
    await run_cli([], console, ["hi"], backend)
    assert "{broken" in output(console)


async def test_a2ui_reply_without_payload(console, stub_backend) -> None:
    backend = stub_backend(["Just words."])
    await run_cli([], console, ["hi"], backend)
    out = output(console)
    assert "Just words." in out
    assert "A2UI JSON" not in out


async def test_provider_error_keeps_session_alive(console, stub_backend) -> None:
    backend = stub_backend([TimeoutError("request timed out"), "second try worked"])
    code = await run_cli(["--text"], console, ["one", "two", "exit"], backend)

    out = output(console)
    assert code == 0
    assert "Error: request timed out" in out
    assert "second try worked" in out
    turns, _ = backend.calls[1]
    assert [t.content for t in turns][1:] == ["two"]


async def test_clear_resets_history(console, stub_backend) -> None:
    backend = stub_backend(["a", "b"])
    await run_cli(["--text"], console, ["one", "Clear", "two"], backend)

    assert "Conversation cleared." in output(console)
    turns, _ = backend.calls[1]
    assert len(turns) == 2


async def test_missing_api_key_exits_before_loop(console) -> None:
    args = cli.parse_args(["--text"])
    code = await cli.run(args, console, read_line=scripted("hello"))
    out = output(console)
    assert code == 1
    assert "OpenAI API key is not configured" in out
    assert "Woof Agent CLI" not in out


async def test_unknown_provider_exits(console, monkeypatch) -> None:
    monkeypatch.setenv("LLM_PROVIDER", "claude")
    code = await cli.run(cli.parse_args([]), console, read_line=scripted())
    assert code == 1
    assert "Unknown provider: claude" in output(console)


async def test_remote_session_announces_discovery(console, stub_backend, fake_mcp) -> None:
    backend = stub_backend(["Found 3 restaurants."])
    code = await run_cli(["--swiggy"], console, ["biryani near me"], backend)

    out = output(console)
    assert code == 0
    assert "Connecting to SwiggyFood MCP server at https://mcp.swiggy.com/food..." in out
    assert "Discovered 2 SwiggyFood tools." in out
    assert "Mode: SwiggyFood (MCP)" in out
    assert "Found 3 restaurants." in out
    _, tools = backend.calls[0]
    assert tools == (fake_mcp.instances[0],)
    assert fake_mcp.instances[0].closed


async def test_remote_discovery_failure_exits(console, stub_backend, fake_mcp) -> None:
    fake_mcp.fail_on_connect = ConnectionError("401 Unauthorized")
    backend = stub_backend()
    code = await run_cli(["--swiggy-instamart"], console, ["hi"], backend)

    out = output(console)
    assert code == 1
    assert "Tool server error: SwiggyInstamart MCP server: 401 Unauthorized" in out
    assert backend.calls == []


async def test_zomato_without_endpoint_is_configuration_error(console, stub_backend, fake_mcp) -> None:
    code = await run_cli(["--zomato", "--swiggy"], console, ["hi"], stub_backend())
    assert code == 1
    assert "Invalid endpoint for Zomato MCP server" in output(console)


async def test_settings_file_flag(console, stub_backend, tmp_path: Path, write_json) -> None:
    path = write_json(tmp_path / "woof.json", {"LlmProviders": {"DefaultProvider": "gemini"}})
    backend = stub_backend()
    await run_cli(["--text", "--config", str(path)], console, [], backend)
    assert "Provider: gemini (gemini-2.0-flash)" in output(console)


async def test_missing_settings_file_exits(console, stub_backend, tmp_path: Path) -> None:
    code = await run_cli(["--config", str(tmp_path / "typo.json")], console, ["hi"], stub_backend())
    out = output(console)
    assert code == 1
    assert "Configuration error: Settings file" in out
    assert "Woof Agent CLI" not in out


async def test_mistyped_setting_exits(console, stub_backend, tmp_path: Path, write_json) -> None:
    path = write_json(tmp_path / "woof.json", {"LlmProviders": {"DefaultProvider": 1}})
    code = await run_cli(["--config", str(path)], console, ["hi"], stub_backend())
    assert code == 1
    assert "'LlmProviders.DefaultProvider' must be a string" in output(console)


async def test_cli_logger_follows_module_name() -> None:
    assert cli.log.name == "woof_agent.cli"
