# cli.py
# Interactive chat CLI: flags -> settings -> provider -> tool source -> agent -> prompt loop.
#
#   woof-agent                      A2UI smart-fridge agent (local mock tools)
#   woof-agent --text               plain-text smart-fridge agent
#   woof-agent --zomato             Zomato MCP server
#   woof-agent --swiggy[-instamart|-dineout]

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Awaitable, Callable, List, Optional

import anyio
from rich.console import Console
from rich.json import JSON
from rich.rule import Rule

from .agents import AgentProfile, OutputMode, build_agent
from .conversation import ChatBackend, ConversationState, reset_history, respond
from .errors import ConfigurationError, ProviderError, ToolTransportError
from .providers import AgentFrameworkBackend, build_chat_client
from .response import split_response
from .selector import CliFlags, ToolSourceSelection, select_tool_source
from .settings import Settings, load_settings
from .tool_sources import ToolSet, open_tool_source

log = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
CLEAR_COMMAND = "clear"

ReadLine = Callable[[str], Awaitable[str]]


# ----------------- Arguments -----------------
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="woof-agent", description="Woof Agent chat CLI")
    parser.add_argument("--text", action="store_true", help="plain text replies instead of A2UI")
    parser.add_argument("--zomato", action="store_true", help="use the Zomato MCP server")
    parser.add_argument("--swiggy", action="store_true", help="use the Swiggy Food MCP server")
    parser.add_argument("--swiggy-instamart", action="store_true", help="use the Swiggy Instamart MCP server")
    parser.add_argument("--swiggy-dineout", action="store_true", help="use the Swiggy Dineout MCP server")
    parser.add_argument("--config", type=Path, default=None,
                        help="settings file (default: $WOOF_AGENT_CONFIG or ./appsettings.json)")
    return parser.parse_args(argv)


def flags_from_args(args: argparse.Namespace) -> CliFlags:
    return CliFlags(
        text_only=args.text,
        zomato=args.zomato,
        swiggy=args.swiggy,
        swiggy_instamart=args.swiggy_instamart,
        swiggy_dineout=args.swiggy_dineout,
    )


# ----------------- Presentation -----------------
def print_banner(console: Console, profile: AgentProfile, settings: Settings) -> None:
    console.print(f"Woof Agent CLI - {profile.name}", markup=False)
    console.print(f"Provider: {settings.llm.default_provider} ({settings.llm.model_id()})", markup=False)
    if profile.uses_mcp:
        console.print(f"Mode: {profile.name} (MCP)", markup=False)
    elif profile.uses_dual_format:
        console.print("Mode: A2UI (use --text for plain text)", markup=False)
    else:
        console.print("Mode: Plain text", markup=False)
    console.print(f"Type your prompt (or '{EXIT_COMMAND}' to quit, '{CLEAR_COMMAND}' to reset):", markup=False)
    console.print()


def render_reply(console: Console, profile: AgentProfile, reply: str) -> None:
    console.print()
    if not profile.uses_dual_format:
        console.print(reply, markup=False, highlight=False)
        console.print()
        return

    parsed = split_response(reply)
    console.print("📝 Response:", markup=False)
    console.print(parsed.conversational_text, markup=False, highlight=False)
    if parsed.structured_payload:
        console.print()
        console.print("🎨 A2UI JSON:", markup=False)
        console.print(Rule())
        try:
            console.print(JSON(parsed.structured_payload))
        except json.JSONDecodeError:
            log.debug("A2UI payload is not valid JSON, printing as-is")
            console.print(parsed.structured_payload, markup=False, highlight=False)
        console.print(Rule())
    console.print()


async def read_stdin_line(prompt: str) -> str:
    return await anyio.to_thread.run_sync(input, prompt)


# ----------------- Loop -----------------
async def chat_loop(
    profile: AgentProfile,
    backend: ChatBackend,
    tool_set: ToolSet,
    console: Console,
    read_line: ReadLine = read_stdin_line,
) -> ConversationState:
    """Run the prompt loop until exit/EOF. One failed turn never ends the session."""
    state = reset_history(profile)
    while True:
        try:
            line = await read_line("> ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if not line or not line.strip():
            continue
        command = line.strip().lower()
        if command == EXIT_COMMAND:
            break
        if command == CLEAR_COMMAND:
            state = reset_history(profile)
            console.print("Conversation cleared.")
            console.print()
            continue

        try:
            state, reply = await respond(state, line, backend, tool_set.tools)
        except ProviderError as e:
            log.debug("Turn failed: %r", e.cause)
            console.print(f"Error: {e}", markup=False)
            console.print()
            continue

        if reply is not None:
            render_reply(console, profile, reply)
    return state


# ----------------- Entry -----------------
async def run(
    args: argparse.Namespace,
    console: Console,
    read_line: ReadLine = read_stdin_line,
    backend_factory: Optional[Callable[[Settings, AgentProfile], ChatBackend]] = None,
) -> int:
    flags = flags_from_args(args)
    output_mode = OutputMode.PLAIN_TEXT if flags.text_only else OutputMode.RICH_UI

    try:
        settings = load_settings(args.config)
        selection: ToolSourceSelection = select_tool_source(flags, settings.mcp)
        profile = build_agent(selection, output_mode)
        if backend_factory is None:
            backend = AgentFrameworkBackend(build_chat_client(settings.llm), profile.name)
        else:
            backend = backend_factory(settings, profile)
    except ConfigurationError as e:
        log.debug("Configuration error: %s", e)
        console.print(f"Configuration error: {e}", markup=False)
        return 1

    descriptor = selection.descriptor
    if descriptor is not None:
        console.print(f"Connecting to {descriptor.display_name} MCP server at {descriptor.endpoint}...", markup=False)

    try:
        async with open_tool_source(selection) as tool_set:
            if descriptor is not None:
                console.print(f"Discovered {len(tool_set)} {descriptor.display_name} tools.", markup=False)
            print_banner(console, profile, settings)
            await chat_loop(profile, backend, tool_set, console, read_line)
    except ConfigurationError as e:
        console.print(f"Configuration error: {e}", markup=False)
        return 1
    except ToolTransportError as e:
        console.print(f"Tool server error: {e}", markup=False)
        return 1

    console.print("Goodbye!")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING"),
                        format="%(asctime)s %(levelname)s %(name)s :: %(message)s")
    args = parse_args(argv)
    console = Console()
    try:
        return anyio.run(run, args, console)
    except KeyboardInterrupt:
        console.print()
        console.print("Goodbye!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
