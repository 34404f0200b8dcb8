# tool_sources.py
# Scoped acquisition of the session's tools: the local fridge plugin, or a remote MCP server
# over streamable HTTP. A remote connection is closed on every exit path.

import logging
from contextlib import AsyncExitStack, asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, List
from urllib.parse import urlparse

from agent_framework import MCPStreamableHTTPTool

from .errors import ConfigurationError, ToolTransportError
from .fridge import FRIDGE_TOOLS
from .selector import ToolSourceDescriptor, ToolSourceKind, ToolSourceSelection

log = logging.getLogger(__name__)

LOCAL_SOURCE_NAME = "FridgePlugin"


@dataclass
class ToolSet:
    """Tools handed to the chat backend, plus the names discovered for them."""

    source_name: str
    tools: List[Any] = field(default_factory=list)
    tool_names: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tool_names)


def validate_endpoint(descriptor: ToolSourceDescriptor) -> None:
    parsed = urlparse(descriptor.endpoint or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(
            f"Invalid endpoint for {descriptor.display_name} MCP server: {descriptor.endpoint!r}"
        )


def auth_headers(descriptor: ToolSourceDescriptor) -> dict:
    if descriptor.bearer_token:
        return {"Authorization": f"Bearer {descriptor.bearer_token}"}
    return {}


def local_tool_set() -> ToolSet:
    return ToolSet(
        source_name=LOCAL_SOURCE_NAME,
        tools=list(FRIDGE_TOOLS),
        tool_names=[f.__name__ for f in FRIDGE_TOOLS],
    )


@asynccontextmanager
async def open_tool_source(selection: ToolSourceSelection) -> AsyncIterator[ToolSet]:
    """Yield the ToolSet for a selection, connecting to the MCP server when it is remote."""
    if selection.kind is not ToolSourceKind.REMOTE_TOOL_SERVER or selection.descriptor is None:
        yield local_tool_set()
        return

    descriptor = selection.descriptor
    validate_endpoint(descriptor)

    mcp_tool = MCPStreamableHTTPTool(
        name=descriptor.display_name,
        url=descriptor.endpoint,
        headers=auth_headers(descriptor) or None,
        description=f"{descriptor.display_name} MCP server",
    )

    async with AsyncExitStack() as stack:
        try:
            await stack.enter_async_context(mcp_tool)
        except Exception as e:
            log.info("Connecting to %s at %s failed: %s", descriptor.display_name, descriptor.endpoint, e)
            raise ToolTransportError(descriptor.display_name, e) from e

        names = [f.name for f in (mcp_tool.functions or [])]
        if not names:
            raise ToolTransportError(descriptor.display_name, message="no tools discovered")
        log.info("Discovered %d tools from %s: %s", len(names), descriptor.display_name, ", ".join(names))

        yield ToolSet(source_name=descriptor.display_name, tools=[mcp_tool], tool_names=names)
        log.info("Closing %s MCP connection", descriptor.display_name)
