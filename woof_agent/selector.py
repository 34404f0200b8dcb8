# selector.py
# Maps CLI flags onto a tool source: the local fridge plugin or one remote MCP server.
# Zomato wins over any Swiggy flag; among Swiggy, Instamart > Dineout > Food.

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .settings import McpSettings


class ToolSourceKind(Enum):
    NONE = "none"
    LOCAL_MOCK = "local_mock"
    REMOTE_TOOL_SERVER = "remote_tool_server"


class RemoteService(Enum):
    ZOMATO = "Zomato"
    SWIGGY_FOOD = "SwiggyFood"
    SWIGGY_INSTAMART = "SwiggyInstamart"
    SWIGGY_DINEOUT = "SwiggyDineout"


@dataclass(frozen=True)
class CliFlags:
    text_only: bool = False
    zomato: bool = False
    swiggy: bool = False
    swiggy_instamart: bool = False
    swiggy_dineout: bool = False

    @property
    def any_swiggy(self) -> bool:
        return self.swiggy or self.swiggy_instamart or self.swiggy_dineout

    @property
    def uses_remote(self) -> bool:
        return self.zomato or self.any_swiggy


@dataclass(frozen=True)
class ToolSourceDescriptor:
    endpoint: str
    display_name: str
    bearer_token: Optional[str] = None


@dataclass(frozen=True)
class ToolSourceSelection:
    kind: ToolSourceKind
    service: Optional[RemoteService] = None
    descriptor: Optional[ToolSourceDescriptor] = None


def select_tool_source(flags: CliFlags, mcp: McpSettings) -> ToolSourceSelection:
    """Pick the tool source for this session. Pure function of flags and settings."""
    if flags.zomato:
        descriptor = ToolSourceDescriptor(
            endpoint=mcp.zomato.endpoint,
            display_name=mcp.zomato.name,
            bearer_token=mcp.zomato.access_token or None,
        )
        return ToolSourceSelection(ToolSourceKind.REMOTE_TOOL_SERVER, RemoteService.ZOMATO, descriptor)

    if flags.any_swiggy:
        if flags.swiggy_instamart:
            service, endpoint = RemoteService.SWIGGY_INSTAMART, mcp.swiggy.instamart_endpoint
        elif flags.swiggy_dineout:
            service, endpoint = RemoteService.SWIGGY_DINEOUT, mcp.swiggy.dineout_endpoint
        else:
            service, endpoint = RemoteService.SWIGGY_FOOD, mcp.swiggy.food_endpoint
        descriptor = ToolSourceDescriptor(
            endpoint=endpoint,
            display_name=service.value,
            bearer_token=mcp.swiggy.access_token or None,
        )
        return ToolSourceSelection(ToolSourceKind.REMOTE_TOOL_SERVER, service, descriptor)

    return ToolSourceSelection(ToolSourceKind.LOCAL_MOCK)
