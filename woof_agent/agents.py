# agents.py
# Agent profiles: one record per session naming the agent, its system prompt and its output format.

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .prompts import SYSTEM_PROMPTS
from .selector import RemoteService, ToolSourceKind, ToolSourceSelection


class OutputMode(Enum):
    RICH_UI = "rich_ui"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True)
class AgentProfile:
    name: str
    system_prompt: str
    uses_dual_format: bool
    tool_source_kind: ToolSourceKind
    service: Optional[RemoteService] = None

    @property
    def uses_mcp(self) -> bool:
        return self.tool_source_kind is ToolSourceKind.REMOTE_TOOL_SERVER


def build_agent(
    selection: ToolSourceSelection,
    output_mode: OutputMode,
    prompts: Mapping[str, str] = SYSTEM_PROMPTS,
) -> AgentProfile:
    """
    Build the agent profile for a tool source and output mode.

    Remote agents are named after their service and always answer in plain text;
    the output mode only picks between the two local fridge agents.
    """
    if selection.kind is ToolSourceKind.REMOTE_TOOL_SERVER:
        if selection.service is None:
            raise ValueError("Remote tool source selection has no service")
        name = selection.service.value
        return AgentProfile(
            name=name,
            system_prompt=prompts[name],
            uses_dual_format=False,
            tool_source_kind=selection.kind,
            service=selection.service,
        )

    if output_mode is OutputMode.RICH_UI:
        name, dual = "A2UIFridge", True
    else:
        name, dual = "SmartFridge", False
    return AgentProfile(
        name=name,
        system_prompt=prompts[name],
        uses_dual_format=dual,
        tool_source_kind=selection.kind,
    )
