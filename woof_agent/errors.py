from typing import Optional


class WoofAgentError(Exception):
    """Base user-facing application error."""


class ConfigurationError(WoofAgentError):
    """Settings are missing or invalid; raised before the chat loop starts."""


class ProviderError(WoofAgentError):
    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)


class ToolTransportError(WoofAgentError):
    def __init__(self, source: str, cause: Optional[BaseException] = None, message: Optional[str] = None) -> None:
        self.source = source
        self.cause = cause
        detail = message or (str(cause) if cause is not None else "unknown failure")
        super().__init__(f"{source} MCP server: {detail}")
