# settings.py
# Typed settings for the LLM providers and MCP tool servers.
# Sources, lowest precedence first: appsettings.json, .env (secrets), process environment.

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

log = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = Path("appsettings.json")

LLM_SECTION = "LlmProviders"
MCP_SECTION = "McpServers"


@dataclass
class OpenAiSettings:
    api_key: str = ""
    model_id: str = "gpt-4o"
    endpoint: Optional[str] = None  # OpenRouter, Azure, local, ...


@dataclass
class GeminiSettings:
    api_key: str = ""
    model_id: str = "gemini-2.0-flash"
    endpoint: Optional[str] = None


@dataclass
class LlmSettings:
    default_provider: str = "openai"
    openai: OpenAiSettings = field(default_factory=OpenAiSettings)
    gemini: GeminiSettings = field(default_factory=GeminiSettings)

    def model_id(self) -> str:
        """Model id of the default provider, 'unknown' for an unrecognized provider."""
        provider = self.default_provider.lower()
        if provider == "openai":
            return self.openai.model_id
        if provider == "gemini":
            return self.gemini.model_id
        return "unknown"


@dataclass
class ZomatoMcpSettings:
    endpoint: str = ""
    name: str = "Zomato"
    access_token: Optional[str] = None


@dataclass
class SwiggyMcpSettings:
    access_token: Optional[str] = None
    food_endpoint: str = "https://mcp.swiggy.com/food"
    instamart_endpoint: str = "https://mcp.swiggy.com/im"
    dineout_endpoint: str = "https://mcp.swiggy.com/dineout"


@dataclass
class McpSettings:
    zomato: ZomatoMcpSettings = field(default_factory=ZomatoMcpSettings)
    swiggy: SwiggyMcpSettings = field(default_factory=SwiggyMcpSettings)


@dataclass
class Settings:
    llm: LlmSettings = field(default_factory=LlmSettings)
    mcp: McpSettings = field(default_factory=McpSettings)


# ----------------- File loading -----------------
def load_settings_file(path: Path, required: bool = False) -> dict:
    """Read the JSON settings file; a missing file is an empty config unless required."""
    if not path.exists():
        if required:
            raise ConfigurationError(f"Settings file {path} not found")
        log.debug("No settings file at %s", path)
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in settings file {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must contain a JSON object")
    return data


def _section(data: dict, name: str) -> dict:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"Settings section '{name}' must be an object")
    return value


def _value(data: dict, section: str, key: str, current, optional: bool = False):
    """A string setting from a section; null is accepted only for optional fields."""
    if key not in data:
        return current
    value = data[key]
    if value is None and optional:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"Setting '{section}.{key}' must be a string")
    return value


def _env(name: str, current):
    value = os.getenv(name)
    return value if value else current


# ----------------- Binding -----------------
def bind_settings(data: dict) -> Settings:
    """Bind a parsed settings document, then overlay environment variables."""
    llm_data = _section(data, LLM_SECTION)
    openai_data = _section(llm_data, "OpenAi")
    gemini_data = _section(llm_data, "Gemini")
    mcp_data = _section(data, MCP_SECTION)
    zomato_data = _section(mcp_data, "Zomato")
    swiggy_data = _section(mcp_data, "Swiggy")

    openai_key = f"{LLM_SECTION}.OpenAi"
    gemini_key = f"{LLM_SECTION}.Gemini"
    zomato_key = f"{MCP_SECTION}.Zomato"
    swiggy_key = f"{MCP_SECTION}.Swiggy"

    llm = LlmSettings()
    llm.default_provider = _env(
        "LLM_PROVIDER", _value(llm_data, LLM_SECTION, "DefaultProvider", llm.default_provider)
    )
    llm.openai.api_key = _env("OPENAI_API_KEY", _value(openai_data, openai_key, "ApiKey", llm.openai.api_key))
    llm.openai.model_id = _env("OPENAI_MODEL", _value(openai_data, openai_key, "ModelId", llm.openai.model_id))
    llm.openai.endpoint = _env(
        "OPENAI_BASE_URL", _value(openai_data, openai_key, "Endpoint", llm.openai.endpoint, optional=True)
    )
    llm.gemini.api_key = _env("GEMINI_API_KEY", _value(gemini_data, gemini_key, "ApiKey", llm.gemini.api_key))
    llm.gemini.model_id = _env("GEMINI_MODEL", _value(gemini_data, gemini_key, "ModelId", llm.gemini.model_id))
    llm.gemini.endpoint = _env(
        "GEMINI_BASE_URL", _value(gemini_data, gemini_key, "Endpoint", llm.gemini.endpoint, optional=True)
    )

    mcp = McpSettings()
    mcp.zomato.endpoint = _env("ZOMATO_MCP_ENDPOINT", _value(zomato_data, zomato_key, "Endpoint", mcp.zomato.endpoint))
    mcp.zomato.name = _value(zomato_data, zomato_key, "Name", mcp.zomato.name)
    mcp.zomato.access_token = _env(
        "ZOMATO_MCP_TOKEN", _value(zomato_data, zomato_key, "AccessToken", mcp.zomato.access_token, optional=True)
    )
    mcp.swiggy.access_token = _env(
        "SWIGGY_MCP_TOKEN", _value(swiggy_data, swiggy_key, "AccessToken", mcp.swiggy.access_token, optional=True)
    )
    mcp.swiggy.food_endpoint = _env(
        "SWIGGY_FOOD_ENDPOINT", _value(swiggy_data, swiggy_key, "FoodEndpoint", mcp.swiggy.food_endpoint)
    )
    mcp.swiggy.instamart_endpoint = _env(
        "SWIGGY_INSTAMART_ENDPOINT", _value(swiggy_data, swiggy_key, "InstamartEndpoint", mcp.swiggy.instamart_endpoint)
    )
    mcp.swiggy.dineout_endpoint = _env(
        "SWIGGY_DINEOUT_ENDPOINT", _value(swiggy_data, swiggy_key, "DineoutEndpoint", mcp.swiggy.dineout_endpoint)
    )

    return Settings(llm=llm, mcp=mcp)


def load_settings(path: Optional[Path] = None, dotenv: bool = True) -> Settings:
    """
    Resolve settings from file, .env and environment.

    Only the implicit ./appsettings.json may be missing; a file named by the
    caller or by WOOF_AGENT_CONFIG must exist.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True), override=False)
    required = True
    if path is None:
        configured = os.getenv("WOOF_AGENT_CONFIG")
        required = bool(configured)
        path = Path(configured) if configured else DEFAULT_SETTINGS_FILE
    return bind_settings(load_settings_file(path, required=required))
