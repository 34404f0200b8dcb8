"""
woof_agent - chat CLI wiring an LLM provider to smart-fridge or MCP tools.

- settings: appsettings.json / .env / environment resolution
- selector: which tool source a set of CLI flags asks for
- agents: agent profiles (name, system prompt, output format)
- conversation: turn history and the per-turn request/response
- response: A2UI text/UI payload splitting
- tool_sources: local fridge plugin or remote MCP server
- providers: OpenAI / Gemini chat clients
- cli: the interactive loop
"""

__version__ = "0.1.0"
